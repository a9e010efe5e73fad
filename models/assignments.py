from sqlalchemy import Column, Integer, String, Float, Date, ForeignKey
from sqlalchemy.orm import relationship
from database.db import Base


class Assignment(Base):
    __tablename__ = "assignments"  # 과제/시험 정보 테이블

    id = Column(Integer, primary_key=True, index=True)                       # 과제 고유 ID
    name = Column(String(200), nullable=False)                               # 과제명
    category = Column(String(20), nullable=False)                            # homework / quiz / test / project / participation
    points_possible = Column(Float, nullable=False)                          # 만점 (양수)
    due_date = Column(Date)                                                  # 마감일
    weight = Column(Float, nullable=False, default=1.0)                      # 가중치 (현재 평균 계산에는 미사용)
    class_id = Column(Integer, ForeignKey("classes.id", ondelete="CASCADE"), nullable=False, index=True)

    class_section = relationship("ClassSection", back_populates="assignments")
    grades = relationship("Grade", back_populates="assignment", cascade="all, delete-orphan")
