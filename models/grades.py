from sqlalchemy import Column, Integer, Float, String, Date, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from database.db import Base


class Grade(Base):
    __tablename__ = "grades"  # 과제별 성적 테이블
    # 학생+과제 조합당 성적은 1건
    __table_args__ = (UniqueConstraint("student_id", "assignment_id", name="uq_grade_student_assignment"),)

    id = Column(Integer, primary_key=True, index=True)     # 성적 고유 ID (Primary Key)
    student_id = Column(Integer, ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True)
    assignment_id = Column(Integer, ForeignKey("assignments.id", ondelete="CASCADE"), nullable=False, index=True)
    score = Column(Float, nullable=False)                  # 원점수 (만점 초과 여부는 검증하지 않음)
    submitted_date = Column(Date)                          # 제출일
    comments = Column(String(500), default="")             # 코멘트

    student = relationship("Student", back_populates="grades")
    assignment = relationship("Assignment", back_populates="grades")
