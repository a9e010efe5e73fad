from sqlalchemy import Column, Integer, String, Date, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from database.db import Base


class AttendanceRecord(Base):
    __tablename__ = "attendance"  # 출결 기록 테이블
    # 학생+반+날짜 조합당 출결은 1건
    __table_args__ = (UniqueConstraint("student_id", "class_id", "date", name="uq_attendance_student_class_date"),)

    id = Column(Integer, primary_key=True, index=True)         # 출결 고유 ID (Primary Key)
    student_id = Column(Integer, ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True)
    class_id = Column(Integer, ForeignKey("classes.id", ondelete="CASCADE"), nullable=False, index=True)
    date = Column(Date, nullable=False)                        # 날짜
    status = Column(String(20), nullable=False)                # present / absent / tardy / excused
    reason = Column(String(200), default="")                   # 사유 (excused 시 사용)

    student = relationship("Student", back_populates="attendance_records")
    class_section = relationship("ClassSection", back_populates="attendance_records")
