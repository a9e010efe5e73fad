from sqlalchemy import Column, Integer, String, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from database.db import Base


class ClassSection(Base):
    __tablename__ = "classes"

    id = Column(Integer, primary_key=True, index=True)      # 학급 고유 ID (PK)
    name = Column(String(100), nullable=False)              # 수업명 (예: Algebra I)
    subject = Column(String(50), nullable=False)            # 과목 (Mathematics, Physics, ...)
    section = Column(String(20), nullable=False, default="")  # 분반 표기 (예: A)
    schedule = Column(String(100))                          # 시간표 문자열 (예: MWF 9:00)
    room = Column(String(50))                               # 강의실

    # ==========================================================
    # [관계 설정]
    # ==========================================================

    # ✅ 수강 명단 (N:M, enrollments 테이블 경유)
    #    - 등록 순서대로 정렬
    enrollments = relationship(
        "Enrollment",
        back_populates="class_section",
        cascade="all, delete-orphan",
        order_by="Enrollment.id",
    )

    # ✅ 반 삭제 시 과제(→ 성적)와 출결도 함께 삭제
    assignments = relationship("Assignment", back_populates="class_section", cascade="all, delete-orphan")
    attendance_records = relationship("AttendanceRecord", back_populates="class_section", cascade="all, delete-orphan")

    @property
    def student_ids(self) -> list:
        return [e.student_id for e in self.enrollments]


class Enrollment(Base):
    __tablename__ = "enrollments"  # 학생 ⟷ 학급 수강 관계 테이블
    __table_args__ = (UniqueConstraint("student_id", "class_id", name="uq_enrollment_student_class"),)

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True)
    class_id = Column(Integer, ForeignKey("classes.id", ondelete="CASCADE"), nullable=False, index=True)

    student = relationship("Student", back_populates="enrollments")
    class_section = relationship("ClassSection", back_populates="enrollments")
