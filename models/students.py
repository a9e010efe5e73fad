from sqlalchemy import Column, Integer, String, Date
from sqlalchemy.orm import relationship
from database.db import Base


class Student(Base):
    __tablename__ = "students"  # 학생 기본 정보 테이블

    id = Column(Integer, primary_key=True, index=True)              # 고유 학생 ID (Primary Key, 자동 증가)
    first_name = Column(String(100), nullable=False)                # 이름
    last_name = Column(String(100), nullable=False)                 # 성
    email = Column(String(200), nullable=False)                     # 이메일
    date_of_birth = Column(Date)                                    # 생년월일
    enrollment_date = Column(Date)                                  # 입학일
    grade_level = Column(String(10), nullable=False)                # 학년 (9th ~ 12th)
    student_id = Column(String(50), nullable=False)                 # 학번 (외부 표기용, PK 아님)
    photo_url = Column(String(500))                                 # 사진 URL (선택)

    # ==========================================================
    # [관계 설정] 학생 삭제 시 성적/출결/수강 기록도 함께 삭제
    # ==========================================================
    enrollments = relationship("Enrollment", back_populates="student", cascade="all, delete-orphan")
    grades = relationship("Grade", back_populates="student", cascade="all, delete-orphan")
    attendance_records = relationship("AttendanceRecord", back_populates="student", cascade="all, delete-orphan")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
