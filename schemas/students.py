from datetime import date
from typing import Optional

from pydantic import computed_field

from schemas.common import CamelModel
from schemas.enums import GradeLevel


# ✅ 입력용 (POST/PUT 등)
class StudentCreate(CamelModel):
    first_name: str                          # 이름
    last_name: str                           # 성
    email: str                               # 이메일
    date_of_birth: Optional[date] = None     # 생년월일
    enrollment_date: Optional[date] = None   # 입학일
    grade_level: GradeLevel                  # 학년 (9th ~ 12th)
    student_id: str                          # 학번 (외부 표기용)
    photo_url: Optional[str] = None          # 사진 URL


# ✅ 전체 출력용 (GET, 상세조회 등)
class Student(StudentCreate):
    id: int

    @computed_field(alias="fullName")
    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
