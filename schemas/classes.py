from typing import List

from pydantic import Field, field_validator

from schemas.common import CamelModel
from schemas.enums import Subject


# ✅ 생성(Create) 요청용 스키마
# → id는 DB에서 자동 생성되므로 제외
class ClassSectionCreate(CamelModel):
    name: str                                        # 수업명
    subject: Subject                                 # 과목
    section: str = ""                                # 분반
    schedule: str = ""                               # 시간표
    room: str = ""                                   # 강의실
    student_ids: List[int] = Field(default_factory=list)   # 수강 학생 ID 목록

    @field_validator("student_ids", mode="before")
    @classmethod
    def _split_ids(cls, v):
        # "1, 2,3" 형태의 문자열도 허용 (숫자가 아닌 항목이 있으면 검증 실패)
        if v is None:
            return []
        if isinstance(v, str):
            tokens = [p.strip() for p in v.split(",") if p.strip()]
            bad = [t for t in tokens if not t.isdigit()]
            if bad:
                raise ValueError(f"student ids must be integers, got {', '.join(bad)}")
            return [int(t) for t in tokens]
        return v


# ✅ 응답(Response) / 조회(Read) 용 스키마
class ClassSection(ClassSectionCreate):
    id: int


# ✅ 수강 명단 교체 요청
class MembershipUpdate(CamelModel):
    student_ids: List[int]
