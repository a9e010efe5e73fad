from datetime import date
from typing import Optional

from pydantic import Field

from schemas.common import CamelModel
from schemas.enums import AssignmentCategory


class AssignmentCreate(CamelModel):
    name: str                                    # 과제명
    category: AssignmentCategory                 # 과제 유형
    points_possible: float = Field(..., gt=0)    # 만점 (0 이하이면 백분율 계산 불가)
    due_date: Optional[date] = None              # 마감일
    weight: float = 1.0                          # 가중치
    class_id: int                                # 소속 반 ID


class Assignment(AssignmentCreate):
    id: int
