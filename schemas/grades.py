from datetime import date
from typing import List, Optional

from pydantic import Field

from schemas.common import CamelModel
from schemas.enums import LetterGrade


class GradeCreate(CamelModel):
    student_id: int                              # 학생 ID
    assignment_id: int                           # 과제 ID
    score: float = Field(..., ge=0)              # 원점수
    submitted_date: Optional[date] = None        # 제출일 (미입력 시 오늘)
    comments: str = ""                           # 코멘트


class Grade(GradeCreate):
    id: int                                      # 성적 고유 ID


# ==========================================================
# 성적표(gradebook) 화면용
# ==========================================================

class GradeCell(CamelModel):
    assignment_id: int
    grade_id: Optional[int] = None
    score: Optional[float] = None
    points_possible: float
    percentage: Optional[float] = None
    letter: Optional[LetterGrade] = None
    display: str                                 # "85/100" 또는 미입력 표시("—")


class GradebookRow(CamelModel):
    student_id: int
    student_name: str
    cells: List[GradeCell]
    average: Optional[float] = None              # 원점수 평균 (소수 1자리), 성적 없으면 null
