import datetime as dt
from typing import Dict, List, Optional

from schemas.common import CamelModel
from schemas.enums import AttendanceStatus


class AttendanceCreate(CamelModel):
    student_id: int                          # 학생 ID
    class_id: int                            # 반 ID
    date: dt.date                            # 날짜
    status: AttendanceStatus                 # 출결 상태
    reason: Optional[str] = None             # 사유 (excused 시 미입력이면 기본값)


class Attendance(AttendanceCreate):
    id: int                                  # 출결 고유 ID


# ✅ 반 전체 일괄 출결 처리
class MarkAllRequest(CamelModel):
    date: dt.date
    status: AttendanceStatus
    reason: Optional[str] = None


# ==========================================================
# 월간 출석부 화면용
# ==========================================================

class MonthlyStats(CamelModel):
    present: int
    total: int
    percentage: int


class AttendanceSheetRow(CamelModel):
    student_id: int
    student_name: str
    stats: MonthlyStats
    days: Dict[str, Optional[AttendanceStatus]]   # "2024-03-01" → 상태 (기록 없으면 null)


class AttendanceSheet(CamelModel):
    class_id: int
    month: str
    rows: List[AttendanceSheetRow]
