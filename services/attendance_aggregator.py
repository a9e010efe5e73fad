"""
services/attendance_aggregator.py

출결 집계 로직 (순수 함수)
- monthly_stats: 학생/반/월 단위 출석 통계
- quick_mark_all: 반 전체 일괄 출결 upsert 목록 생성
"""

import calendar
from datetime import date, datetime
from typing import Iterable, List, Optional, Tuple

from schemas.attendance import AttendanceCreate, MonthlyStats
from schemas.enums import AttendanceStatus
from services.membership import students_of
from utils.numbers import round_half_up


def parse_month(month: str) -> date:
    """ "2024-03" → date(2024, 3, 1) """
    return datetime.strptime(month, "%Y-%m").date()


def month_bounds(month: date) -> Tuple[date, date]:
    """해당 월의 1일 ~ 말일"""
    last_day = calendar.monthrange(month.year, month.month)[1]
    return month.replace(day=1), month.replace(day=last_day)


def month_days(month: date) -> List[date]:
    start, end = month_bounds(month)
    return [start.replace(day=d) for d in range(1, end.day + 1)]


def _as_date(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def attendance_record_for(student_id: int, class_id: int, day: date, all_attendance: Iterable):
    for record in all_attendance:
        if (
            record.student_id == student_id
            and record.class_id == class_id
            and _as_date(record.date) == day
        ):
            return record
    return None


def monthly_stats(student_id: int, class_id: int, month: date, all_attendance: Iterable) -> MonthlyStats:
    """
    월간 출석 통계
    - 기간: 해당 월 1일 ~ 말일 (양 끝 포함)
    - percentage: present / total × 100 (0.5 올림), 기록이 없으면 0
    """
    start, end = month_bounds(month)
    records = [
        r for r in all_attendance
        if r.student_id == student_id
        and r.class_id == class_id
        and start <= _as_date(r.date) <= end
    ]
    total = len(records)
    present = sum(1 for r in records if r.status == AttendanceStatus.PRESENT.value)
    percentage = round_half_up(present / total * 100) if total else 0
    return MonthlyStats(present=present, total=total, percentage=percentage)


def quick_mark_all(
    class_section,
    day: date,
    status: AttendanceStatus,
    all_students: Iterable,
    reason: Optional[str] = None,
) -> List[AttendanceCreate]:
    """
    반 수강생 전원에 대한 출결 upsert 목록
    - 각 항목은 (학생, 반, 날짜) 키로 독립 처리됨
    """
    return [
        AttendanceCreate(
            student_id=student.id,
            class_id=class_section.id,
            date=day,
            status=status,
            reason=reason,
        )
        for student in students_of(class_section, all_students)
    ]
