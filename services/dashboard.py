"""
services/dashboard.py

메인 화면 요약 통계
- 평균 GPA는 점수가 0~100 스케일이라고 가정한 단순 환산 (검증하지 않음)
"""

from typing import Sequence

from schemas.dashboard import DashboardSummary
from schemas.enums import AttendanceStatus
from utils.numbers import round_half_up, round_one_decimal


def summarize(students: Sequence, classes: Sequence, attendance: Sequence, grades: Sequence) -> DashboardSummary:
    present = sum(1 for r in attendance if r.status == AttendanceStatus.PRESENT.value)
    average_attendance = round_half_up(present / len(attendance) * 100) if attendance else 0

    average_score = sum(g.score for g in grades) / len(grades) if grades else 0
    average_gpa = average_score / 100 * 4.0

    return DashboardSummary(
        total_students=len(students),
        total_classes=len(classes),
        average_attendance=average_attendance,
        average_gpa=f"{round_one_decimal(average_gpa):.1f}",
    )
