"""
services/grade_aggregator.py

성적표 계산 로직 (순수 함수)
- grade_for: 학생+과제 성적 조회
- letter_grade: 백분율 → A~F 등급
- student_average: 반 과제 기준 원점수 평균
- grade_cell: 성적표 셀 표시값

성적이 없는 경우(None)와 0점은 절대 같은 값으로 취급하지 않는다.
"""

from typing import Iterable, List, Optional

from config.settings import settings
from schemas.enums import LetterGrade
from schemas.grades import GradeCell

PLACEHOLDER = settings.GRADE_PLACEHOLDER   # 성적 미입력 셀 표시값

# (하한 백분율, 등급) — 하한 포함
LETTER_BANDS = (
    (90, LetterGrade.A),
    (80, LetterGrade.B),
    (70, LetterGrade.C),
    (60, LetterGrade.D),
)


def grade_for(student_id: int, assignment_id: int, all_grades: Iterable):
    """학생+과제 성적 1건 (중복이 있으면 먼저 나온 것)"""
    for grade in all_grades:
        if grade.student_id == student_id and grade.assignment_id == assignment_id:
            return grade
    return None


def score_percentage(score: float, max_score: float) -> float:
    if max_score <= 0:
        raise ValueError(f"max_score must be positive, got {max_score}")
    return score * 100 / max_score


def letter_grade(score: Optional[float], max_score: float) -> Optional[LetterGrade]:
    """
    90 이상 A, 80 이상 B, 70 이상 C, 60 이상 D, 그 외 F
    - score가 None이면 None (미입력은 F가 아님)
    """
    if score is None:
        return None
    percentage = score_percentage(score, max_score)
    for lower_bound, letter in LETTER_BANDS:
        if percentage >= lower_bound:
            return letter
    return LetterGrade.F


def class_assignments(class_id: int, all_assignments: Iterable) -> List:
    return [a for a in all_assignments if a.class_id == class_id]


def student_average(student_id: int, class_assignments: Iterable, all_grades: Iterable) -> Optional[float]:
    """
    성적이 입력된 과제들의 원점수 단순 평균
    - 만점이 서로 다른 과제도 점수를 그대로 평균 (백분율 환산 X)
    - 입력된 성적이 하나도 없으면 None
    """
    all_grades = list(all_grades)
    scores = []
    for assignment in class_assignments:
        grade = grade_for(student_id, assignment.id, all_grades)
        if grade is not None:
            scores.append(grade.score)
    if not scores:
        return None
    return sum(scores) / len(scores)


def _fmt(value: float) -> str:
    # 85.0 → "85", 85.5 → "85.5"
    return f"{value:g}"


def grade_cell(grade, assignment, placeholder: str = PLACEHOLDER) -> GradeCell:
    """성적표 한 칸: "85/100" + 등급, 성적이 없으면 placeholder만"""
    if grade is None:
        return GradeCell(
            assignment_id=assignment.id,
            points_possible=assignment.points_possible,
            display=placeholder,
        )
    return GradeCell(
        assignment_id=assignment.id,
        grade_id=grade.id,
        score=grade.score,
        points_possible=assignment.points_possible,
        percentage=round(score_percentage(grade.score, assignment.points_possible), 1),
        letter=letter_grade(grade.score, assignment.points_possible),
        display=f"{_fmt(grade.score)}/{_fmt(assignment.points_possible)}",
    )
