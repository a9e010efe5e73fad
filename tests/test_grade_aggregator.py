from types import SimpleNamespace

import pytest

from schemas.enums import LetterGrade
from services.grade_aggregator import (
    PLACEHOLDER,
    class_assignments,
    grade_cell,
    grade_for,
    letter_grade,
    student_average,
)


def _grade(student_id, assignment_id, score, grade_id=None):
    return SimpleNamespace(id=grade_id, student_id=student_id, assignment_id=assignment_id, score=score)


def _assignment(assignment_id, points_possible=100, class_id=1):
    return SimpleNamespace(id=assignment_id, points_possible=points_possible, class_id=class_id)


@pytest.mark.parametrize(
    "score, expected",
    [
        (100, LetterGrade.A),
        (90, LetterGrade.A),
        (89.9, LetterGrade.B),
        (80, LetterGrade.B),
        (79.99, LetterGrade.C),
        (70, LetterGrade.C),
        (60, LetterGrade.D),
        (59.5, LetterGrade.F),
        (0, LetterGrade.F),
    ],
)
def test_letter_grade_bands(score, expected):
    assert letter_grade(score, 100) == expected


def test_letter_grade_uses_percentage_of_max_score():
    assert letter_grade(45, 50) == LetterGrade.A
    assert letter_grade(7, 10) == LetterGrade.C


def test_letter_grade_never_decreases_as_score_rises():
    order = [LetterGrade.F, LetterGrade.D, LetterGrade.C, LetterGrade.B, LetterGrade.A]
    for max_score in (10, 37, 100, 250):
        ranks = [order.index(letter_grade(s / 10, max_score)) for s in range(0, max_score * 10 + 1)]
        assert ranks == sorted(ranks)


def test_missing_score_has_no_letter():
    assert letter_grade(None, 100) is None


def test_letter_grade_rejects_non_positive_max_score():
    with pytest.raises(ValueError):
        letter_grade(5, 0)


def test_grade_for_returns_first_match():
    grades = [_grade(1, 10, 70, grade_id=1), _grade(1, 10, 95, grade_id=2), _grade(2, 10, 50, grade_id=3)]
    assert grade_for(1, 10, grades).id == 1
    assert grade_for(2, 11, grades) is None


def test_student_average_is_mean_of_raw_scores():
    assignments = [_assignment(1, 100), _assignment(2, 20), _assignment(3, 50)]
    grades = [_grade(1, 1, 80), _grade(1, 2, 20), _grade(2, 1, 10)]
    # 과제 3은 미입력 → 평균에서 제외, 만점 차이는 무시
    assert student_average(1, assignments, grades) == 50


def test_student_average_counts_zero_scores():
    assignments = [_assignment(1), _assignment(2)]
    grades = [_grade(1, 1, 0), _grade(1, 2, 90)]
    assert student_average(1, assignments, grades) == 45


def test_student_average_without_grades_is_absent():
    assert student_average(1, [_assignment(1)], []) is None
    assert student_average(1, [], [_grade(1, 1, 90)]) is None


def test_class_assignments_filters_by_class():
    assignments = [_assignment(1, class_id=1), _assignment(2, class_id=2), _assignment(3, class_id=1)]
    assert [a.id for a in class_assignments(1, assignments)] == [1, 3]


def test_grade_cell_shows_score_and_letter():
    cell = grade_cell(_grade(1, 5, 85, grade_id=9), _assignment(5, 100))
    assert cell.display == "85/100"
    assert cell.letter == "B"
    assert cell.percentage == 85.0
    assert cell.grade_id == 9


def test_grade_cell_without_grade_is_placeholder_not_zero():
    cell = grade_cell(None, _assignment(5, 100))
    assert cell.display == PLACEHOLDER
    assert cell.letter is None
    assert cell.score is None
    assert "0" not in cell.display


def test_grade_cell_zero_score_is_f():
    cell = grade_cell(_grade(1, 5, 0, grade_id=1), _assignment(5, 100))
    assert cell.display == "0/100"
    assert cell.letter == "F"
