from types import SimpleNamespace

from services.membership import normalize_student_ids, students_of
from services.search import search_students


def _students(*ids):
    return [SimpleNamespace(id=i) for i in ids]


def test_students_of_keeps_input_order():
    class_section = SimpleNamespace(student_ids=[3, 1])
    assert [s.id for s in students_of(class_section, _students(1, 2, 3))] == [1, 3]


def test_students_of_empty_or_missing_ids():
    assert students_of(SimpleNamespace(student_ids=[]), _students(1)) == []
    assert students_of(SimpleNamespace(student_ids=None), _students(1)) == []
    assert students_of(SimpleNamespace(), _students(1)) == []


def test_students_of_ignores_unknown_ids():
    class_section = SimpleNamespace(student_ids=[1, 99])
    assert [s.id for s in students_of(class_section, _students(1, 2))] == [1]


def test_normalize_student_ids_drops_duplicates():
    assert normalize_student_ids([2, 1, 2, 3, 1]) == [2, 1, 3]
    assert normalize_student_ids(None) == []


def test_search_students_matches_any_field_case_insensitive():
    students = [
        SimpleNamespace(first_name="Ada", last_name="Lovelace", email="ada@x.org", student_id="S001"),
        SimpleNamespace(first_name="Alan", last_name="Turing", email="alan@y.org", student_id="S002"),
    ]
    assert [s.first_name for s in search_students(students, "lovelace")] == ["Ada"]
    assert [s.first_name for s in search_students(students, "Y.ORG")] == ["Alan"]
    assert [s.first_name for s in search_students(students, "s00")] == ["Ada", "Alan"]
    assert len(search_students(students, "  ")) == 2
    assert search_students(students, "zzz") == []
