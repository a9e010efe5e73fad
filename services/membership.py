"""
services/membership.py

반(ClassSection) ⟷ 학생(Student) 수강 관계 조회
- DB 조회 없이 이미 불러온 목록만 사용
"""

from typing import Iterable, List


def students_of(class_section, all_students: Iterable) -> List:
    """
    반 명단(student_ids)에 포함된 학생만 입력 순서대로 반환
    - 명단이 비었거나 없으면 빈 리스트
    """
    student_ids = set(getattr(class_section, "student_ids", None) or [])
    if not student_ids:
        return []
    return [s for s in all_students if s.id in student_ids]


def normalize_student_ids(student_ids: Iterable[int]) -> List[int]:
    # 중복 제거 (처음 나온 순서 유지)
    seen = set()
    result = []
    for sid in student_ids or []:
        if sid in seen:
            continue
        seen.add(sid)
        result.append(sid)
    return result
