"""
services/search.py

학생 검색 (순수 함수)
- 이름/성/이메일/학번 부분 일치, 대소문자 무시
"""

from typing import Iterable, List, Optional

SEARCH_FIELDS = ("first_name", "last_name", "email", "student_id")


def search_students(students: Iterable, query: Optional[str]) -> List:
    """이름/성/이메일/학번 부분 일치 (대소문자 무시), 빈 검색어면 전체"""
    students = list(students)
    needle = (query or "").strip().lower()
    if not needle:
        return students
    return [
        s for s in students
        if any(needle in (getattr(s, f, None) or "").lower() for f in SEARCH_FIELDS)
    ]
