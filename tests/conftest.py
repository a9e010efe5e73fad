# tests/conftest.py
"""
- 메모리 SQLite를 쓰도록 환경변수를 먼저 지정한 뒤 앱을 import
- 테스트마다 테이블을 새로 만든다 (프로세스당 엔진 1개, 초기화는 셋업에서만)
- 시드 데이터는 API로 넣어서 세션이 겹치지 않게 한다
"""

import os

os.environ["SQLITE_URL"] = "sqlite://"
os.environ["DB_HOST"] = ""

import pytest
from fastapi.testclient import TestClient

from database.db import SessionLocal, reset_db
from main import app


@pytest.fixture(autouse=True)
def fresh_db():
    reset_db()
    yield


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_student(client):
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        n = counter["n"]
        payload = {
            "firstName": f"Student{n}",
            "lastName": "Tester",
            "email": f"student{n}@school.test",
            "dateOfBirth": "2008-05-01",
            "enrollmentDate": "2023-09-01",
            "gradeLevel": "10th",
            "studentId": f"S{n:04d}",
        }
        payload.update(overrides)
        r = client.post("/v1/students/", json=payload)
        assert r.status_code == 201, r.text
        return r.json()["data"]

    return _make


@pytest.fixture
def make_class(client):
    def _make(student_ids=(), **overrides):
        payload = {
            "name": "Algebra I",
            "subject": "Mathematics",
            "section": "A",
            "schedule": "MWF 9:00",
            "room": "101",
            "studentIds": list(student_ids),
        }
        payload.update(overrides)
        r = client.post("/v1/classes/", json=payload)
        assert r.status_code == 201, r.text
        return r.json()["data"]

    return _make


@pytest.fixture
def make_assignment(client):
    def _make(class_id, **overrides):
        payload = {
            "name": "Quiz 1",
            "category": "quiz",
            "pointsPossible": 100,
            "dueDate": "2024-03-15",
            "classId": class_id,
        }
        payload.update(overrides)
        r = client.post("/v1/assignments/", json=payload)
        assert r.status_code == 201, r.text
        return r.json()["data"]

    return _make
