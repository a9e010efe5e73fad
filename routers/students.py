from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database.db import get_db
from schemas.common import envelope
from schemas.students import Student, StudentCreate
from services import student_service
from services.search import search_students

router = APIRouter(prefix="/students", tags=["students"])


def _dump(record) -> dict:
    return Student.model_validate(record).to_api()


# ==========================================================
# [1단계] CRUD 기본 라우터
# ==========================================================

# ✅ [CREATE] 학생 정보 추가
@router.post("/", status_code=201)
def create_student(student: StudentCreate, db: Session = Depends(get_db)):
    created = student_service.create_student(db, student)
    return envelope(_dump(created), "Student added successfully")


# ✅ [READ] 전체 학생 조회
@router.get("/")
def read_students(db: Session = Depends(get_db)):
    return envelope([_dump(s) for s in student_service.list_students(db)])


# ==========================================================
# [2단계] 정적 라우터 (검색)
# ==========================================================

# ✅ [SEARCH] 이름/이메일/학번으로 학생 검색
@router.get("/search")
def search(q: Optional[str] = Query(None, description="이름, 이메일, 학번 부분 일치"), db: Session = Depends(get_db)):
    results = search_students(student_service.list_students(db), q)
    return envelope([_dump(s) for s in results], f"{len(results)} student(s) found")


# ==========================================================
# [3단계] 동적 라우터 (개별 조회/수정/삭제)
# ==========================================================

# ✅ [READ] 특정 학생 상세 조회
@router.get("/{student_id}")
def read_student(student_id: int, db: Session = Depends(get_db)):
    return envelope(_dump(student_service.get_student(db, student_id)))


# ✅ [UPDATE] 특정 학생 정보 수정
@router.put("/{student_id}")
def update_student(student_id: int, updated: StudentCreate, db: Session = Depends(get_db)):
    student = student_service.update_student(db, student_id, updated)
    return envelope(_dump(student), "Student updated successfully")


# ✅ [DELETE] 특정 학생 삭제 (성적/출결/수강 기록 함께 삭제)
@router.delete("/{student_id}")
def delete_student(student_id: int, db: Session = Depends(get_db)):
    deleted_id = student_service.delete_student(db, student_id)
    return envelope({"id": deleted_id}, "Student deleted successfully")
