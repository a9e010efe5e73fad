from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from schemas.classes import ClassSection, ClassSectionCreate, MembershipUpdate
from schemas.common import envelope
from schemas.students import Student
from services import class_service, student_service
from services.membership import students_of

router = APIRouter(prefix="/classes", tags=["classes"])


def _dump(record) -> dict:
    return ClassSection.model_validate(record).to_api()


# ==========================================================
# [1단계] CRUD 기본 라우터
# ==========================================================

# ✅ [CREATE] 반 추가 (수강생 id 목록 포함 가능)
@router.post("/", status_code=201)
def create_class(new_class: ClassSectionCreate, db: Session = Depends(get_db)):
    created = class_service.create_class(db, new_class)
    return envelope(_dump(created), "Class created successfully")


# ✅ [READ] 전체 반 조회
@router.get("/")
def read_classes(db: Session = Depends(get_db)):
    return envelope([_dump(c) for c in class_service.list_classes(db)])


# ==========================================================
# [2단계] 수강 명단 라우터
# ==========================================================

# ✅ [READ] 반 수강생 목록
@router.get("/{class_id}/students")
def get_class_students(class_id: int, db: Session = Depends(get_db)):
    class_section = class_service.get_class(db, class_id)
    enrolled = students_of(class_section, student_service.list_students(db))
    return envelope([Student.model_validate(s).to_api() for s in enrolled])


# ✅ [UPDATE] 반 수강 명단 교체
# - 존재하지 않는 학생 id가 있으면 422
@router.put("/{class_id}/students")
def replace_class_students(class_id: int, body: MembershipUpdate, db: Session = Depends(get_db)):
    class_section = class_service.replace_members(db, class_id, body.student_ids)
    return envelope(_dump(class_section), "Class membership updated")


# ==========================================================
# [3단계] 동적 라우터
# ==========================================================

# ✅ [READ] 특정 반 조회
@router.get("/{class_id}")
def read_class(class_id: int, db: Session = Depends(get_db)):
    return envelope(_dump(class_service.get_class(db, class_id)))


# ✅ [UPDATE] 반 정보 수정
@router.put("/{class_id}")
def update_class(class_id: int, updated: ClassSectionCreate, db: Session = Depends(get_db)):
    class_section = class_service.update_class(db, class_id, updated)
    return envelope(_dump(class_section), "Class updated successfully")


# ✅ [DELETE] 반 삭제 (과제/성적/출결/수강 기록 함께 삭제)
@router.delete("/{class_id}")
def delete_class(class_id: int, db: Session = Depends(get_db)):
    deleted_id = class_service.delete_class(db, class_id)
    return envelope({"id": deleted_id}, "Class deleted successfully")
