from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database.db import get_db
from schemas.assignments import Assignment, AssignmentCreate
from schemas.common import envelope
from services import assignment_service

router = APIRouter(prefix="/assignments", tags=["assignments"])


def _dump(record) -> dict:
    return Assignment.model_validate(record).to_api()


# ✅ [CREATE] 과제 추가
@router.post("/", status_code=201)
def create_assignment(assignment: AssignmentCreate, db: Session = Depends(get_db)):
    created = assignment_service.create_assignment(db, assignment)
    return envelope(_dump(created), "Assignment created successfully")


# ✅ [READ] 과제 목록 (class_id로 필터 가능)
@router.get("/")
def read_assignments(class_id: Optional[int] = Query(None), db: Session = Depends(get_db)):
    return envelope([_dump(a) for a in assignment_service.list_assignments(db, class_id)])


# ✅ [READ] 과제 상세
@router.get("/{assignment_id}")
def read_assignment(assignment_id: int, db: Session = Depends(get_db)):
    return envelope(_dump(assignment_service.get_assignment(db, assignment_id)))


# ✅ [UPDATE] 과제 수정
@router.put("/{assignment_id}")
def update_assignment(assignment_id: int, updated: AssignmentCreate, db: Session = Depends(get_db)):
    assignment = assignment_service.update_assignment(db, assignment_id, updated)
    return envelope(_dump(assignment), "Assignment updated successfully")


# ✅ [DELETE] 과제 삭제 (성적 함께 삭제)
@router.delete("/{assignment_id}")
def delete_assignment(assignment_id: int, db: Session = Depends(get_db)):
    deleted_id = assignment_service.delete_assignment(db, assignment_id)
    return envelope({"id": deleted_id}, "Assignment deleted successfully")
