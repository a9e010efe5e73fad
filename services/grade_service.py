"""
services/grade_service.py

성적 CRUD + upsert
- (student_id, assignment_id) 조합당 1건: DB 유니크 제약 + 키 기반 upsert
"""

import logging
from datetime import date
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from models.assignments import Assignment as AssignmentModel
from models.grades import Grade as GradeModel
from models.students import Student as StudentModel
from schemas.grades import GradeCreate
from services.store import require, apply_fields, save_unique
from utils.errors import DuplicateRecordError

logger = logging.getLogger(__name__)


def list_grades(db: Session, class_id: Optional[int] = None) -> List[GradeModel]:
    query = db.query(GradeModel)
    if class_id is not None:
        query = query.join(AssignmentModel, GradeModel.assignment_id == AssignmentModel.id) \
            .filter(AssignmentModel.class_id == class_id)
    return query.order_by(GradeModel.id).all()


def get_grade(db: Session, grade_id: int) -> GradeModel:
    return require(db, GradeModel, grade_id, "Grade")


def find_grade(db: Session, student_id: int, assignment_id: int) -> Optional[GradeModel]:
    return db.query(GradeModel).filter(
        GradeModel.student_id == student_id,
        GradeModel.assignment_id == assignment_id,
    ).first()


def _values(db: Session, data: GradeCreate) -> dict:
    require(db, StudentModel, data.student_id, "Student")
    require(db, AssignmentModel, data.assignment_id, "Assignment")
    values = data.model_dump()
    if values["submitted_date"] is None:
        values["submitted_date"] = date.today()
    return values


def _duplicate_message(data: GradeCreate) -> str:
    return f"Grade for student {data.student_id} and assignment {data.assignment_id} already exists"


def create_grade(db: Session, data: GradeCreate) -> GradeModel:
    values = _values(db, data)
    if find_grade(db, data.student_id, data.assignment_id) is not None:
        raise DuplicateRecordError(_duplicate_message(data))
    grade = GradeModel(**values)
    db.add(grade)
    save_unique(db, grade, _duplicate_message(data))
    logger.info(f"Grade created: id={grade.id} student={grade.student_id} assignment={grade.assignment_id}")
    return grade


def update_grade(db: Session, grade_id: int, data: GradeCreate) -> GradeModel:
    grade = get_grade(db, grade_id)
    values = _values(db, data)
    other = find_grade(db, data.student_id, data.assignment_id)
    if other is not None and other.id != grade_id:
        raise DuplicateRecordError(_duplicate_message(data))
    apply_fields(grade, values)
    save_unique(db, grade, _duplicate_message(data))
    logger.info(f"Grade updated: id={grade_id}")
    return grade


def upsert_grade(db: Session, data: GradeCreate, commit: bool = True) -> Tuple[GradeModel, bool]:
    """
    학생+과제 성적이 있으면 수정, 없으면 생성
    - 반환: (성적, 새로 생성했는지)
    """
    values = _values(db, data)
    grade = find_grade(db, data.student_id, data.assignment_id)
    created = grade is None
    if created:
        grade = GradeModel(**values)
        db.add(grade)
    else:
        apply_fields(grade, values)

    save_unique(db, grade, _duplicate_message(data), commit=commit)
    logger.info(f"Grade {'created' if created else 'updated'} via upsert: student={data.student_id} assignment={data.assignment_id}")
    return grade, created


def delete_grade(db: Session, grade_id: int) -> int:
    grade = get_grade(db, grade_id)
    db.delete(grade)
    db.commit()
    logger.info(f"Grade deleted: id={grade_id}")
    return grade_id
