"""
services/student_service.py

학생 CRUD
- 삭제 시 성적/출결/수강 기록은 ORM cascade로 함께 삭제
"""

import logging
from typing import List

from sqlalchemy.orm import Session

from models.students import Student as StudentModel
from schemas.students import StudentCreate
from services.store import require, apply_fields

logger = logging.getLogger(__name__)


def list_students(db: Session) -> List[StudentModel]:
    return db.query(StudentModel).order_by(StudentModel.id).all()


def get_student(db: Session, student_id: int) -> StudentModel:
    return require(db, StudentModel, student_id, "Student")


def create_student(db: Session, data: StudentCreate) -> StudentModel:
    student = StudentModel(**data.model_dump())
    db.add(student)
    db.commit()
    db.refresh(student)
    logger.info(f"Student created: id={student.id} ({student.first_name} {student.last_name})")
    return student


def update_student(db: Session, student_id: int, data: StudentCreate) -> StudentModel:
    student = get_student(db, student_id)
    apply_fields(student, data.model_dump())
    db.commit()
    db.refresh(student)
    logger.info(f"Student updated: id={student_id}")
    return student


def delete_student(db: Session, student_id: int) -> int:
    student = get_student(db, student_id)
    db.delete(student)
    db.commit()
    logger.info(f"Student deleted: id={student_id} (grades/attendance/enrollments cascaded)")
    return student_id
