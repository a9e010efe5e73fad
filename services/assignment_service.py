"""
services/assignment_service.py

과제 CRUD (과제는 반 하나에 소속)
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from models.assignments import Assignment as AssignmentModel
from models.classes import ClassSection as ClassModel
from schemas.assignments import AssignmentCreate
from services.store import require, apply_fields

logger = logging.getLogger(__name__)


def list_assignments(db: Session, class_id: Optional[int] = None) -> List[AssignmentModel]:
    query = db.query(AssignmentModel)
    if class_id is not None:
        query = query.filter(AssignmentModel.class_id == class_id)
    return query.order_by(AssignmentModel.id).all()


def get_assignment(db: Session, assignment_id: int) -> AssignmentModel:
    return require(db, AssignmentModel, assignment_id, "Assignment")


def create_assignment(db: Session, data: AssignmentCreate) -> AssignmentModel:
    require(db, ClassModel, data.class_id, "Class")
    assignment = AssignmentModel(**data.model_dump())
    db.add(assignment)
    db.commit()
    db.refresh(assignment)
    logger.info(f"Assignment created: id={assignment.id} class={assignment.class_id} name={assignment.name!r}")
    return assignment


def update_assignment(db: Session, assignment_id: int, data: AssignmentCreate) -> AssignmentModel:
    assignment = get_assignment(db, assignment_id)
    require(db, ClassModel, data.class_id, "Class")
    apply_fields(assignment, data.model_dump())
    db.commit()
    db.refresh(assignment)
    logger.info(f"Assignment updated: id={assignment_id}")
    return assignment


def delete_assignment(db: Session, assignment_id: int) -> int:
    assignment = get_assignment(db, assignment_id)
    db.delete(assignment)
    db.commit()
    logger.info(f"Assignment deleted: id={assignment_id} (grades cascaded)")
    return assignment_id
