"""
services/class_service.py

반(ClassSection) CRUD + 수강 명단 관리
- 명단은 enrollments 테이블로 저장, 쓰기 시점에 학생 존재 여부 검증
"""

import logging
from typing import Iterable, List

from sqlalchemy.orm import Session

from models.classes import ClassSection as ClassModel, Enrollment
from models.students import Student as StudentModel
from schemas.classes import ClassSectionCreate
from services.membership import normalize_student_ids
from services.store import require, apply_fields
from utils.errors import ReferentialIntegrityError

logger = logging.getLogger(__name__)


def list_classes(db: Session) -> List[ClassModel]:
    return db.query(ClassModel).order_by(ClassModel.id).all()


def get_class(db: Session, class_id: int) -> ClassModel:
    return require(db, ClassModel, class_id, "Class")


def set_enrollments(db: Session, class_section: ClassModel, student_ids: Iterable[int]) -> None:
    """
    반 명단 교체 (commit은 호출자가)
    - 중복 id는 1건으로
    - 존재하지 않는 학생 id가 있으면 ReferentialIntegrityError
    """
    wanted = normalize_student_ids(student_ids)
    if wanted:
        found = {
            sid for (sid,) in db.query(StudentModel.id).filter(StudentModel.id.in_(wanted)).all()
        }
        missing = set(wanted) - found
        if missing:
            raise ReferentialIntegrityError(
                f"Unknown student id(s): {', '.join(str(i) for i in sorted(missing))}",
                missing_ids=missing,
            )

    current = {e.student_id: e for e in class_section.enrollments}
    for sid, enrollment in current.items():
        if sid not in wanted:
            class_section.enrollments.remove(enrollment)
    for sid in wanted:
        if sid not in current:
            class_section.enrollments.append(Enrollment(student_id=sid))


def create_class(db: Session, data: ClassSectionCreate) -> ClassModel:
    values = data.model_dump(exclude={"student_ids"})
    class_section = ClassModel(**values)
    set_enrollments(db, class_section, data.student_ids)
    db.add(class_section)
    db.commit()
    db.refresh(class_section)
    logger.info(f"Class created: id={class_section.id} name={class_section.name!r} students={len(class_section.enrollments)}")
    return class_section


def update_class(db: Session, class_id: int, data: ClassSectionCreate) -> ClassModel:
    class_section = get_class(db, class_id)
    apply_fields(class_section, data.model_dump(exclude={"student_ids"}))
    set_enrollments(db, class_section, data.student_ids)
    db.commit()
    db.refresh(class_section)
    logger.info(f"Class updated: id={class_id}")
    return class_section


def replace_members(db: Session, class_id: int, student_ids: Iterable[int]) -> ClassModel:
    class_section = get_class(db, class_id)
    set_enrollments(db, class_section, student_ids)
    db.commit()
    db.refresh(class_section)
    logger.info(f"Class {class_id} membership replaced: {class_section.student_ids}")
    return class_section


def delete_class(db: Session, class_id: int) -> int:
    class_section = get_class(db, class_id)
    db.delete(class_section)
    db.commit()
    logger.info(f"Class deleted: id={class_id} (assignments/grades/attendance/enrollments cascaded)")
    return class_id
