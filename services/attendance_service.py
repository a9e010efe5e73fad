"""
services/attendance_service.py

출결 CRUD + upsert + 반 전체 일괄 처리
- (student_id, class_id, date) 조합당 1건
- 일괄 처리는 학생별 독립 upsert (한 명 실패해도 나머지는 저장)
"""

import logging
from datetime import date
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from config.settings import settings
from models.attendance import AttendanceRecord as AttendanceModel
from models.classes import ClassSection as ClassModel
from models.students import Student as StudentModel
from schemas.attendance import AttendanceCreate
from schemas.enums import AttendanceStatus
from services.attendance_aggregator import month_bounds, quick_mark_all
from services.batch import BatchResult, run_batch
from services.class_service import get_class
from services.student_service import list_students
from services.store import require, apply_fields, save_unique
from utils.errors import DuplicateRecordError

logger = logging.getLogger(__name__)


def list_attendance(
    db: Session,
    class_id: Optional[int] = None,
    on: Optional[date] = None,
    month: Optional[date] = None,
) -> List[AttendanceModel]:
    query = db.query(AttendanceModel)
    if class_id is not None:
        query = query.filter(AttendanceModel.class_id == class_id)
    if on is not None:
        query = query.filter(AttendanceModel.date == on)
    if month is not None:
        start, end = month_bounds(month)
        query = query.filter(AttendanceModel.date.between(start, end))
    return query.order_by(AttendanceModel.date, AttendanceModel.student_id).all()


def get_attendance(db: Session, attendance_id: int) -> AttendanceModel:
    return require(db, AttendanceModel, attendance_id, "Attendance record")


def find_attendance(db: Session, student_id: int, class_id: int, on: date) -> Optional[AttendanceModel]:
    return db.query(AttendanceModel).filter(
        AttendanceModel.student_id == student_id,
        AttendanceModel.class_id == class_id,
        AttendanceModel.date == on,
    ).first()


def _values(db: Session, data: AttendanceCreate) -> dict:
    require(db, StudentModel, data.student_id, "Student")
    require(db, ClassModel, data.class_id, "Class")
    values = data.model_dump()
    # excused인데 사유가 없으면 기본 사유
    if not values["reason"]:
        values["reason"] = settings.EXCUSED_DEFAULT_REASON if data.status == AttendanceStatus.EXCUSED.value else ""
    return values


def _duplicate_message(data: AttendanceCreate) -> str:
    return f"Attendance for student {data.student_id} in class {data.class_id} on {data.date} already exists"


def create_attendance(db: Session, data: AttendanceCreate) -> AttendanceModel:
    values = _values(db, data)
    if find_attendance(db, data.student_id, data.class_id, data.date) is not None:
        raise DuplicateRecordError(_duplicate_message(data))
    record = AttendanceModel(**values)
    db.add(record)
    save_unique(db, record, _duplicate_message(data))
    logger.info(f"Attendance created: id={record.id} student={record.student_id} class={record.class_id} date={record.date} status={record.status}")
    return record


def update_attendance(db: Session, attendance_id: int, data: AttendanceCreate) -> AttendanceModel:
    record = get_attendance(db, attendance_id)
    values = _values(db, data)
    other = find_attendance(db, data.student_id, data.class_id, data.date)
    if other is not None and other.id != attendance_id:
        raise DuplicateRecordError(_duplicate_message(data))
    apply_fields(record, values)
    save_unique(db, record, _duplicate_message(data))
    logger.info(f"Attendance updated: id={attendance_id}")
    return record


def upsert_attendance(db: Session, data: AttendanceCreate, commit: bool = True) -> Tuple[AttendanceModel, bool]:
    """학생+반+날짜 기록이 있으면 수정, 없으면 생성 → (기록, 새로 생성했는지)"""
    values = _values(db, data)
    record = find_attendance(db, data.student_id, data.class_id, data.date)
    created = record is None
    if created:
        record = AttendanceModel(**values)
        db.add(record)
    else:
        apply_fields(record, values)

    save_unique(db, record, _duplicate_message(data), commit=commit)
    logger.info(f"Attendance {'created' if created else 'updated'} via upsert: student={data.student_id} class={data.class_id} date={data.date} status={data.status}")
    return record, created


def mark_all_attendance(
    db: Session,
    class_id: int,
    on: date,
    status: AttendanceStatus,
    reason: Optional[str] = None,
) -> BatchResult:
    """
    반 수강생 전원 출결 일괄 upsert
    - 학생별로 SAVEPOINT를 따로 잡아 실패한 학생만 롤백
    - 성공 건은 마지막에 한 번에 commit
    """
    class_section = get_class(db, class_id)
    operations = quick_mark_all(class_section, on, status, list_students(db), reason=reason)
    result = run_batch(
        operations,
        lambda op: upsert_attendance(db, op, commit=False)[0].student_id,
        isolate=db.begin_nested,
    )
    db.commit()
    logger.info(f"Mark-all class={class_id} date={on} status={status}: {len(result.succeeded)} ok, {len(result.failed)} failed")
    return result


def delete_attendance(db: Session, attendance_id: int) -> int:
    record = get_attendance(db, attendance_id)
    db.delete(record)
    db.commit()
    logger.info(f"Attendance deleted: id={attendance_id}")
    return attendance_id
