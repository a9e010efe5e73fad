"""
services/store.py

엔티티 서비스 공통 헬퍼
"""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from utils.errors import DuplicateRecordError, NotFoundError


def require(db: Session, model, entity_id: int, label: str):
    """id로 1건 조회, 없으면 NotFoundError"""
    record = db.get(model, entity_id)
    if record is None:
        raise NotFoundError(label, entity_id)
    return record


def apply_fields(record, values: dict):
    for key, value in values.items():
        setattr(record, key, value)
    return record


def save_unique(db: Session, record, duplicate_message: str, commit: bool = True):
    """
    유니크 키가 걸린 레코드 저장
    - 조회 후 저장 사이에 같은 키가 먼저 들어오면 DB 제약 위반 → 롤백 후 DuplicateRecordError
    - commit=False면 flush만 (바깥 트랜잭션/SAVEPOINT가 commit)
    """
    try:
        if commit:
            db.commit()
        else:
            db.flush()
    except IntegrityError as exc:
        if commit:
            db.rollback()
        raise DuplicateRecordError(duplicate_message) from exc
    if commit:
        db.refresh(record)
    return record
