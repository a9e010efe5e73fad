"""
scripts/import_csv.py

CSV → DB 일괄 등록
- 헤더는 snake_case / camelCase 둘 다 허용 (예: first_name 또는 firstName)
- 빈 칸은 값 없음으로 처리
- 성적/출결은 upsert라 같은 파일을 두 번 넣어도 중복되지 않음
- 행 단위로 독립 처리: 실패한 행은 건너뛰고 마지막에 보고

사용 예:
    python -m scripts.import_csv students data/students.csv
    python -m scripts.import_csv classes data/classes.csv
"""

import argparse
import csv
import logging

from sqlalchemy.orm import Session

from database.db import SessionLocal, init_db
from schemas.assignments import AssignmentCreate
from schemas.attendance import AttendanceCreate
from schemas.classes import ClassSectionCreate
from schemas.grades import GradeCreate
from schemas.students import StudentCreate
from services import assignment_service, attendance_service, class_service, grade_service, student_service
from services.batch import BatchResult, run_batch

logger = logging.getLogger(__name__)

# ✅ 엔티티별 (입력 스키마, 저장 함수)
IMPORTERS = {
    "students": (StudentCreate, student_service.create_student),
    "classes": (ClassSectionCreate, class_service.create_class),
    "assignments": (AssignmentCreate, assignment_service.create_assignment),
    "grades": (GradeCreate, grade_service.upsert_grade),
    "attendance": (AttendanceCreate, attendance_service.upsert_attendance),
}


def _clean(row: dict) -> dict:
    return {k.strip(): v.strip() for k, v in row.items() if k and v is not None and v.strip() != ""}


class _RollbackOnError:
    """저장 함수가 각자 commit하므로 실패 시 세션만 롤백"""

    def __init__(self, db: Session):
        self.db = db

    def __enter__(self):
        return self.db

    def __exit__(self, exc_type, exc, tb):
        if exc_type is not None:
            self.db.rollback()
        return False


def import_rows(db: Session, entity: str, rows) -> BatchResult:
    schema, save = IMPORTERS[entity]

    def _write(row):
        record = save(db, schema.model_validate(_clean(row)))
        if isinstance(record, tuple):      # upsert → (record, created)
            record = record[0]
        return record.id

    return run_batch(rows, _write, isolate=lambda: _RollbackOnError(db))


def import_csv(db: Session, entity: str, csv_path: str) -> BatchResult:
    with open(csv_path, newline="", encoding="utf-8-sig") as csvfile:
        rows = list(csv.DictReader(csvfile))
    result = import_rows(db, entity, rows)
    logger.info(f"{entity}: {len(result.succeeded)} imported, {len(result.failed)} failed ({csv_path})")
    return result


def main(argv=None):
    parser = argparse.ArgumentParser(description="Import CSV rows into the gradebook database")
    parser.add_argument("entity", choices=sorted(IMPORTERS))
    parser.add_argument("csv_path")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    init_db()
    db: Session = SessionLocal()
    try:
        result = import_csv(db, args.entity, args.csv_path)
    finally:
        db.close()

    print(f"✅ {args.entity} CSV → DB 등록 완료: {len(result.succeeded)}건")
    for row, message in result.failed:
        print(f"❌ {dict(row)}: {message}")
    return 0 if result.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
