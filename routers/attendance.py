import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database.db import get_db
from schemas.attendance import Attendance, AttendanceCreate, AttendanceSheet, AttendanceSheetRow, MarkAllRequest
from schemas.common import envelope
from services import attendance_service, class_service, student_service
from services.attendance_aggregator import attendance_record_for, month_days, monthly_stats, parse_month
from services.membership import students_of

router = APIRouter(prefix="/attendance", tags=["attendance"])

logger = logging.getLogger(__name__)


def _dump(record) -> dict:
    return Attendance.model_validate(record).to_api()


# ==========================================================
# [1단계] CRUD 기본 라우터
# ==========================================================

# ✅ [CREATE] 출결 기록 추가 (같은 학생+반+날짜가 있으면 409)
@router.post("/", status_code=201)
def create_attendance(attendance: AttendanceCreate, db: Session = Depends(get_db)):
    created = attendance_service.create_attendance(db, attendance)
    return envelope(_dump(created), "Attendance record created successfully")


# ✅ [READ] 출결 기록 조회 (class_id / date 필터)
@router.get("/")
def read_attendance_list(
    class_id: Optional[int] = Query(None),
    on: Optional[date] = Query(None, alias="date", description="조회할 날짜 (예: 2024-03-04)"),
    db: Session = Depends(get_db),
):
    records = attendance_service.list_attendance(db, class_id=class_id, on=on)
    return envelope([_dump(r) for r in records])


# ==========================================================
# [2단계] 정적 라우터 (upsert / 일괄 처리 / 월간 출석부)
# ==========================================================

# ✅ [UPSERT] 학생+반+날짜 기준 있으면 수정, 없으면 생성
@router.put("/upsert")
def upsert_attendance(attendance: AttendanceCreate, db: Session = Depends(get_db)):
    record, created = attendance_service.upsert_attendance(db, attendance)
    message = "Attendance record created" if created else "Attendance record updated"
    return envelope(_dump(record), f"{message} for {attendance.date}")


# ✅ [MARK ALL] 반 전체 같은 상태로 일괄 처리
# - 학생별 독립 처리: 일부 실패해도 나머지는 저장
# - 처리 후 해당 반/날짜 기록을 다시 조회해서 반환
@router.post("/class/{class_id}/mark-all")
def mark_all(class_id: int, body: MarkAllRequest, db: Session = Depends(get_db)):
    result = attendance_service.mark_all_attendance(db, class_id, body.date, body.status, body.reason)
    records = attendance_service.list_attendance(db, class_id=class_id, on=body.date)

    failed = [{"studentId": op.student_id, "message": message} for op, message in result.failed]
    if failed:
        logger.warning(f"Mark-all partially failed for class {class_id} on {body.date}: {failed}")
        message = f"Failed to mark {len(failed)} student(s) as {body.status} for {body.date}"
    else:
        message = f"Marked all students as {body.status} for {body.date}"

    return envelope(
        {
            "succeeded": result.succeeded,
            "failed": failed,
            "records": [_dump(r) for r in records],
        },
        message,
        success=result.ok,
    )


# ✅ [MONTHLY SHEET] 반 월간 출석부 (학생별 통계 + 일자별 상태)
@router.get("/class/{class_id}/monthly")
def get_monthly_sheet(
    class_id: int,
    month: str = Query(..., pattern=r"^\d{4}-\d{2}$", description="조회할 월 (예: 2024-03)"),
    db: Session = Depends(get_db),
):
    target = parse_month(month)
    class_section = class_service.get_class(db, class_id)
    students = students_of(class_section, student_service.list_students(db))
    records = attendance_service.list_attendance(db, class_id=class_id, month=target)
    days = month_days(target)

    rows = []
    for student in students:
        statuses = {}
        for day in days:
            record = attendance_record_for(student.id, class_id, day, records)
            statuses[day.isoformat()] = record.status if record else None
        rows.append(AttendanceSheetRow(
            student_id=student.id,
            student_name=student.full_name,
            stats=monthly_stats(student.id, class_id, target, records),
            days=statuses,
        ))

    sheet = AttendanceSheet(class_id=class_id, month=month, rows=rows)
    return envelope(sheet.to_api())


# ==========================================================
# [3단계] 동적 라우터
# ==========================================================

# ✅ [READ] 출결 단일 기록 조회
@router.get("/{attendance_id}")
def read_attendance(attendance_id: int, db: Session = Depends(get_db)):
    return envelope(_dump(attendance_service.get_attendance(db, attendance_id)))


# ✅ [UPDATE] 출결 기록 수정
@router.put("/{attendance_id}")
def update_attendance(attendance_id: int, updated: AttendanceCreate, db: Session = Depends(get_db)):
    record = attendance_service.update_attendance(db, attendance_id, updated)
    return envelope(_dump(record), "Attendance record updated successfully")


# ✅ [DELETE] 출결 기록 삭제
@router.delete("/{attendance_id}")
def delete_attendance(attendance_id: int, db: Session = Depends(get_db)):
    deleted_id = attendance_service.delete_attendance(db, attendance_id)
    return envelope({"id": deleted_id}, "Attendance record deleted successfully")
