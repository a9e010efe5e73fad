from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from schemas.common import envelope
from services import attendance_service, class_service, grade_service, student_service
from services.dashboard import summarize

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


# ✅ [SUMMARY] 메인 화면 요약 (학생 수, 반 수, 평균 출석률, 평균 GPA)
@router.get("/summary")
def get_dashboard_summary(db: Session = Depends(get_db)):
    summary = summarize(
        student_service.list_students(db),
        class_service.list_classes(db),
        attendance_service.list_attendance(db),
        grade_service.list_grades(db),
    )
    return envelope(summary.to_api())
