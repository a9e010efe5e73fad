from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from schemas.common import envelope
from schemas.grades import Grade, GradeCreate, GradebookRow
from services import assignment_service, class_service, grade_service, student_service
from services.grade_aggregator import grade_cell, grade_for, student_average
from services.membership import students_of
from utils.numbers import round_one_decimal

router = APIRouter(prefix="/grades", tags=["grades"])


def _dump(record) -> dict:
    return Grade.model_validate(record).to_api()


# ==========================================================
# [1단계] CRUD 기본 라우터
# ==========================================================

# ✅ [CREATE] 성적 추가 (같은 학생+과제 성적이 있으면 409)
@router.post("/", status_code=201)
def create_grade(grade: GradeCreate, db: Session = Depends(get_db)):
    created = grade_service.create_grade(db, grade)
    return envelope(_dump(created), "Grade added successfully")


# ✅ [READ] 전체 성적 조회
@router.get("/")
def read_grades(db: Session = Depends(get_db)):
    return envelope([_dump(g) for g in grade_service.list_grades(db)])


# ==========================================================
# [2단계] 정적 라우터 (upsert / 성적표)
# ==========================================================

# ✅ [UPSERT] 학생+과제 기준 있으면 수정, 없으면 생성
@router.put("/upsert")
def upsert_grade(grade: GradeCreate, db: Session = Depends(get_db)):
    record, created = grade_service.upsert_grade(db, grade)
    message = "Grade added successfully" if created else "Grade updated successfully"
    return envelope(_dump(record), message)


# ✅ [GRADEBOOK] 반 성적표 (학생 × 과제)
# - 성적이 없는 칸은 "—" 표시, 0점/F로 채우지 않음
# - 평균: 입력된 성적의 원점수 평균 (소수 1자리), 없으면 null
@router.get("/gradebook/{class_id}")
def get_gradebook(class_id: int, db: Session = Depends(get_db)):
    class_section = class_service.get_class(db, class_id)
    students = students_of(class_section, student_service.list_students(db))
    assignments = assignment_service.list_assignments(db, class_id)
    grades = grade_service.list_grades(db, class_id)

    rows = []
    for student in students:
        cells = [
            grade_cell(grade_for(student.id, a.id, grades), a)
            for a in assignments
        ]
        average = student_average(student.id, assignments, grades)
        rows.append(GradebookRow(
            student_id=student.id,
            student_name=student.full_name,
            cells=cells,
            average=round_one_decimal(average) if average is not None else None,
        ).to_api())

    return envelope({
        "classId": class_id,
        "className": class_section.name,
        "assignments": [
            {"id": a.id, "name": a.name, "category": a.category, "pointsPossible": a.points_possible}
            for a in assignments
        ],
        "rows": rows,
    })


# ==========================================================
# [3단계] 동적 라우터
# ==========================================================

# ✅ [READ] 성적 상세 조회
@router.get("/{grade_id}")
def read_grade(grade_id: int, db: Session = Depends(get_db)):
    return envelope(_dump(grade_service.get_grade(db, grade_id)))


# ✅ [UPDATE] 성적 수정
@router.put("/{grade_id}")
def update_grade(grade_id: int, updated: GradeCreate, db: Session = Depends(get_db)):
    grade = grade_service.update_grade(db, grade_id, updated)
    return envelope(_dump(grade), "Grade updated successfully")


# ✅ [DELETE] 성적 삭제
@router.delete("/{grade_id}")
def delete_grade(grade_id: int, db: Session = Depends(get_db)):
    deleted_id = grade_service.delete_grade(db, grade_id)
    return envelope({"id": deleted_id}, "Grade deleted successfully")
