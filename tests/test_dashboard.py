from types import SimpleNamespace

from services.dashboard import summarize


def test_summarize_counts_and_averages():
    attendance = [SimpleNamespace(status=s) for s in ("present", "present", "absent")]
    grades = [SimpleNamespace(score=s) for s in (90, 80, 70)]
    summary = summarize([1, 2, 3, 4], [1, 2], attendance, grades)
    assert summary.total_students == 4
    assert summary.total_classes == 2
    assert summary.average_attendance == 67
    assert summary.average_gpa == "3.2"


def test_summarize_empty_store():
    summary = summarize([], [], [], [])
    assert summary.average_attendance == 0
    assert summary.average_gpa == "0.0"


def test_dashboard_endpoint(client, make_student, make_class, make_assignment):
    s1 = make_student()
    s2 = make_student()
    cls = make_class(student_ids=[s1["id"], s2["id"]])
    a = make_assignment(cls["id"])
    client.put("/v1/grades/upsert", json={"studentId": s1["id"], "assignmentId": a["id"], "score": 100})
    client.put("/v1/grades/upsert", json={"studentId": s2["id"], "assignmentId": a["id"], "score": 50})
    client.post(f"/v1/attendance/class/{cls['id']}/mark-all", json={"date": "2024-03-04", "status": "present"})

    r = client.get("/v1/dashboard/summary")
    assert r.status_code == 200
    assert r.json()["data"] == {
        "totalStudents": 2,
        "totalClasses": 1,
        "averageAttendance": 100,
        "averageGpa": "3.0",
    }


def test_summarize_gpa_rounds_half_up():
    # 평균 81.25 → GPA 3.25 → "3.3"
    grades = [SimpleNamespace(score=s) for s in (80, 80, 80, 85)]
    assert summarize([], [], [], grades).average_gpa == "3.3"
