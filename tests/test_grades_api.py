from services import grade_service


def _setup(make_student, make_class, make_assignment):
    a, b = make_student(firstName="Amy"), make_student(firstName="Ben")
    cls = make_class(student_ids=[a["id"], b["id"]])
    assignment = make_assignment(cls["id"], pointsPossible=100)
    return a, b, cls, assignment


def test_upsert_twice_keeps_one_grade(client, make_student, make_class, make_assignment):
    a, _, _, assignment = _setup(make_student, make_class, make_assignment)
    payload = {"studentId": a["id"], "assignmentId": assignment["id"], "score": 85, "comments": "good"}

    first = client.put("/v1/grades/upsert", json=payload)
    second = client.put("/v1/grades/upsert", json=payload)
    assert first.json()["message"] == "Grade added successfully"
    assert second.json()["message"] == "Grade updated successfully"
    assert first.json()["data"]["id"] == second.json()["data"]["id"]

    grades = client.get("/v1/grades/").json()["data"]
    assert len(grades) == 1
    assert grades[0]["score"] == 85
    assert grades[0]["submittedDate"] is not None


def test_upsert_updates_existing_score(client, make_student, make_class, make_assignment):
    a, _, _, assignment = _setup(make_student, make_class, make_assignment)
    client.put("/v1/grades/upsert", json={"studentId": a["id"], "assignmentId": assignment["id"], "score": 60})
    client.put("/v1/grades/upsert", json={"studentId": a["id"], "assignmentId": assignment["id"], "score": 95})
    grades = client.get("/v1/grades/").json()["data"]
    assert [g["score"] for g in grades] == [95]


def test_plain_create_refuses_duplicate(client, make_student, make_class, make_assignment):
    a, _, _, assignment = _setup(make_student, make_class, make_assignment)
    payload = {"studentId": a["id"], "assignmentId": assignment["id"], "score": 70}
    assert client.post("/v1/grades/", json=payload).status_code == 201
    r = client.post("/v1/grades/", json=payload)
    assert r.status_code == 409
    assert r.json()["error"]["code"] == "DUPLICATE_RECORD"


def test_grade_for_unknown_assignment_is_not_found(client, make_student):
    a = make_student()
    r = client.put("/v1/grades/upsert", json={"studentId": a["id"], "assignmentId": 77, "score": 70})
    assert r.status_code == 404


def test_negative_score_is_rejected(client, make_student, make_class, make_assignment):
    a, _, _, assignment = _setup(make_student, make_class, make_assignment)
    r = client.put("/v1/grades/upsert", json={"studentId": a["id"], "assignmentId": assignment["id"], "score": -1})
    assert r.status_code == 422


def test_assignment_needs_positive_points(client, make_class):
    cls = make_class()
    r = client.post("/v1/assignments/", json={
        "name": "Broken", "category": "homework", "pointsPossible": 0, "classId": cls["id"],
    })
    assert r.status_code == 422


def test_gradebook_cells_and_placeholder(client, make_student, make_class, make_assignment):
    a, b, cls, assignment = _setup(make_student, make_class, make_assignment)
    client.put("/v1/grades/upsert", json={"studentId": a["id"], "assignmentId": assignment["id"], "score": 85})

    r = client.get(f"/v1/grades/gradebook/{cls['id']}")
    assert r.status_code == 200
    data = r.json()["data"]
    assert [x["id"] for x in data["assignments"]] == [assignment["id"]]
    rows = {row["studentId"]: row for row in data["rows"]}

    amy = rows[a["id"]]
    assert amy["cells"][0]["display"] == "85/100"
    assert amy["cells"][0]["letter"] == "B"
    assert amy["average"] == 85.0

    ben = rows[b["id"]]
    assert ben["cells"][0]["display"] == "—"
    assert ben["cells"][0]["letter"] is None
    assert ben["cells"][0]["score"] is None
    assert ben["average"] is None


def test_gradebook_average_uses_raw_scores(client, make_student, make_class, make_assignment):
    a, _, cls, quiz = _setup(make_student, make_class, make_assignment)
    project = make_assignment(cls["id"], name="Project", category="project", pointsPossible=20)
    client.put("/v1/grades/upsert", json={"studentId": a["id"], "assignmentId": quiz["id"], "score": 90})
    client.put("/v1/grades/upsert", json={"studentId": a["id"], "assignmentId": project["id"], "score": 15})

    rows = client.get(f"/v1/grades/gradebook/{cls['id']}").json()["data"]["rows"]
    amy = next(row for row in rows if row["studentId"] == a["id"])
    assert amy["average"] == 52.5
    assert [c["display"] for c in amy["cells"]] == ["90/100", "15/20"]


def test_assignments_filter_by_class(client, make_class, make_assignment):
    c1, c2 = make_class(), make_class(name="Biology", subject="Biology")
    make_assignment(c1["id"])
    make_assignment(c2["id"], name="Lab")
    r = client.get("/v1/assignments/", params={"class_id": c2["id"]})
    assert [x["name"] for x in r.json()["data"]] == ["Lab"]


def test_assignment_for_missing_class_is_not_found(client):
    r = client.post("/v1/assignments/", json={
        "name": "Orphan", "category": "test", "pointsPossible": 50, "classId": 123,
    })
    assert r.status_code == 404


def test_grade_crud(client, make_student, make_class, make_assignment):
    a, _, _, assignment = _setup(make_student, make_class, make_assignment)
    grade = client.post("/v1/grades/", json={"studentId": a["id"], "assignmentId": assignment["id"], "score": 40}).json()["data"]
    r = client.put(f"/v1/grades/{grade['id']}", json={**grade, "score": 41})
    assert r.json()["data"]["score"] == 41
    assert client.delete(f"/v1/grades/{grade['id']}").status_code == 200
    assert client.get(f"/v1/grades/{grade['id']}").status_code == 404


def test_assignment_crud_and_grade_cascade(client, make_student, make_class, make_assignment):
    a, b, cls, quiz = _setup(make_student, make_class, make_assignment)
    project = make_assignment(cls["id"], name="Project", category="project", pointsPossible=20)
    client.put("/v1/grades/upsert", json={"studentId": a["id"], "assignmentId": quiz["id"], "score": 80})
    client.put("/v1/grades/upsert", json={"studentId": b["id"], "assignmentId": quiz["id"], "score": 60})
    client.put("/v1/grades/upsert", json={"studentId": a["id"], "assignmentId": project["id"], "score": 18})

    r = client.get(f"/v1/assignments/{quiz['id']}")
    assert r.status_code == 200
    assert r.json()["data"]["name"] == "Quiz 1"

    r = client.put(f"/v1/assignments/{quiz['id']}", json={**quiz, "name": "Quiz 1 (retake)", "pointsPossible": 50})
    assert r.json()["data"]["name"] == "Quiz 1 (retake)"
    assert r.json()["data"]["pointsPossible"] == 50

    assert client.delete(f"/v1/assignments/{quiz['id']}").status_code == 200
    assert client.get(f"/v1/assignments/{quiz['id']}").status_code == 404
    # 삭제된 과제의 성적만 사라짐
    grades = client.get("/v1/grades/").json()["data"]
    assert [(g["studentId"], g["assignmentId"]) for g in grades] == [(a["id"], project["id"])]


def test_missing_assignment_is_not_found(client, make_class):
    cls = make_class()
    payload = {"name": "Ghost", "category": "quiz", "pointsPossible": 10, "classId": cls["id"]}
    for r in (
        client.get("/v1/assignments/999"),
        client.put("/v1/assignments/999", json=payload),
        client.delete("/v1/assignments/999"),
    ):
        assert r.status_code == 404
        assert r.json()["error"]["code"] == "NOT_FOUND"


def test_gradebook_average_rounds_half_up(client, make_student, make_class, make_assignment):
    student = make_student()
    cls = make_class(student_ids=[student["id"]])
    for n, score in enumerate((52, 52, 52, 53)):
        assignment = make_assignment(cls["id"], name=f"Quiz {n}")
        client.put("/v1/grades/upsert", json={"studentId": student["id"], "assignmentId": assignment["id"], "score": score})

    rows = client.get(f"/v1/grades/gradebook/{cls['id']}").json()["data"]["rows"]
    assert rows[0]["average"] == 52.3


def test_concurrent_duplicate_insert_is_conflict(client, make_student, make_class, make_assignment, monkeypatch):
    a, _, _, assignment = _setup(make_student, make_class, make_assignment)
    payload = {"studentId": a["id"], "assignmentId": assignment["id"], "score": 70}
    assert client.post("/v1/grades/", json=payload).status_code == 201

    # 다른 요청이 먼저 저장한 상황: 조회 시점에는 없었던 것처럼
    monkeypatch.setattr(grade_service, "find_grade", lambda *args: None)
    r = client.post("/v1/grades/", json={**payload, "score": 75})
    assert r.status_code == 409
    assert r.json()["error"]["code"] == "DUPLICATE_RECORD"

    monkeypatch.undo()
    assert [g["score"] for g in client.get("/v1/grades/").json()["data"]] == [70]
