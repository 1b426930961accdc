from urllib.parse import quote

WEEKDAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]


def facilitator(name, department, subject_id, periods=4):
    return {
        "id": name.lower(),
        "name": name,
        "department": department,
        "subjectId": subject_id,
        "availableDays": WEEKDAYS,
        "periodsPerWeek": periods,
    }


def test_catalog_exposes_school_defaults(client):
    response = client.get("/api/catalog")
    assert response.status_code == 200
    payload = response.json()

    assert payload["days"] == WEEKDAYS
    assert payload["departments"]["Junior High School"] == ["Basic 7", "Basic 8", "Basic 9"]
    assert [slot["label"] for slot in payload["timeSlots"]][:2] == ["Morning Assembly", "Period 1"]
    assert payload["timeSlots"][0]["isAssembly"] is True
    assert [s["id"] for s in payload["breakSubjects"]] == ["snack", "lunch", "assembly"]
    assert len(payload["interventionSubjects"]) == 5
    assert payload["supportTimeSlots"][0]["startTime"] == "06:30"


def test_generate_with_defaults(client):
    response = client.post("/api/timetable/generate", json={})
    assert response.status_code == 200
    payload = response.json()

    assert len(payload["entries"]) == 14 * 5 * 11
    assert payload["conflicts"] == []
    summary = payload["summary"]
    assert summary["classCount"] == 14
    assert summary["standardEntries"] == 770
    assert summary["interventionEntries"] == 0
    assert summary["unresolvedCells"] == 14 * 5 * 7
    assert summary["facilitatorLoad"] == {}

    entry = payload["entries"][0]
    assert entry["classKey"] == "Creche"
    assert entry["teacherId"] == "None"
    assert entry["subject"]["id"] == "assembly"
    assert entry["isIntervention"] is False


def test_generate_applies_rules_and_support_lanes(client):
    catalog = client.get("/api/catalog").json()
    response = client.post(
        "/api/timetable/generate",
        json={
            "rules": [
                {
                    "id": "r1",
                    "name": "Monday Worship",
                    "targetDept": "ALL",
                    "day": "Monday",
                    "slotLabel": "Period 1",
                    "subjectId": "worship",
                    "isActive": True,
                }
            ],
            "facilitators": [facilitator("Yaw", "Junior High School", "chess")],
            "streamConfig": {"Basic 7": ["A", "B"]},
            "supportSlots": catalog["supportTimeSlots"],
            "interventionSubjects": catalog["interventionSubjects"],
        },
    )
    assert response.status_code == 200
    payload = response.json()

    worship = [
        e for e in payload["entries"] if e["day"] == "Monday" and e["slot"]["label"] == "Period 1"
    ]
    assert len(worship) == 15
    assert all(e["subject"]["id"] == "worship" and e["teacherId"] == "None" for e in worship)

    summary = payload["summary"]
    assert summary["classCount"] == 15
    assert summary["interventionEntries"] == 15 * 5 * 3
    assert summary["conflicts"] == 30
    assert summary["highSeverityConflicts"] == 30
    assert summary["facilitatorLoad"]["Yaw"] == 4 * 15

    yaw = [c for c in payload["conflicts"] if c["teacherId"] == "Yaw"]
    assert yaw[0]["classKeys"] == ["Basic 7-A", "Basic 7-B", "Basic 8", "Basic 9"]
    assert yaw[0]["severity"] == "high"


def test_generate_rejects_unknown_department(client):
    response = client.post(
        "/api/timetable/generate",
        json={"facilitators": [facilitator("Ama", "Senior High", "mat")]},
    )
    assert response.status_code == 422


def test_detect_conflicts_endpoint(client):
    slot = {"startTime": "08:30", "endTime": "09:10", "label": "Period 1"}
    subject = {"id": "mat", "name": "Mathematics", "category": "Core"}
    entries = [
        {"day": "Monday", "slot": slot, "subject": subject, "teacherId": "Mr. Owusu", "classKey": key}
        for key in ("Basic 7-A", "Basic 8-A")
    ]
    entries.append({"day": "Monday", "slot": slot, "subject": subject, "teacherId": "Staff Pool", "classKey": "Basic 9"})

    response = client.post("/api/conflicts/detect", json={"entries": entries})
    assert response.status_code == 200
    assert response.json() == [
        {
            "teacherId": "Mr. Owusu",
            "day": "Monday",
            "startTime": "08:30",
            "classKeys": ["Basic 7-A", "Basic 8-A"],
            "severity": "high",
        }
    ]


def test_class_timetable_view(client):
    body = {"facilitators": [facilitator("Kofi", "Junior High School", "mat", periods=5)]}
    response = client.post(f"/api/timetable/classes/{quote('Basic 8')}", json=body)
    assert response.status_code == 200
    payload = response.json()

    assert payload["classKey"] == "Basic 8"
    assert payload["isIntervention"] is False
    assert list(payload["days"]) == WEEKDAYS
    for cells in payload["days"].values():
        assert len(cells) == 11
        assert all(cell["entry"]["classKey"] == "Basic 8" for cell in cells)
        for cell in cells:
            if cell["conflict"] is not None:
                assert cell["entry"]["teacherId"] == "Kofi"
                assert "Basic 8" in cell["conflict"]["classKeys"]


def test_class_timetable_view_for_support_lane(client):
    catalog = client.get("/api/catalog").json()
    body = {
        "supportSlots": catalog["supportTimeSlots"],
        "interventionSubjects": catalog["interventionSubjects"],
    }
    response = client.post("/api/timetable/classes/KG%201?intervention=true", json=body)
    assert response.status_code == 200
    days = response.json()["days"]
    assert all(len(cells) == 3 for cells in days.values())
    assert all(cell["entry"]["isIntervention"] for cells in days.values() for cell in cells)
    assert all(cell["conflict"]["teacherId"] == "Intervention Specialist" for cell in days["Monday"])


def test_unknown_class_is_not_found(client):
    response = client.post("/api/timetable/classes/Basic%2010", json={})
    assert response.status_code == 404
    assert response.json()["message"] == "Class with id Basic 10 not found"
    assert response.json()["details"]["resource_id"] == "Basic 10"


def test_oversized_request_is_rejected(client):
    response = client.post(
        "/api/conflicts/detect",
        content=b"{}",
        headers={"Content-Type": "application/json", "Content-Length": "999999999"},
    )
    assert response.status_code == 413
    assert response.json()["message"] == "Request body too large"
