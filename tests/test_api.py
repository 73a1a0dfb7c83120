import io
from unittest.mock import MagicMock

from mlvisio_track.common.datetime_utils import today_iso
from mlvisio_track.users.credentials import hash_password


def test_login_wrong_password_is_401(client, add_user):
    add_user("u1", email="s1@x.com", password=hash_password("pw"))

    resp = client.post("/api/login", json={"email": "s1@x.com", "password": "nope"})

    assert resp.status_code == 401
    assert resp.get_json() == {"success": False, "message": "Invalid email or password."}


def test_login_ok(client, add_user):
    add_user("u1", email="s1@x.com", name="One", password=hash_password("pw"))

    resp = client.post("/api/login", json={"email": "s1@x.com", "password": "pw"})

    body = resp.get_json()
    assert resp.status_code == 200
    assert body["success"] is True
    assert body["data"]["user"]["email"] == "s1@x.com"
    assert body["data"]["token"].startswith("jwt-token-")


def test_preflight_answers_200_with_cors_headers(client):
    resp = client.open(
        "/api/attendance/mark",
        method="OPTIONS",
        headers={"Origin": "http://localhost:5173", "Access-Control-Request-Method": "POST"},
    )

    assert resp.status_code == 200
    assert resp.headers["Access-Control-Allow-Origin"] in ("*", "http://localhost:5173")
    assert resp.headers["Access-Control-Max-Age"] == "3600"


def test_unknown_endpoint_is_json_404(client):
    resp = client.get("/api/nope")

    assert resp.status_code == 404
    assert resp.get_json() == {"success": False, "message": "Endpoint not found"}


def test_settings_goal_default_and_unknown_key(client, store):
    resp = client.get("/api/settings/attendanceGoal")
    assert resp.get_json()["data"] == {
        "requiredPercentage": 80,
        "description": "Minimum attendance required for exam eligibility",
    }

    store.set("settings", "attendanceGoal", {"requiredPercentage": 75, "description": "Custom"})
    assert client.get("/api/settings/attendanceGoal").get_json()["data"]["requiredPercentage"] == 75

    resp = client.get("/api/settings/theme")
    assert resp.status_code == 404
    assert resp.get_json()["message"] == "Endpoint not found"


def test_dashboard_endpoint(client, add_user, add_attendance):
    add_user("u1", registrationNumber="S1")
    add_user("u2", registrationNumber="S2")
    add_attendance("a1", registrationNumber="S1", date=today_iso())

    body = client.get("/api/stats/dashboard").get_json()

    assert body["success"] is True
    assert body["data"]["totalStudents"] == 2
    assert body["data"]["attendanceRate"] == 50


def test_mark_then_list_by_date(client):
    resp = client.post(
        "/api/attendance/mark",
        json={"registrationNumber": "HNDIT/PT/2024/001", "subjectCode": "HNDIT401", "date": "2024-05-03"},
    )
    assert resp.status_code == 200
    assert resp.get_json()["message"] == "Attendance marked successfully"

    body = client.get("/api/attendance?date=2024-05-03").get_json()
    assert body["date"] == "2024-05-03"
    assert [r["id"] for r in body["data"]] == ["HNDIT_PT_2024_001_2024-05-03_HNDIT401"]


def test_mark_missing_fields_is_400(client):
    resp = client.post("/api/attendance/mark", json={"subjectCode": "HNDIT401"})

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Registration number and subject code are required"


def test_student_history_messages(client, add_user, add_attendance):
    add_user("u1", email="s1@x.com", registrationNumber="S1")
    add_attendance("r1", registrationNumber="S1", date="2024-05-01")

    assert client.get("/api/attendance/student").status_code == 400
    assert client.get("/api/attendance/student?email=ghost@x.com").status_code == 404

    body = client.get("/api/attendance/student?email=s1@x.com").get_json()
    assert body["message"] == "Found 1 attendance records for s1@x.com"


def test_streak_endpoint(client, add_user, add_attendance):
    add_user("u1", email="s1@x.com", registrationNumber="S1")
    add_attendance("r1", registrationNumber="S1", date="2024-05-03")
    add_attendance("r2", registrationNumber="S1", date="2024-05-02")

    assert client.get("/api/attendance/streak?email=s1@x.com").get_json()["data"] == {"streak": 2}


def test_recent_activity(client, add_attendance, fixed_now):
    add_attendance("r1", subjectCode="HNDIT401", timestamp=fixed_now)
    add_attendance("r2", subjectCode="HNDIT402", status="Absent", timestamp=fixed_now.replace(hour=10))
    add_attendance("r3", subjectCode="HNDIT403", status="Late", timestamp=fixed_now.replace(hour=8))

    rows = client.get("/api/activity/recent").get_json()["data"]

    assert [r["id"] for r in rows] == ["r2", "r1", "r3"]
    assert rows[0] == {
        "id": "r2",
        "type": "check-out",
        "details": "Marked absent for HNDIT402 class",
        "timestamp": fixed_now.replace(hour=10).isoformat(),
    }
    assert rows[2]["details"] == "Attendance recorded for HNDIT403 class"


def test_user_crud_round(client, store):
    resp = client.post("/api/users/create", json={"email": "n@x.com", "password": "pw", "name": "New"})
    user_id = resp.get_json()["data"]["id"]

    assert client.post("/api/users/create", json={"email": "n@x.com", "password": "pw"}).status_code == 409
    assert client.put(f"/api/users/update/{user_id}", json={"name": "Renamed"}).status_code == 200
    assert client.get(f"/api/users/profile/{user_id}").get_json()["data"]["name"] == "Renamed"
    assert client.delete(f"/api/users/delete/{user_id}").status_code == 200
    assert store.collections["users"][user_id]["isActive"] is False
    assert client.put("/api/users/update/ghost", json={"name": "x"}).status_code == 404


def test_schedule_create_and_week(client):
    resp = client.post(
        "/api/schedule/create",
        json={
            "subject": "HNDIT401",
            "department": "HNDIT",
            "day": "Monday",
            "startTime": "09:00",
            "endTime": "11:00",
            "room": "Lab 01",
        },
    )
    assert resp.status_code == 200

    week = client.get("/api/schedule/week?department=HNDIT").get_json()["data"]
    assert [r["id"] for r in week["Monday"]] == ["HNDIT401_Monday_0900"]

    resp = client.post("/api/schedule/create", json={"subject": "HNDIT401"})
    assert resp.status_code == 400


def test_lecturers_and_subjects(client, store):
    store.set("lecturers", "LEC001", {"lecturerId": "LEC001", "name": "Dr. A", "email": "a@college.edu"})
    store.set("subjects", "HNDA401", {"courseCode": "HNDA401", "department": "HNDA", "lecturerId": "LEC001"})

    lecturers = client.get("/api/lecturers").get_json()["data"]
    assert lecturers == [
        {"id": "LEC001", "lecturerId": "LEC001", "name": "Dr. A", "email": "a@college.edu", "department": None}
    ]

    subjects = client.get("/api/subjects?department=HNDA").get_json()["data"]
    assert subjects[0]["lecturerName"] == "Dr. A"


def test_upload_profile_picture(client, http_session):
    reply = MagicMock()
    reply.json.return_value = {"data": {"link": "https://i.imgur.com/abc.png"}}
    http_session.post.return_value = reply

    resp = client.post(
        "/api/uploadProfilePicture",
        data={"image": (io.BytesIO(b"img"), "me.png")},
        content_type="multipart/form-data",
    )

    assert resp.status_code == 200
    assert resp.get_json()["data"] == {"url": "https://i.imgur.com/abc.png"}


def test_upload_without_image_is_400(client):
    resp = client.post("/api/uploadProfilePicture", data={}, content_type="multipart/form-data")

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "No image uploaded"


def test_unexpected_failure_is_500_with_context(client, container, monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("datastore down")

    monkeypatch.setattr(container.attendance_service, "records_for_date", boom)

    resp = client.get("/api/attendance")

    assert resp.status_code == 500
    assert resp.get_json() == {"success": False, "message": "Failed to fetch attendance: datastore down"}
