from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from tutor_desk.app.core.settings import get_settings
from tutor_desk.app.db.base import Base
from tutor_desk.app.db.session import SessionLocal, engine
from tutor_desk.app.main import app
from tutor_desk.app.models.profile import Profile

TUTOR_ID = get_settings().default_tutor_id


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        db.add(Profile(id=TUTOR_ID, full_name="Tutor"))
        db.commit()
    finally:
        db.close()
    yield
    Base.metadata.drop_all(bind=engine)


def create_course_and_student(client: TestClient) -> tuple[str, str]:
    course = client.post("/courses/", json={"title": "Algebra"}).json()
    student = client.post("/students/", json={"full_name": "Jane Doe"}).json()
    return course["id"], student["id"]


def create_session(client: TestClient, course_id: str, student_id: str | None, start: str, end: str, **extra):
    payload = {"course_id": course_id, "student_id": student_id, "start_time": start, "end_time": end, **extra}
    return client.post("/sessions/", json=payload)


def test_create_session_defaults_to_scheduled():
    client = TestClient(app)
    course_id, student_id = create_course_and_student(client)

    resp = create_session(client, course_id, student_id, "2030-01-01T10:00:00Z", "2030-01-01T11:00:00Z", topic="Fractions")
    assert resp.status_code == 201
    data = resp.json()
    assert data["status"] == "scheduled"
    assert data["topic"] == "Fractions"
    assert data["tutor_id"] == TUTOR_ID
    assert data["student"] == {"full_name": "Jane Doe"}
    assert data["course"] == {"title": "Algebra"}


def test_list_sessions_ordered_by_start_with_annotations():
    client = TestClient(app)
    course_id, student_id = create_course_and_student(client)
    create_session(client, course_id, student_id, "2030-01-03T10:00:00Z", "2030-01-03T11:00:00Z", topic="later")
    create_session(client, course_id, None, "2030-01-01T10:00:00Z", "2030-01-01T11:00:00Z", topic="earlier")

    data = client.get("/sessions/").json()
    assert data["ok"] is True
    assert [s["topic"] for s in data["items"]] == ["earlier", "later"]
    assert data["items"][0]["student"] is None
    assert data["items"][0]["course"] == {"title": "Algebra"}
    assert data["items"][1]["student"] == {"full_name": "Jane Doe"}


def test_create_session_with_unknown_course_fails():
    client = TestClient(app)
    _, student_id = create_course_and_student(client)

    resp = create_session(client, "no-such-course", student_id, "2030-01-01T10:00:00Z", "2030-01-01T11:00:00Z")
    assert resp.status_code == 409
    assert resp.json()["detail"].startswith("Failed to create session")


def test_create_session_ending_before_start_fails():
    client = TestClient(app)
    course_id, student_id = create_course_and_student(client)

    resp = create_session(client, course_id, student_id, "2030-01-01T11:00:00Z", "2030-01-01T10:00:00Z")
    assert resp.status_code == 409


def test_update_session_null_clears_and_absent_keeps():
    client = TestClient(app)
    course_id, student_id = create_course_and_student(client)
    session = create_session(
        client, course_id, student_id, "2030-01-01T10:00:00Z", "2030-01-01T11:00:00Z", topic="Fractions"
    ).json()

    resp = client.patch(f"/sessions/{session['id']}", json={"topic": None})
    assert resp.status_code == 200
    data = resp.json()
    assert data["topic"] is None
    assert data["status"] == "scheduled"


def test_update_session_status():
    client = TestClient(app)
    course_id, student_id = create_course_and_student(client)
    session = create_session(client, course_id, student_id, "2030-01-01T10:00:00Z", "2030-01-01T11:00:00Z").json()

    resp = client.patch(f"/sessions/{session['id']}", json={"status": "completed", "notes": "Went well"})
    assert resp.status_code == 200
    assert resp.json()["status"] == "completed"
    assert resp.json()["notes"] == "Went well"


def test_update_session_rejects_unknown_status():
    client = TestClient(app)
    course_id, student_id = create_course_and_student(client)
    session = create_session(client, course_id, student_id, "2030-01-01T10:00:00Z", "2030-01-01T11:00:00Z").json()

    resp = client.patch(f"/sessions/{session['id']}", json={"status": "postponed"})
    assert resp.status_code == 422


def test_deleting_student_orphans_sessions():
    client = TestClient(app)
    course_id, student_id = create_course_and_student(client)
    create_session(client, course_id, student_id, "2030-01-01T10:00:00Z", "2030-01-01T11:00:00Z")

    assert client.delete(f"/students/{student_id}").status_code == 200

    sessions = client.get("/sessions/").json()["items"]
    assert len(sessions) == 1
    assert sessions[0]["student_id"] is None
    assert sessions[0]["student"] is None


def test_delete_session():
    client = TestClient(app)
    course_id, student_id = create_course_and_student(client)
    session = create_session(client, course_id, student_id, "2030-01-01T10:00:00Z", "2030-01-01T11:00:00Z").json()

    resp = client.delete(f"/sessions/{session['id']}")
    assert resp.status_code == 200
    assert client.get("/sessions/").json()["items"] == []


def test_offset_timestamps_stored_as_utc_and_ordered_by_instant():
    client = TestClient(app)
    course_id, student_id = create_course_and_student(client)
    # 04:30 UTC on Jan 2, later than the session below despite the earlier wall clock
    late = create_session(client, course_id, student_id, "2030-01-01T23:30:00-05:00", "2030-01-02T00:30:00-05:00", topic="late")
    create_session(client, course_id, student_id, "2030-01-02T01:00:00+00:00", "2030-01-02T02:00:00+00:00", topic="early")

    assert late.status_code == 201
    assert datetime.fromisoformat(late.json()["start_time"]) == datetime(2030, 1, 2, 4, 30, tzinfo=timezone.utc)

    data = client.get("/sessions/").json()
    assert [s["topic"] for s in data["items"]] == ["early", "late"]


def test_session_window_compared_across_offsets():
    client = TestClient(app)
    course_id, student_id = create_course_and_student(client)

    # Ends at 01:00 UTC, before its 04:30 UTC start
    resp = create_session(client, course_id, student_id, "2030-01-01T23:30:00-05:00", "2030-01-02T01:00:00+00:00")
    assert resp.status_code == 409
