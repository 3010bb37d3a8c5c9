from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from tutor_desk.app.core.settings import get_settings
from tutor_desk.app.core.tenant import TenantContext
from tutor_desk.app.db.base import Base
from tutor_desk.app.db.session import SessionLocal, engine
from tutor_desk.app.main import app
from tutor_desk.app.models.course import Course
from tutor_desk.app.models.payment import Payment
from tutor_desk.app.models.profile import Profile
from tutor_desk.app.models.session import Session as TutoringSession
from tutor_desk.app.models.student import Student
from tutor_desk.app.services import repository

TUTOR_ID = get_settings().default_tutor_id
OTHER_TUTOR_ID = "0ther000-0000-4000-a000-000000000000"
TENANT = TenantContext(tutor_id=TUTOR_ID)
BASE_TIME = datetime(2030, 1, 1, 9, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        db.add_all([Profile(id=TUTOR_ID, full_name="Tutor"), Profile(id=OTHER_TUTOR_ID, full_name="Other")])
        db.commit()
    finally:
        db.close()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def _student(db, name: str, tutor_id: str = TUTOR_ID, **fields) -> Student:
    student = Student(tutor_id=tutor_id, full_name=name, **fields)
    db.add(student)
    db.commit()
    db.refresh(student)
    return student


def test_list_students_is_tenant_scoped(db):
    _student(db, "Mine")
    _student(db, "Theirs", tutor_id=OTHER_TUTOR_ID)

    result = repository.list_students(db, TENANT)
    assert result.ok
    assert [s.full_name for s in result.items] == ["Mine"]


def test_list_students_orders_by_creation_desc(db):
    _student(db, "Oldest", created_at=BASE_TIME)
    _student(db, "Newest", created_at=BASE_TIME + timedelta(days=2))
    _student(db, "Middle", created_at=BASE_TIME + timedelta(days=1))

    result = repository.list_students(db, TENANT)
    assert [s.full_name for s in result.items] == ["Newest", "Middle", "Oldest"]


def test_list_students_degrades_on_storage_failure(db):
    _student(db, "Jane Doe")
    Payment.__table__.drop(bind=engine)
    TutoringSession.__table__.drop(bind=engine)
    Student.__table__.drop(bind=engine)

    result = repository.list_students(db, TENANT)
    assert result.ok is False
    assert result.items == []
    assert "students" in result.error


def test_list_sessions_degrades_on_storage_failure(db):
    TutoringSession.__table__.drop(bind=engine)

    result = repository.list_sessions(db, TENANT)
    assert result.ok is False
    assert result.items == []


def test_list_sessions_failure_reported_through_api():
    TutoringSession.__table__.drop(bind=engine)
    client = TestClient(app)

    resp = client.get("/sessions/")
    assert resp.status_code == 200
    data = resp.json()
    assert data["items"] == []
    assert data["ok"] is False
    assert data["error"]


def test_list_sessions_outer_joins_relations(db):
    course = Course(tutor_id=TUTOR_ID, title="Chemistry")
    db.add(course)
    db.commit()
    student = _student(db, "Jane Doe")
    db.add_all(
        [
            TutoringSession(
                tutor_id=TUTOR_ID,
                course_id=course.id,
                student_id=student.id,
                start_time=BASE_TIME + timedelta(hours=2),
                end_time=BASE_TIME + timedelta(hours=3),
            ),
            TutoringSession(
                tutor_id=TUTOR_ID,
                course_id=course.id,
                student_id=None,
                start_time=BASE_TIME,
                end_time=BASE_TIME + timedelta(hours=1),
            ),
        ]
    )
    db.commit()

    result = repository.list_sessions(db, TENANT)
    assert len(result.items) == 2
    first, second = result.items
    assert first.student is None
    assert first.course.title == "Chemistry"
    assert second.student.full_name == "Jane Doe"


def test_recent_payments_limited_to_ten_newest(db):
    student = _student(db, "Payer")
    for i in range(12):
        db.add(
            Payment(
                tutor_id=TUTOR_ID,
                student_id=student.id,
                amount=Decimal("10.00") + i,
                status="paid",
                created_at=BASE_TIME + timedelta(days=i),
            )
        )
    db.commit()

    result = repository.list_recent_payments(db, TENANT)
    assert result.ok
    assert len(result.items) == 10
    assert result.items[0].amount == Decimal("21.00")
    assert result.items[-1].amount == Decimal("12.00")
    assert all(p.student.full_name == "Payer" for p in result.items)


def test_student_risks_strictly_above_threshold(db):
    _student(db, "Fine", risk_score=10)
    _student(db, "Borderline", risk_score=50)
    _student(db, "Worrying", risk_score=51)
    _student(db, "Critical", risk_score=90)
    _student(db, "Elsewhere", tutor_id=OTHER_TUTOR_ID, risk_score=99)

    result = repository.get_student_risks(db, TENANT)
    assert [s.full_name for s in result.items] == ["Critical", "Worrying"]
