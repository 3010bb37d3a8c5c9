from datetime import datetime, timezone
from decimal import Decimal

import pytest
from sqlalchemy.exc import IntegrityError

from tutor_desk.app.core.settings import get_settings
from tutor_desk.app.db.base import Base
from tutor_desk.app.db.session import SessionLocal, engine
from tutor_desk.app.models.course import Course
from tutor_desk.app.models.payment import PAYMENT_STATUSES, Payment
from tutor_desk.app.models.profile import Profile
from tutor_desk.app.models.session import SESSION_STATUSES, Session as TutoringSession
from tutor_desk.app.models.student import STUDENT_STATUSES, Student

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


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def test_every_declared_status_is_accepted(db):
    for status in STUDENT_STATUSES:
        db.add(Student(tutor_id=TUTOR_ID, full_name=f"Student {status}", status=status))
    db.commit()

    student = db.query(Student).first()
    course = Course(tutor_id=TUTOR_ID, title="Algebra")
    db.add(course)
    db.commit()
    for status in SESSION_STATUSES:
        db.add(
            TutoringSession(
                tutor_id=TUTOR_ID,
                course_id=course.id,
                start_time=datetime(2030, 1, 1, 10, tzinfo=timezone.utc),
                end_time=datetime(2030, 1, 1, 11, tzinfo=timezone.utc),
                status=status,
            )
        )
    for status in PAYMENT_STATUSES:
        db.add(Payment(tutor_id=TUTOR_ID, student_id=student.id, amount=Decimal("1.00"), status=status))
    db.commit()

    assert db.query(Student).count() == len(STUDENT_STATUSES)
    assert db.query(TutoringSession).count() == len(SESSION_STATUSES)
    assert db.query(Payment).count() == len(PAYMENT_STATUSES)


@pytest.mark.parametrize(
    "build",
    [
        lambda student_id: Student(tutor_id=TUTOR_ID, full_name="Jane", status="graduated"),
        lambda student_id: Payment(tutor_id=TUTOR_ID, student_id=student_id, amount=Decimal("1.00"), status="refunded"),
    ],
)
def test_undeclared_status_is_rejected(db, build):
    student = Student(tutor_id=TUTOR_ID, full_name="Payer")
    db.add(student)
    db.commit()

    db.add(build(student.id))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()
