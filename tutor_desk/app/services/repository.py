"""Tenant-scoped reads for the dashboard and the tool surface.

Every function returns a ``ReadResult``. Storage failures are logged and turned
into a failed result with no items; they never propagate to the caller.
"""

import logging

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from tutor_desk.app.core.settings import get_settings
from tutor_desk.app.core.tenant import TenantContext
from tutor_desk.app.db.views import MONTHLY_EARNINGS_VIEW
from tutor_desk.app.models.course import Course
from tutor_desk.app.models.payment import Payment
from tutor_desk.app.models.session import Session as SessionModel
from tutor_desk.app.models.student import Student
from tutor_desk.app.schemas.common import ReadResult
from tutor_desk.app.schemas.course import CourseRead
from tutor_desk.app.schemas.payment import MonthlyEarnings, PaymentRead
from tutor_desk.app.schemas.session import SessionRead
from tutor_desk.app.schemas.student import StudentRead
from tutor_desk.app.services.aggregation import monthly_earnings_from_payments, monthly_earnings_from_rows

logger = logging.getLogger(__name__)


def _failed(db: Session, what: str, exc: SQLAlchemyError) -> str:
    db.rollback()
    logger.error("Error fetching %s: %s", what, exc)
    return f"Failed to load {what}: {exc}"


def list_students(db: Session, tenant: TenantContext) -> ReadResult[StudentRead]:
    try:
        students = (
            db.query(Student)
            .filter(Student.tutor_id == tenant.tutor_id)
            .order_by(Student.created_at.desc())
            .all()
        )
        return ReadResult[StudentRead](items=[StudentRead.model_validate(s) for s in students])
    except SQLAlchemyError as exc:
        return ReadResult[StudentRead](error=_failed(db, "students", exc))


def list_courses(db: Session, tenant: TenantContext) -> ReadResult[CourseRead]:
    try:
        courses = (
            db.query(Course)
            .filter(Course.tutor_id == tenant.tutor_id)
            .order_by(Course.created_at.desc())
            .all()
        )
        return ReadResult[CourseRead](items=[CourseRead.model_validate(c) for c in courses])
    except SQLAlchemyError as exc:
        return ReadResult[CourseRead](error=_failed(db, "courses", exc))


def list_sessions(db: Session, tenant: TenantContext) -> ReadResult[SessionRead]:
    """Sessions by start time, annotated with student name and course title."""
    try:
        sessions = (
            db.query(SessionModel)
            .options(joinedload(SessionModel.student), joinedload(SessionModel.course))
            .filter(SessionModel.tutor_id == tenant.tutor_id)
            .order_by(SessionModel.start_time.asc())
            .all()
        )
        return ReadResult[SessionRead](items=[SessionRead.model_validate(s) for s in sessions])
    except SQLAlchemyError as exc:
        return ReadResult[SessionRead](error=_failed(db, "sessions", exc))


def list_recent_payments(db: Session, tenant: TenantContext) -> ReadResult[PaymentRead]:
    limit = get_settings().recent_payments_limit
    try:
        payments = (
            db.query(Payment)
            .options(joinedload(Payment.student))
            .filter(Payment.tutor_id == tenant.tutor_id)
            .order_by(Payment.created_at.desc())
            .limit(limit)
            .all()
        )
        return ReadResult[PaymentRead](items=[PaymentRead.model_validate(p) for p in payments])
    except SQLAlchemyError as exc:
        return ReadResult[PaymentRead](error=_failed(db, "payments", exc))


def get_monthly_earnings(db: Session, tenant: TenantContext) -> ReadResult[MonthlyEarnings]:
    """Monthly totals from the precomputed view, or from paid payments when the view is missing.

    Fallback months are in first-seen order, not chronological.
    """
    limit = get_settings().monthly_earnings_limit
    try:
        rows = db.execute(
            text(f"SELECT month, total FROM {MONTHLY_EARNINGS_VIEW} WHERE tutor_id = :tutor_id LIMIT :limit"),
            {"tutor_id": tenant.tutor_id, "limit": limit},
        ).all()
        return ReadResult[MonthlyEarnings](items=monthly_earnings_from_rows(rows))
    except SQLAlchemyError as exc:
        db.rollback()
        logger.warning("Monthly earnings view unavailable, aggregating payments instead: %s", exc)

    try:
        payments = (
            db.query(Payment.amount, Payment.paid_at)
            .filter(
                Payment.tutor_id == tenant.tutor_id,
                Payment.status == "paid",
                Payment.paid_at.is_not(None),
            )
            .order_by(Payment.paid_at.asc())
            .all()
        )
        return ReadResult[MonthlyEarnings](items=monthly_earnings_from_payments(payments))
    except SQLAlchemyError as exc:
        return ReadResult[MonthlyEarnings](error=_failed(db, "monthly earnings", exc))


def get_student_risks(db: Session, tenant: TenantContext) -> ReadResult[StudentRead]:
    threshold = get_settings().risk_threshold
    try:
        students = (
            db.query(Student)
            .filter(Student.tutor_id == tenant.tutor_id, Student.risk_score > threshold)
            .order_by(Student.risk_score.desc())
            .all()
        )
        return ReadResult[StudentRead](items=[StudentRead.model_validate(s) for s in students])
    except SQLAlchemyError as exc:
        return ReadResult[StudentRead](error=_failed(db, "at-risk students", exc))
