"""Payment model; read-only source for earnings aggregation."""

from uuid import uuid4

from sqlalchemy import CheckConstraint, Column, Date, ForeignKey, Numeric, String
from sqlalchemy.orm import relationship

from tutor_desk.app.db.base_class import Base
from tutor_desk.app.db.types import UTCDateTime, status_check
from tutor_desk.app.core.time import utc_now

PAYMENT_STATUSES = ("pending", "paid", "overdue")


class Payment(Base):
    __tablename__ = "payments"
    __table_args__ = (
        CheckConstraint(status_check("status", PAYMENT_STATUSES), name="ck_payments_status"),
    )

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    tutor_id = Column(String(36), ForeignKey("profiles.id"), nullable=False, index=True)
    student_id = Column(String(36), ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True)
    amount = Column(Numeric(10, 2), nullable=False)
    currency = Column(String(3), nullable=False, default="USD")
    status = Column(String(20), nullable=False, default="pending")
    due_date = Column(Date, nullable=True)
    paid_at = Column(UTCDateTime, nullable=True)
    created_at = Column(UTCDateTime, nullable=False, default=utc_now)

    student = relationship("Student", foreign_keys=[student_id], passive_deletes=True)
