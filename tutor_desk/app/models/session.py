"""Tutoring session model for Tutor Desk."""

from uuid import uuid4

from sqlalchemy import CheckConstraint, Column, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from tutor_desk.app.db.base_class import Base
from tutor_desk.app.db.types import UTCDateTime, status_check
from tutor_desk.app.core.time import utc_now

SESSION_STATUSES = ("scheduled", "completed", "cancelled")


class Session(Base):
    __tablename__ = "sessions"
    __table_args__ = (
        CheckConstraint("end_time > start_time", name="ck_sessions_end_after_start"),
        CheckConstraint(status_check("status", SESSION_STATUSES), name="ck_sessions_status"),
    )

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    tutor_id = Column(String(36), ForeignKey("profiles.id"), nullable=False, index=True)
    # Referenced courses cannot be deleted; deleted students leave the session orphaned
    course_id = Column(String(36), ForeignKey("courses.id", ondelete="RESTRICT"), nullable=False, index=True)
    student_id = Column(String(36), ForeignKey("students.id", ondelete="SET NULL"), nullable=True, index=True)
    start_time = Column(UTCDateTime, nullable=False)
    end_time = Column(UTCDateTime, nullable=False)
    status = Column(String(20), nullable=False, default="scheduled")
    topic = Column(String, nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(UTCDateTime, nullable=False, default=utc_now)

    student = relationship("Student", foreign_keys=[student_id], passive_deletes=True)
    course = relationship("Course", foreign_keys=[course_id], passive_deletes=True)
