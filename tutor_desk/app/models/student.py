"""Student model for Tutor Desk."""

from uuid import uuid4

from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, String, Text

from tutor_desk.app.db.base_class import Base
from tutor_desk.app.db.types import UTCDateTime, status_check
from tutor_desk.app.core.time import utc_now

STUDENT_STATUSES = ("active", "inactive", "archived")


class Student(Base):
    __tablename__ = "students"
    __table_args__ = (
        CheckConstraint("length(trim(full_name)) > 0", name="ck_students_full_name_not_blank"),
        CheckConstraint(status_check("status", STUDENT_STATUSES), name="ck_students_status"),
    )

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    tutor_id = Column(String(36), ForeignKey("profiles.id"), nullable=False, index=True)
    full_name = Column(String, nullable=False)
    email = Column(String, nullable=True)
    grade_level = Column(String, nullable=True)
    notes = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, default="active")
    risk_score = Column(Integer, nullable=False, default=0)
    created_at = Column(UTCDateTime, nullable=False, default=utc_now)
