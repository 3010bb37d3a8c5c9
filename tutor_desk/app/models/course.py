"""Course model for Tutor Desk."""

from uuid import uuid4

from sqlalchemy import CheckConstraint, Column, ForeignKey, Numeric, String, Text

from tutor_desk.app.db.base_class import Base
from tutor_desk.app.db.types import UTCDateTime
from tutor_desk.app.core.time import utc_now


class Course(Base):
    __tablename__ = "courses"
    __table_args__ = (
        CheckConstraint("length(trim(title)) > 0", name="ck_courses_title_not_blank"),
        CheckConstraint("hourly_rate IS NULL OR hourly_rate >= 0", name="ck_courses_hourly_rate_non_negative"),
    )

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    tutor_id = Column(String(36), ForeignKey("profiles.id"), nullable=False, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    hourly_rate = Column(Numeric(10, 2), nullable=True)
    color_code = Column(String(20), nullable=True)
    created_at = Column(UTCDateTime, nullable=False, default=utc_now)
