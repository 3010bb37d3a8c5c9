"""Tutor profile model; the owning tenant of every primary entity."""

from uuid import uuid4

from sqlalchemy import Column, String

from tutor_desk.app.db.base_class import Base
from tutor_desk.app.db.types import UTCDateTime
from tutor_desk.app.core.time import utc_now


class Profile(Base):
    __tablename__ = "profiles"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    email = Column(String, nullable=True, unique=True)
    full_name = Column(String, nullable=True)
    avatar_url = Column(String(512), nullable=True)
    created_at = Column(UTCDateTime, nullable=False, default=utc_now)
