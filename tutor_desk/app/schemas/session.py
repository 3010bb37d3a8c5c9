"""Session schemas for Tutor Desk."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict

from tutor_desk.app.schemas.course import CourseRef
from tutor_desk.app.schemas.student import StudentRef

SessionStatus = Literal["scheduled", "completed", "cancelled"]


class SessionCreate(BaseModel):
    course_id: str
    student_id: Optional[str] = None
    start_time: datetime
    end_time: datetime
    topic: Optional[str] = None


class SessionUpdate(BaseModel):
    course_id: Optional[str] = None
    student_id: Optional[str] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    status: Optional[SessionStatus] = None
    topic: Optional[str] = None
    notes: Optional[str] = None


class SessionRead(BaseModel):
    id: str
    tutor_id: str
    course_id: str
    student_id: Optional[str] = None
    start_time: datetime
    end_time: datetime
    status: SessionStatus
    topic: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime
    student: Optional[StudentRef] = None
    course: Optional[CourseRef] = None

    model_config = ConfigDict(from_attributes=True)
