"""Student schemas for Tutor Desk."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict

StudentStatus = Literal["active", "inactive", "archived"]


class StudentCreate(BaseModel):
    full_name: str
    email: Optional[str] = None
    grade_level: Optional[str] = None
    notes: Optional[str] = None


class StudentUpdate(BaseModel):
    full_name: Optional[str] = None
    email: Optional[str] = None
    grade_level: Optional[str] = None
    notes: Optional[str] = None
    status: Optional[StudentStatus] = None
    risk_score: Optional[int] = None


class StudentRead(BaseModel):
    id: str
    tutor_id: str
    full_name: str
    email: Optional[str] = None
    grade_level: Optional[str] = None
    notes: Optional[str] = None
    status: StudentStatus
    risk_score: int = 0
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class StudentRef(BaseModel):
    full_name: str

    model_config = ConfigDict(from_attributes=True)
