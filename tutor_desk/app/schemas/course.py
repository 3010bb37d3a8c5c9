"""Course schemas for Tutor Desk."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CourseCreate(BaseModel):
    title: str
    description: Optional[str] = None
    hourly_rate: Optional[float] = Field(default=None, ge=0)
    color_code: Optional[str] = None


class CourseUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    hourly_rate: Optional[float] = Field(default=None, ge=0)
    color_code: Optional[str] = None


class CourseRead(BaseModel):
    id: str
    tutor_id: str
    title: str
    description: Optional[str] = None
    hourly_rate: Optional[float] = None
    color_code: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CourseRef(BaseModel):
    title: str

    model_config = ConfigDict(from_attributes=True)
