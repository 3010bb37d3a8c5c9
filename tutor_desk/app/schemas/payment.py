"""Payment and earnings schemas."""

from datetime import date, datetime
from decimal import Decimal
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict

from tutor_desk.app.schemas.student import StudentRef


class PaymentRead(BaseModel):
    id: str
    tutor_id: str
    student_id: str
    amount: Decimal
    currency: str
    status: Literal["pending", "paid", "overdue"]
    due_date: Optional[date] = None
    paid_at: Optional[datetime] = None
    created_at: datetime
    student: Optional[StudentRef] = None

    model_config = ConfigDict(from_attributes=True)


class MonthlyEarnings(BaseModel):
    month: str
    total: Decimal
