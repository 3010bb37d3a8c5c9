"""Payment and earnings endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tutor_desk.app.core.tenant import TenantContext
from tutor_desk.app.db.session import get_db
from tutor_desk.app.dependencies.tenant import get_tenant
from tutor_desk.app.schemas.common import ReadResult
from tutor_desk.app.schemas.payment import MonthlyEarnings, PaymentRead
from tutor_desk.app.services import repository

router = APIRouter(tags=["payments"])


@router.get("/payments/recent", response_model=ReadResult[PaymentRead])
async def list_recent_payments(db: Session = Depends(get_db), tenant: TenantContext = Depends(get_tenant)):
    return repository.list_recent_payments(db, tenant)


@router.get("/earnings/monthly", response_model=ReadResult[MonthlyEarnings])
async def get_monthly_earnings(db: Session = Depends(get_db), tenant: TenantContext = Depends(get_tenant)):
    return repository.get_monthly_earnings(db, tenant)
