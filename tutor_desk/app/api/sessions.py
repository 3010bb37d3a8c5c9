"""Session endpoints for Tutor Desk."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from tutor_desk.app.core.tenant import TenantContext
from tutor_desk.app.crud.crud_session import session_crud
from tutor_desk.app.db.session import get_db
from tutor_desk.app.dependencies.tenant import get_tenant
from tutor_desk.app.schemas.common import DeleteResponse, ReadResult
from tutor_desk.app.schemas.session import SessionCreate, SessionRead, SessionUpdate
from tutor_desk.app.services import repository

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.get("/", response_model=ReadResult[SessionRead])
async def list_sessions(db: Session = Depends(get_db), tenant: TenantContext = Depends(get_tenant)):
    return repository.list_sessions(db, tenant)


@router.post("/", response_model=SessionRead, status_code=status.HTTP_201_CREATED)
async def create_session(session_in: SessionCreate, db: Session = Depends(get_db), tenant: TenantContext = Depends(get_tenant)):
    session_obj = session_crud.create(db, tenant=tenant, obj_in=session_in)
    return SessionRead.model_validate(session_obj)


@router.patch("/{session_id}", response_model=SessionRead)
async def update_session(
    session_id: str,
    session_in: SessionUpdate,
    db: Session = Depends(get_db),
    tenant: TenantContext = Depends(get_tenant),
):
    session_obj = session_crud.update(db, tenant=tenant, id=session_id, patch=session_in)
    return SessionRead.model_validate(session_obj)


@router.delete("/{session_id}", response_model=DeleteResponse)
async def delete_session(session_id: str, db: Session = Depends(get_db), tenant: TenantContext = Depends(get_tenant)):
    session_crud.delete(db, tenant=tenant, id=session_id)
    return DeleteResponse(id=session_id)
