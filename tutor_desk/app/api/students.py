"""Student endpoints for Tutor Desk."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from tutor_desk.app.core.tenant import TenantContext
from tutor_desk.app.crud.crud_student import student_crud
from tutor_desk.app.db.session import get_db
from tutor_desk.app.dependencies.tenant import get_tenant
from tutor_desk.app.schemas.common import DeleteResponse, ReadResult
from tutor_desk.app.schemas.student import StudentCreate, StudentRead, StudentUpdate
from tutor_desk.app.services import repository

router = APIRouter(prefix="/students", tags=["students"])


@router.get("/", response_model=ReadResult[StudentRead])
async def list_students(db: Session = Depends(get_db), tenant: TenantContext = Depends(get_tenant)):
    return repository.list_students(db, tenant)


@router.get("/risks", response_model=ReadResult[StudentRead])
async def list_student_risks(db: Session = Depends(get_db), tenant: TenantContext = Depends(get_tenant)):
    return repository.get_student_risks(db, tenant)


@router.post("/", response_model=StudentRead, status_code=status.HTTP_201_CREATED)
async def create_student(student_in: StudentCreate, db: Session = Depends(get_db), tenant: TenantContext = Depends(get_tenant)):
    return student_crud.create(db, tenant=tenant, obj_in=student_in)


@router.patch("/{student_id}", response_model=StudentRead)
async def update_student(
    student_id: str,
    student_in: StudentUpdate,
    db: Session = Depends(get_db),
    tenant: TenantContext = Depends(get_tenant),
):
    return student_crud.update(db, tenant=tenant, id=student_id, patch=student_in)


@router.delete("/{student_id}", response_model=DeleteResponse)
async def delete_student(student_id: str, db: Session = Depends(get_db), tenant: TenantContext = Depends(get_tenant)):
    student_crud.delete(db, tenant=tenant, id=student_id)
    return DeleteResponse(id=student_id)
