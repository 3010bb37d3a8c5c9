"""Course endpoints for Tutor Desk."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from tutor_desk.app.core.tenant import TenantContext
from tutor_desk.app.crud.crud_course import course_crud
from tutor_desk.app.db.session import get_db
from tutor_desk.app.dependencies.tenant import get_tenant
from tutor_desk.app.schemas.common import DeleteResponse, ReadResult
from tutor_desk.app.schemas.course import CourseCreate, CourseRead, CourseUpdate
from tutor_desk.app.services import repository

router = APIRouter(prefix="/courses", tags=["courses"])


@router.get("/", response_model=ReadResult[CourseRead])
async def list_courses(db: Session = Depends(get_db), tenant: TenantContext = Depends(get_tenant)):
    return repository.list_courses(db, tenant)


@router.post("/", response_model=CourseRead, status_code=status.HTTP_201_CREATED)
async def create_course(course_in: CourseCreate, db: Session = Depends(get_db), tenant: TenantContext = Depends(get_tenant)):
    return course_crud.create(db, tenant=tenant, obj_in=course_in)


@router.patch("/{course_id}", response_model=CourseRead)
async def update_course(
    course_id: str,
    course_in: CourseUpdate,
    db: Session = Depends(get_db),
    tenant: TenantContext = Depends(get_tenant),
):
    return course_crud.update(db, tenant=tenant, id=course_id, patch=course_in)


@router.delete("/{course_id}", response_model=DeleteResponse)
async def delete_course(course_id: str, db: Session = Depends(get_db), tenant: TenantContext = Depends(get_tenant)):
    course_crud.delete(db, tenant=tenant, id=course_id)
    return DeleteResponse(id=course_id)
