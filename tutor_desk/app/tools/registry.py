"""Named operations exposed to the chat assistant.

Each tool is a thin wrapper over a repository read or a gateway mutation: it
validates the arguments against a pydantic model, calls the same function the
HTTP API uses and returns JSON-ready data.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel, Field
from pydantic import ValidationError as SchemaValidationError
from sqlalchemy.orm import Session

from tutor_desk.app.core.errors import UnknownToolError, ValidationError
from tutor_desk.app.core.tenant import TenantContext
from tutor_desk.app.crud.crud_course import course_crud
from tutor_desk.app.crud.crud_session import session_crud
from tutor_desk.app.crud.crud_student import student_crud
from tutor_desk.app.schemas.course import CourseCreate, CourseRead, CourseUpdate
from tutor_desk.app.schemas.session import SessionCreate, SessionRead, SessionUpdate
from tutor_desk.app.schemas.student import StudentCreate, StudentRead, StudentUpdate
from tutor_desk.app.services import repository

logger = logging.getLogger(__name__)


class NoArguments(BaseModel):
    pass


class UpdateStudentArgs(BaseModel):
    id: str = Field(description="UUID of the student")
    patch: StudentUpdate


class UpdateCourseArgs(BaseModel):
    id: str = Field(description="UUID of the course")
    patch: CourseUpdate


class UpdateSessionArgs(BaseModel):
    id: str = Field(description="UUID of the session")
    patch: SessionUpdate


class DeleteArgs(BaseModel):
    id: str


@dataclass(frozen=True)
class Tool:
    name: str
    description: str
    input_model: type[BaseModel]
    handler: Callable[[Session, TenantContext, Any], Any]

    def declaration(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "input_schema": self.input_model.model_json_schema(),
        }


def _reader(read):
    return lambda db, tenant, args: read(db, tenant).model_dump(mode="json")


def _creator(crud, read_schema):
    def handler(db, tenant, args):
        return read_schema.model_validate(crud.create(db, tenant=tenant, obj_in=args)).model_dump(mode="json")

    return handler


def _updater(crud, read_schema):
    def handler(db, tenant, args):
        obj = crud.update(db, tenant=tenant, id=args.id, patch=args.patch)
        return read_schema.model_validate(obj).model_dump(mode="json")

    return handler


def _deleter(crud):
    def handler(db, tenant, args):
        crud.delete(db, tenant=tenant, id=args.id)
        return {"id": args.id}

    return handler


TOOLS: dict[str, Tool] = {
    tool.name: tool
    for tool in (
        Tool("getStudents", "Fetch list of students for the tutor", NoArguments, _reader(repository.list_students)),
        Tool("getCourses", "Fetch list of courses created by the tutor", NoArguments, _reader(repository.list_courses)),
        Tool("getSessions", "Fetch upcoming and recent sessions", NoArguments, _reader(repository.list_sessions)),
        Tool("getRecentPayments", "Fetch the ten most recent payments", NoArguments, _reader(repository.list_recent_payments)),
        Tool("getMonthlyEarnings", "Fetch paid earnings per month", NoArguments, _reader(repository.get_monthly_earnings)),
        Tool("getStudentRisks", "Fetch students flagged as high risk", NoArguments, _reader(repository.get_student_risks)),
        Tool("createStudent", "Add a new student", StudentCreate, _creator(student_crud, StudentRead)),
        Tool("createCourse", "Create a new course", CourseCreate, _creator(course_crud, CourseRead)),
        Tool("createSession", "Schedule a session", SessionCreate, _creator(session_crud, SessionRead)),
        Tool("updateStudent", "Update an existing student's details", UpdateStudentArgs, _updater(student_crud, StudentRead)),
        Tool("updateCourse", "Update an existing course's details", UpdateCourseArgs, _updater(course_crud, CourseRead)),
        Tool("updateSession", "Update an existing session's details", UpdateSessionArgs, _updater(session_crud, SessionRead)),
        Tool("deleteStudent", "Delete a student", DeleteArgs, _deleter(student_crud)),
        Tool("deleteCourse", "Delete a course", DeleteArgs, _deleter(course_crud)),
        Tool("deleteSession", "Delete a session", DeleteArgs, _deleter(session_crud)),
    )
}


def get_tool(name: str) -> Tool:
    tool = TOOLS.get(name)
    if tool is None:
        raise UnknownToolError(f"Unknown tool: {name}")
    return tool


def invoke_tool(
    db: Session,
    tenant: TenantContext,
    name: str,
    arguments: Optional[Mapping[str, Any]] = None,
) -> Any:
    tool = get_tool(name)
    try:
        args = tool.input_model.model_validate(dict(arguments or {}))
    except SchemaValidationError as exc:
        raise ValidationError(f"Invalid arguments for {name}: {exc}") from exc
    logger.info("Invoking tool %s for tutor %s", name, tenant.tutor_id)
    return tool.handler(db, tenant, args)
