"""Students, courses and sessions views built on ``ViewState``."""

import asyncio
from collections.abc import Callable
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel
from pydantic import ValidationError as SchemaValidationError
from sqlalchemy.orm import Session

from tutor_desk.app.core.errors import ValidationError
from tutor_desk.app.core.tenant import TenantContext
from tutor_desk.app.core.time import day_label, ensure_utc, utc_now, weekday_label
from tutor_desk.app.crud.base import CRUDBase
from tutor_desk.app.schemas.common import ReadResult
from tutor_desk.app.views.state import ChartSpec, CreateForm, Deleter, Fetcher, ViewState

SessionFactory = Callable[[], Session]
Clock = Callable[[], datetime]


def bind_reader(
    session_factory: SessionFactory,
    tenant: TenantContext,
    reader: Callable[[Session, TenantContext], ReadResult],
) -> Fetcher:
    """Adapt a repository read into a view fetcher.

    Each call opens a fresh session and runs the read in a worker thread, so the
    event loop stays free while storage answers.
    """

    def read() -> ReadResult:
        db = session_factory()
        try:
            return reader(db, tenant)
        finally:
            db.close()

    async def fetch() -> ReadResult:
        return await asyncio.to_thread(read)

    return fetch


def bind_deleter(session_factory: SessionFactory, tenant: TenantContext, crud: CRUDBase) -> Deleter:
    def remove(id: str) -> bool:
        db = session_factory()
        try:
            return crud.delete(db, tenant=tenant, id=id)
        finally:
            db.close()

    async def delete(id: str) -> bool:
        return await asyncio.to_thread(remove, id)

    return delete


def bind_creator(
    session_factory: SessionFactory,
    tenant: TenantContext,
    crud: CRUDBase,
    schema: type[BaseModel],
    read_schema: type[BaseModel],
):
    """Adapt a gateway create into a form submit handler taking raw form values."""

    def insert(obj_in: BaseModel) -> BaseModel:
        db = session_factory()
        try:
            return read_schema.model_validate(crud.create(db, tenant=tenant, obj_in=obj_in))
        finally:
            db.close()

    async def create(values: dict) -> BaseModel:
        cleaned = {key: (None if value == "" else value) for key, value in values.items()}
        try:
            obj_in = schema.model_validate(cleaned)
        except SchemaValidationError as exc:
            raise ValidationError(str(exc)) from exc
        return await asyncio.to_thread(insert, obj_in)

    return create


def students_view(fetch: Fetcher, delete: Optional[Deleter] = None) -> ViewState:
    return ViewState(
        fetch,
        delete=delete,
        search_field=lambda student: student.full_name,
        chart=ChartSpec(timestamp=lambda student: student.created_at, label=day_label),
    )


def courses_view(fetch: Fetcher, delete: Optional[Deleter] = None) -> ViewState:
    return ViewState(
        fetch,
        delete=delete,
        search_field=lambda course: course.title,
        chart=ChartSpec(timestamp=lambda course: course.created_at, label=day_label, chronological=True),
    )


async def refetch_with_student_total(view: ViewState, fetch_students: Fetcher) -> int:
    """Refetch the courses view and count the tutor's students alongside it.

    Both reads run concurrently. A failed student read counts as zero.
    """
    _, students = await asyncio.gather(view.refetch(), fetch_students())
    return len(students.items)


def session_filters(clock: Clock = utc_now) -> dict[str, Callable[[Any], bool]]:
    """Status-derived buckets evaluated against ``clock()`` at filtering time."""

    def active(session) -> bool:
        now = ensure_utc(clock())
        return session.status == "scheduled" and ensure_utc(session.start_time) <= now <= ensure_utc(session.end_time)

    def upcoming(session) -> bool:
        return session.status == "scheduled" and ensure_utc(clock()) < ensure_utc(session.start_time)

    return {
        "Active": active,
        "Upcoming": upcoming,
        "Completed": lambda session: session.status == "completed",
        "Cancelled": lambda session: session.status == "cancelled",
    }


def sessions_view(fetch: Fetcher, delete: Optional[Deleter] = None, clock: Clock = utc_now) -> ViewState:
    return ViewState(
        fetch,
        delete=delete,
        filters=session_filters(clock),
        chart=ChartSpec(timestamp=lambda session: session.start_time, label=weekday_label),
    )


def todays_session_count(view: ViewState, clock: Clock = utc_now) -> int:
    """Sessions starting on the current UTC day, across the unfiltered list."""
    today = ensure_utc(clock()).date()
    return sum(1 for session in view.items if ensure_utc(session.start_time).date() == today)


def _as_datetime(value) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            return None
    return None


def _check_session_window(values: dict) -> None:
    start, end = _as_datetime(values.get("start_time")), _as_datetime(values.get("end_time"))
    if start is not None and end is not None and ensure_utc(end) <= ensure_utc(start):
        raise ValidationError("End time must be after start time")


def student_form(view: ViewState, create) -> CreateForm:
    return CreateForm(view=view, create=create, required={"full_name": "Full Name"})


def course_form(view: ViewState, create) -> CreateForm:
    return CreateForm(view=view, create=create, required={"title": "Title"})


def session_form(view: ViewState, create) -> CreateForm:
    return CreateForm(
        view=view,
        create=create,
        required={
            "course_id": "Course",
            "student_id": "Student",
            "start_time": "Start time",
            "end_time": "End time",
        },
        validate=_check_session_window,
    )
