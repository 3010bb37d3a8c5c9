"""Course mutations."""

from tutor_desk.app.crud.base import CRUDBase
from tutor_desk.app.models.course import Course
from tutor_desk.app.schemas.course import CourseCreate


class CRUDCourse(CRUDBase[Course, CourseCreate]):
    pass


course_crud = CRUDCourse(Course, "course")
