"""Student mutations."""

from tutor_desk.app.crud.base import CRUDBase
from tutor_desk.app.models.student import Student
from tutor_desk.app.schemas.student import StudentCreate


class CRUDStudent(CRUDBase[Student, StudentCreate]):
    pass


student_crud = CRUDStudent(Student, "student", create_defaults={"status": "active"})
