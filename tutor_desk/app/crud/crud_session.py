"""Session mutations.

Start/end ordering and the referenced course and student are left to the
storage constraints; nothing is looked up before the insert.
"""

from tutor_desk.app.crud.base import CRUDBase
from tutor_desk.app.models.session import Session as SessionModel
from tutor_desk.app.schemas.session import SessionCreate


class CRUDSession(CRUDBase[SessionModel, SessionCreate]):
    pass


session_crud = CRUDSession(SessionModel, "session", create_defaults={"status": "scheduled"})
