from tutor_desk.app.db.base_class import Base

# Import models to register metadata for Base.metadata.create_all in tests
from tutor_desk.app.models.profile import Profile  # noqa: F401
from tutor_desk.app.models.student import Student  # noqa: F401
from tutor_desk.app.models.course import Course  # noqa: F401
from tutor_desk.app.models.session import Session  # noqa: F401
from tutor_desk.app.models.payment import Payment  # noqa: F401
