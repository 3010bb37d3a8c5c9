# Tutor Desk backend entrypoint: dashboard data API and assistant tools.

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tutor_desk.app.api import courses
from tutor_desk.app.api import payments
from tutor_desk.app.api import sessions
from tutor_desk.app.api import students
from tutor_desk.app.api import tools
from tutor_desk.app.core.dev_seed import ensure_default_tutor
from tutor_desk.app.core.errors import StorageError, ValidationError
from tutor_desk.app.core.logging import configure_logging
from tutor_desk.app.core.settings import get_settings
from tutor_desk.app.db.base import Base
from tutor_desk.app.db.session import SessionLocal, engine

settings = get_settings()
app = FastAPI(title=settings.app_name, version=settings.api_version)

origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(students.router)
app.include_router(courses.router)
app.include_router(sessions.router)
app.include_router(payments.router)
app.include_router(tools.router)


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=400, content={"detail": exc.message})


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    return JSONResponse(status_code=409, content={"detail": exc.message})


@app.get("/")
def read_root():
    return {"app": "Tutor Desk backend", "status": "ok"}


@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.on_event("startup")
def prepare_database():
    configure_logging(settings.log_level)
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        ensure_default_tutor(db)
    finally:
        db.close()
