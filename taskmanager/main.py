import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import CORS_ORIGINS
from .database import create_tables
from .logging_setup import setup_logging
from .routers import tasks
from .schemas.task import FieldError
from .store import TaskValidationError

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Task Manager API",
    description="CRUD API over a single collection of tasks",
    version="1.0.0"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(tasks.router, prefix="/api", tags=["tasks"])


def _field_errors_response(errors):
    return JSONResponse(
        status_code=422,
        content={"detail": [error.model_dump() for error in errors]},
    )


@app.exception_handler(TaskValidationError)
async def task_validation_error_handler(request: Request, exc: TaskValidationError):
    return _field_errors_response(exc.errors)


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    errors = []
    for err in exc.errors():
        # loc looks like ("body", "title"); the "body" prefix is noise to clients
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        errors.append(FieldError(field=".".join(loc) or "body", message=err.get("msg", "Invalid value")))
    return _field_errors_response(errors)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# Create tables on startup
@app.on_event("startup")
def on_startup():
    setup_logging()
    create_tables()
    logger.info("Task Manager API started")

@app.get("/")
def read_root():
    return {"message": "Task Manager API"}

@app.get("/health")
def health_check():
    return {"status": "healthy"}
