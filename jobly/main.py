"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from jobly.api.v1.api import api_router
from jobly.db.session import close_db, init_db
from jobly.errors import ErrorKind, JoblyError
from jobly.settings import settings
from jobly.utils import get_logger, setup_logging

logger = get_logger(__name__)


def _error_body(message, status_code: int) -> dict:
    return {"error": {"message": message, "status": status_code}}


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings.validate_configuration()
    if settings.environment != "test":
        setup_logging("jobly")
    init_db()
    yield
    close_db()


app = FastAPI(
    title="Jobly API",
    description="Companies, jobs and users with role-based access control",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix=settings.api_prefix)


@app.exception_handler(JoblyError)
async def jobly_error_handler(request: Request, exc: JoblyError) -> JSONResponse:
    """Translate typed errors into their HTTP status."""
    logger.info(f"{request.method} {request.url.path} -> {exc.status_code} {exc.kind.value}: {exc.message}")
    headers = {"WWW-Authenticate": "Bearer"} if exc.kind is ErrorKind.UNAUTHORIZED else None
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.message, exc.status_code),
        headers=headers,
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Schema violations are bad requests, reported as a list of messages."""
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path"))
        messages.append(f"{location}: {error.get('msg')}" if location else error.get("msg"))
    logger.info(f"{request.method} {request.url.path} -> 400 validation: {messages}")
    return JSONResponse(status_code=400, content=_error_body(messages, 400))


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    """Constraint violations reported by the database."""
    logger.warning(f"{request.method} {request.url.path} -> 400 integrity error: {exc.orig}")
    return JSONResponse(status_code=400, content=_error_body("Request conflicts with stored data", 400))


@app.get("/")
async def root():
    """Service banner."""
    return {
        "status": "ok",
        "service": "Jobly API",
        "version": "0.1.0",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "jobly.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
