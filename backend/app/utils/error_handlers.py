"""
Centralized error handling and user-friendly error messages.

Route handlers raise `AppError` subclasses; `register_exception_handlers` turns
them (and framework/database errors) into `{"error": "..."}` JSON responses.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base application error."""
    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class ValidationError(AppError):
    """Malformed or missing input."""
    def __init__(self, message: str):
        super().__init__(message, status_code=400)


class AuthError(AppError):
    """Missing/invalid/expired token, role not permitted, or bad credentials."""
    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message, status_code=401)


class NotFoundError(AppError):
    """Resource not found error."""
    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, status_code=404)


class ConflictError(AppError):
    """Duplicate record. Reported as 400 to match the public API contract."""
    def __init__(self, message: str = "This record already exists"):
        super().__init__(message, status_code=400)


class StorageError(AppError):
    """Unexpected persistence failure. The message is always generic."""
    def __init__(self, message: str | None = None):
        super().__init__(message or get_error_message("server_error"), status_code=500)


# User-friendly error messages
ERROR_MESSAGES = {
    # Authentication
    "invalid_credentials": "Invalid credentials",
    "email_exists": "Email already registered",
    "unauthorized": "Unauthorized",

    # Jobs / applications
    "job_not_found": "Job not found",
    "user_not_found": "User not found",
    "already_applied": "You already applied to this job",

    # General
    "not_found": "The requested resource was not found.",
    "server_error": "Something went wrong on our end. Please try again later.",
    "validation_error": "Please check your input and try again.",
}


def get_error_message(error_key: str, default: str | None = None) -> str:
    """Get a user-friendly error message."""
    return ERROR_MESSAGES.get(error_key, default or ERROR_MESSAGES["server_error"])


def handle_database_error(error: Exception, operation: str = "", *, conflict_message: str | None = None) -> AppError:
    """Translate a failed write into an AppError. Callers must roll back first."""
    logger.error("Database error during %s: %s", operation, error)

    if isinstance(error, IntegrityError):
        error_str = str(getattr(error, "orig", error)).lower()
        if "unique" in error_str or "duplicate" in error_str:
            return ConflictError(conflict_message or "This record already exists")

    return StorageError()


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return get_error_message("validation_error")
    first = errors[0]
    # loc looks like ("body", "skills", 0) or ("query", "limit")
    field = ".".join(str(p) for p in first.get("loc", ())[1:]) or "body"
    return f"{field}: {first.get('msg', 'invalid value')}"


def register_exception_handlers(app: FastAPI) -> None:
    """Install the `{error}` response mapping on an app (used by main and the tests)."""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        else:
            logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return _error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        message = _describe_validation_error(exc)
        logger.info("%s %s -> 400: %s", request.method, request.url.path, message)
        return _error_response(400, message)

    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_error_handler(request: Request, exc: SQLAlchemyError):
        """Handle database errors without leaking driver messages."""
        logger.exception("Database SQLAlchemyError: %s", exc)
        return _error_response(500, get_error_message("server_error"))

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle unexpected errors globally."""
        logger.exception("Unhandled exception: %s", exc)
        return _error_response(500, get_error_message("server_error"))
