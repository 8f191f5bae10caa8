"""Custom exceptions and error handling utilities."""
from typing import List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from uxscore.utils.logger import logger


class AppException(Exception):
    """Base exception for application errors."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, error: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error = error

    def to_body(self) -> dict:
        body = {"message": self.message}
        if self.error:
            body["error"] = self.error
        return body


class ValidationError(AppException):
    """Raised when input is malformed or fails validation."""

    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationError(AppException):
    """Raised when credentials or the bearer token are rejected."""

    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Invalid credentials", error: Optional[str] = None):
        super().__init__(message, error)


class ForbiddenError(AppException):
    """Raised when the caller lacks the role an endpoint requires."""

    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, message: str = "Access denied", error: Optional[str] = None):
        super().__init__(message, error)


class NotFoundError(AppException):
    """Raised when a resource is absent or not visible to the caller."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, resource: str, identifier: Optional[str] = None):
        message = f"{resource} not found"
        super().__init__(message)
        self.resource = resource
        self.identifier = identifier


class InUseError(AppException):
    """Raised when deleting a row that other rows still reference."""

    status_code = status.HTTP_400_BAD_REQUEST


class IdentityError(AppException):
    """Raised when the identity store rejects an operation."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, errors: List[str], message: str = "Identity operation failed"):
        super().__init__(message)
        self.errors = list(errors)

    def to_body(self) -> dict:
        return {"message": self.message, "errors": self.errors}


class InternalError(AppException):
    """Raised when the store or a renderer fails unexpectedly."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def handle_database_error(error: Exception, operation: str) -> AppException:
    """
    Convert database errors to application exceptions.

    Args:
        error: The database error
        operation: Description of the operation that failed

    Returns:
        AppException to raise in place of the driver error
    """
    error_message = str(error).lower()

    if "foreign key" in error_message or "violates" in error_message or "constraint" in error_message:
        return ValidationError(f"Constraint violated during {operation}")

    return InternalError(f"Database error during {operation}", error=type(error).__name__)


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Translate an AppException into its HTTP response."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")

    headers = None
    if isinstance(exc, AuthenticationError):
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(status_code=exc.status_code, content=exc.to_body(), headers=headers)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report request validation failures as 400 Bad Request."""
    errors = [
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}"
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Validation failed", "errors": errors},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Keep framework HTTP errors in the {message} body shape."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler: log the failure and answer 500 without a traceback."""
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}: {type(exc).__name__}: {exc}",
        exc_info=True,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "An unexpected error occurred", "error": type(exc).__name__},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error translation layer on the application."""
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
