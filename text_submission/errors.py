import logging
from enum import Enum
from typing import List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    VALIDATION_ERROR = "ValidationError"
    NOT_FOUND = "NotFound"
    INTERNAL_ERROR = "InternalError"


class SubmissionError(Exception):
    """Base class for every failure the API and the client layer report."""

    kind: ErrorKind = ErrorKind.INTERNAL_ERROR
    status_code: int = 500

    def __init__(self, message: str, errors: Optional[List[dict]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []

    def to_dict(self) -> dict:
        content = {"error": self.kind.value, "message": self.message}
        if self.errors:
            content["errors"] = self.errors
        return content


class ValidationError(SubmissionError):
    kind = ErrorKind.VALIDATION_ERROR
    status_code = 400


class NotFound(SubmissionError):
    kind = ErrorKind.NOT_FOUND
    status_code = 404


class InternalError(SubmissionError):
    kind = ErrorKind.INTERNAL_ERROR
    status_code = 500


async def submission_error_handler(request: Request, exc: SubmissionError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    else:
        logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def validation_message(error: dict) -> str:
    # Errors raised by our own validators carry the original exception in ctx
    ctx = error.get("ctx") or {}
    if "error" in ctx:
        return str(ctx["error"])
    return error.get("msg", "Invalid value")


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed bodies and bad path parameters as 400 instead of FastAPI's 422."""
    details = []
    for error in exc.errors():
        # loc looks like ("body", "text") or ("path", "submission_id")
        loc = [str(part) for part in error.get("loc", []) if part not in ("body", "path", "query")]
        details.append({
            "field": ".".join(loc) or "body",
            "message": validation_message(error),
        })

    logger.warning(f"{request.method} {request.url.path} -> 400: {len(details)} validation error(s)")
    error = ValidationError("One or more validation errors occurred.", errors=details)
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Anything nobody mapped to an error kind becomes a generic InternalError."""
    logger.exception(f"{request.method} {request.url.path} -> 500: unhandled {type(exc).__name__}: {exc}")
    error = InternalError("An unexpected error occurred")
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


def register_error_handlers(app: FastAPI):
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SubmissionError, submission_error_handler)
    app.add_exception_handler(Exception, general_exception_handler)
