"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain and framework
exceptions to HTTP responses. Every body carries a "message"; 5xx bodies
always say "Internal server error" and never include internal details.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from taskmanager.domain.exceptions import TaskManagerException

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"

# Map domain error_code to HTTP status
_ERROR_CODE_STATUS: dict[str, int] = {
    "VALIDATION_ERROR": 400,
    "INVALID_ASSIGNEES": 400,
    "AUTHENTICATION_ERROR": 401,
    "PERMISSION_DENIED": 403,
    "RESOURCE_NOT_FOUND": 404,
    "STORAGE_ERROR": 500,
    "NOTIFICATION_ERROR": 500,
}


def status_for(exc: TaskManagerException) -> int:
    """Return the HTTP status for a domain exception (500 for unmapped codes)."""
    return _ERROR_CODE_STATUS.get(exc.error_code, 500)


def _task_manager_exception_handler(
    request: Request, exc: TaskManagerException
) -> JSONResponse:
    """Return JSON from TaskManagerException.to_dict() with the mapped status code."""
    status = status_for(exc)
    if status < 500:
        return JSONResponse(status_code=status, content=exc.to_dict())

    # Recipient addresses stay out of the logs.
    logger.error(
        "%s: %s (task_id=%s, failed_recipients=%d)",
        exc.error_code,
        exc.message,
        exc.details.get("task_id"),
        len(exc.details.get("recipients") or []),
    )
    content: dict[str, Any] = {"error": exc.error_code, "message": INTERNAL_ERROR_MESSAGE}
    # The task exists even though its assignees were not all notified.
    if exc.error_code == "NOTIFICATION_ERROR" and exc.details.get("task_id"):
        content["details"] = {"task_id": exc.details["task_id"]}
    return JSONResponse(status_code=status, content=content)


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 422 with validation error details."""
    return JSONResponse(
        status_code=422,
        content={
            "error": "VALIDATION_ERROR",
            "message": "Request validation failed",
            "details": jsonable_errors(exc),
        },
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    """Return pydantic errors without the raw input and context objects."""
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return JSON for Starlette HTTP exceptions (status + detail)."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "HTTP_ERROR", "message": exc.detail},
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500 without internal details; log the traceback."""
    logger.exception("Unhandled exception: %s", exc)
    return JSONResponse(
        status_code=500,
        content={"error": "INTERNAL_ERROR", "message": INTERNAL_ERROR_MESSAGE},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: TaskManagerException (and
    subclasses), RequestValidationError, StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(TaskManagerException, _task_manager_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
