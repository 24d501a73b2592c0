"""Translate domain, validation and storage errors into the JSON error body."""
from __future__ import annotations

import logging
from typing import Any, List

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from course_management.schemas import ErrorResponse, ValidationErrorDetail
from course_management.services.errors import ResourceAlreadyExistsError, ResourceNotFoundError

LOGGER = logging.getLogger(__name__)

VALIDATION_MESSAGE = "Validation failed for one or more fields"
INTERNAL_MESSAGE = "An unexpected error occurred"


def _error_response(
    request: Request,
    status_code: int,
    error: str,
    message: str | None,
    validation_errors: List[ValidationErrorDetail] | None = None,
) -> JSONResponse:
    body = ErrorResponse(
        status=status_code,
        error=error,
        message=message,
        path=request.url.path,
        validation_errors=validation_errors,
    )
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body, exclude_none=True),
    )


def _field_name(location: tuple[Any, ...]) -> str:
    # Drop the "body"/"path"/"query" marker.
    parts = location[1:] if len(location) > 1 else location
    return ".".join(str(part) for part in parts)


def integrity_message(exc: IntegrityError) -> str:
    """Best-effort description of which constraint the database rejected."""
    text = str(exc.orig if exc.orig is not None else exc).lower()
    if "email" in text:
        return "Email address already exists"
    if "unique" in text:
        return "Unique constraint violation"
    return "Data integrity violation occurred"


async def not_found_handler(request: Request, exc: ResourceNotFoundError) -> JSONResponse:
    return _error_response(request, status.HTTP_404_NOT_FOUND, "NOT_FOUND", str(exc))


async def already_exists_handler(
    request: Request, exc: ResourceAlreadyExistsError
) -> JSONResponse:
    return _error_response(request, status.HTTP_409_CONFLICT, "CONFLICT", str(exc))


async def validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = [
        ValidationErrorDetail(
            field=_field_name(tuple(error.get("loc", ()))),
            rejected_value=jsonable_encoder(error.get("input")),
            message=error.get("msg", ""),
        )
        for error in exc.errors()
    ]
    LOGGER.info("Validation failed on %s %s", request.method, request.url.path)
    return _error_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        "VALIDATION_FAILED",
        VALIDATION_MESSAGE,
        details,
    )


async def integrity_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    LOGGER.warning("Integrity violation on %s %s: %s", request.method, request.url.path, exc.orig)
    return _error_response(
        request, status.HTTP_409_CONFLICT, "DATA_INTEGRITY_VIOLATION", integrity_message(exc)
    )


async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
    return _error_response(request, status.HTTP_400_BAD_REQUEST, "BAD_REQUEST", str(exc))


async def unexpected_handler(request: Request, exc: Exception) -> JSONResponse:
    LOGGER.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return _error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_SERVER_ERROR",
        INTERNAL_MESSAGE,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ResourceNotFoundError, not_found_handler)
    app.add_exception_handler(ResourceAlreadyExistsError, already_exists_handler)
    app.add_exception_handler(RequestValidationError, validation_handler)
    app.add_exception_handler(IntegrityError, integrity_handler)
    app.add_exception_handler(ValueError, value_error_handler)
    app.add_exception_handler(Exception, unexpected_handler)


__all__ = ["integrity_message", "register_exception_handlers"]
