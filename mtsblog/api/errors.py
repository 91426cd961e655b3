"""Translate exceptions into JSON error responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from mtsblog.core.exceptions import (
    BadRequestError,
    BlogServerError,
    MissingFieldError,
)
from mtsblog.dtos import ErrorResponse

logger = logging.getLogger(__name__)


def _error_response(exc: BlogServerError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=exc.code, message=exc.message).model_dump(),
    )


async def blog_server_error_handler(request: Request, exc: BlogServerError) -> JSONResponse:
    if exc.status_code >= 500:
        # Keep internals (store/hash faults) out of the response body
        logger.error(
            "Request failed: %s",
            exc.message,
            exc_info=exc,
            extra={"method": request.method, "path": request.url.path},
        )
        return _error_response(BlogServerError())
    return _error_response(exc)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    missing = [err for err in errors if err.get("type") == "missing"]
    if errors and len(missing) == len(errors):
        fields = [str(err["loc"][-1]) for err in missing]
        return _error_response(MissingFieldError(f"Missing: {', '.join(fields)}", fields))

    details = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}"
        for err in errors
    )
    return _error_response(BadRequestError(details or None))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # RequestLoggingMiddleware has already logged the traceback
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(
            error=BlogServerError.code, message=BlogServerError.default_message
        ).model_dump(),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BlogServerError, blog_server_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
