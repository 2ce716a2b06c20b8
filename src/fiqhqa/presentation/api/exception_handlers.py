"""Translate failures into the response envelope.

Errors use the same shape as successes, ``{"status", "message", "data"}``
with ``data`` null. The status comes from the error kind. The message is
a fixed word per kind unless the app was built with detailed errors, in
which case the error's own text is returned. Internal errors are never
detailed.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from fiqhqa.domain.shared.exceptions import DomainException, ErrorCode

logger = logging.getLogger(__name__)

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    ErrorCode.BAD_REQUEST: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

GENERIC_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.BAD_REQUEST: "bad request",
    ErrorCode.INVALID_CREDENTIALS: "invalid credentials",
    ErrorCode.UNAUTHORIZED: "unauthorized",
    ErrorCode.NOT_FOUND: "not found",
    ErrorCode.CONFLICT: "conflict",
    ErrorCode.INTERNAL: "internal error",
}

ROUTING_MESSAGES: dict[int, str] = {
    status.HTTP_404_NOT_FOUND: "method not found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "method not allowed",
}


def error_envelope(status_code: int, message: str) -> JSONResponse:
    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(
        status_code=status_code,
        content={"status": status_code, "message": message, "data": None},
        headers=headers,
    )


def _trace_id(request: Request) -> Optional[str]:
    return getattr(request.state, "trace_id", None)


def _describe_validation(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)


def setup_exception_handlers(app: FastAPI, detailed_errors: bool = False) -> None:
    """Install the envelope handlers on ``app``."""

    async def on_domain_error(request: Request, exc: DomainException) -> JSONResponse:
        status_code = ERROR_CODE_TO_STATUS[exc.code]
        level = logging.ERROR if status_code >= 500 else logging.INFO
        logger.log(
            level,
            "[%s] %s %s failed with %s: %s %s",
            _trace_id(request),
            request.method,
            request.url.path,
            exc.code.value,
            exc.message,
            exc.details,
        )

        expose = detailed_errors and exc.code is not ErrorCode.INTERNAL
        message = exc.message if expose else GENERIC_MESSAGES[exc.code]
        return error_envelope(status_code, message)

    async def on_invalid_request(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        # Only locations and messages are logged; inputs may hold passwords
        description = _describe_validation(exc)
        logger.info(
            "[%s] %s %s rejected: %s",
            _trace_id(request),
            request.method,
            request.url.path,
            description,
        )
        if detailed_errors:
            return error_envelope(status.HTTP_400_BAD_REQUEST, description)
        return error_envelope(
            status.HTTP_400_BAD_REQUEST,
            GENERIC_MESSAGES[ErrorCode.BAD_REQUEST],
        )

    async def on_routing_error(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        message = ROUTING_MESSAGES.get(exc.status_code, str(exc.detail))
        return error_envelope(exc.status_code, message)

    async def on_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "[%s] Unhandled error on %s %s",
            _trace_id(request),
            request.method,
            request.url.path,
        )
        return error_envelope(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            GENERIC_MESSAGES[ErrorCode.INTERNAL],
        )

    app.add_exception_handler(DomainException, on_domain_error)
    app.add_exception_handler(RequestValidationError, on_invalid_request)
    app.add_exception_handler(StarletteHTTPException, on_routing_error)
    app.add_exception_handler(Exception, on_unexpected_error)
