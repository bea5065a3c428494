"""Exception handlers for the admin API.

Every 422 carries the same body whether the failure came from request
parsing or from a service rule: {error, message, details.field}, so the
edit forms can attach the message to one input.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from rbac_admin.core.config import get_settings
from rbac_admin.domain.exceptions import RbacAdminException

logger = logging.getLogger(__name__)

_ERROR_CODE_STATUS: dict[str, int] = {
    "RESOURCE_NOT_FOUND": 404,
    "VALIDATION_ERROR": 422,
    "SERVICE_UNAVAILABLE": 503,
}

# Leading loc entries naming where a value came from, not which field it is.
_LOC_SOURCES = frozenset({"body", "query", "path", "header", "cookie"})


def _error_field(error: dict[str, Any]) -> str | None:
    parts = [str(p) for p in error.get("loc", ()) if p not in _LOC_SOURCES]
    return ".".join(parts) or None


def _domain_exception_handler(
    request: Request, exc: RbacAdminException
) -> JSONResponse:
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    if status >= 500:
        logger.error("%s on %s: %s", exc.error_code, request.url.path, exc.message)
    else:
        logger.info(
            "%s %s rejected (%s): %s",
            request.method,
            request.url.path,
            exc.error_code,
            exc.message,
        )
    return JSONResponse(status_code=status, content=exc.to_dict())


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """422 shaped like ValidationException: first error's field and message."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    details: dict[str, Any] = {"errors": jsonable_encoder(errors)}
    field = _error_field(first)
    if field:
        details["field"] = field
    return JSONResponse(
        status_code=422,
        content={
            "error": "VALIDATION_ERROR",
            "message": first.get("msg", "Request validation failed"),
            "details": details,
        },
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "HTTP_ERROR", "message": exc.detail},
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """500; the exception text is exposed only in debug."""
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    detail: Any = str(exc) if get_settings().debug else "Internal server error"
    return JSONResponse(
        status_code=500,
        content={"error": "INTERNAL_ERROR", "message": detail},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RbacAdminException, _domain_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
