"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain and framework
exceptions to HTTP responses.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from siteops.core.config import get_settings
from siteops.domain.exceptions import SiteOpsException

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status when applicable
_ERROR_CODE_STATUS: dict[str, int] = {
    "VALIDATION_ERROR": 400,
    "AUTHENTICATION_ERROR": 401,
    "PERMISSION_DENIED": 403,
    "COLLECTION_READ_ERROR": 502,
    "BATCH_COMMIT_ERROR": 502,
    "FIRESTORE_NOT_CONFIGURED": 503,
}


def _siteops_exception_handler(
    request: Request, exc: SiteOpsException
) -> JSONResponse:
    """Return JSON from SiteOpsException.to_dict() with appropriate status code."""
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    headers = {"WWW-Authenticate": "Bearer"} if status == 401 else None
    return JSONResponse(status_code=status, content=exc.to_dict(), headers=headers)


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 422 with validation error details."""
    return JSONResponse(
        status_code=422,
        content={
            "error": "VALIDATION_ERROR",
            "message": "Request validation failed",
            "details": _jsonable_errors(exc),
        },
    )


def _jsonable_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    """Return pydantic errors without the non-serializable ctx/input entries."""
    return [
        {k: v for k, v in err.items() if k in ("type", "loc", "msg")}
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
    """Return 500; include detail only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    settings = get_settings()
    detail: Any = str(exc) if settings.debug else "Internal server error"
    return JSONResponse(
        status_code=500,
        content={"error": "INTERNAL_ERROR", "message": detail},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Handlers: SiteOpsException (and subclasses), RequestValidationError,
    StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(SiteOpsException, _siteops_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
