"""Error Handlers — global exception handlers for the Personality API.

Invariants:
    - PersonalityAPIError → shared envelope {error, message, details?} with its own status
    - Domain errors are logged at the level their severity maps to; debug_info stays in logs
    - RequestValidationError → 400: "Invalid ID" for path params, "Invalid request body" otherwise
    - Starlette HTTPException (unmatched route, wrong method) → same envelope
    - Unexpected exceptions are NOT handled here: RecoveryMiddleware owns the catch-all

Design Decisions:
    - Three-layer handler: domain (PersonalityAPIError), decoding (Pydantic), routing (Starlette)
    - Field-level decoding failures keep their field name in details; JSON syntax errors don't
"""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from personality_api.core.errors import (
    BadRequestError, ErrorSeverity, PersonalityAPIError,
)

logger = logging.getLogger(__name__)

SEVERITY_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(PersonalityAPIError)
    async def domain_error_handler(request: Request, exc: PersonalityAPIError):
        """Handle all Personality API domain/infrastructure errors."""
        debug_info = exc.context.debug_info or {}
        logger.log(
            SEVERITY_LOG_LEVELS[exc.severity],
            f"{type(exc).__name__}: {exc.message}",
            extra={
                "error_code": exc.code,
                "category": exc.category.value,
                "path": request.url.path,
                "personality_id": exc.context.personality_id,
                "operation": debug_info.get("operation"),
                "reason": debug_info.get("reason"),
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle request decoding errors (path params and JSON bodies)."""
        logger.warning(
            f"Request decoding failed on {request.url.path}: {exc.errors()}",
        )
        error = build_decoding_error(exc)
        return JSONResponse(
            status_code=error.http_status, content=error.to_response(),
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        """Render routing errors (404/405) in the shared envelope."""
        content = {
            "error": HTTPStatus(exc.status_code).phrase,
            "message": str(exc.detail),
        }
        return JSONResponse(
            status_code=exc.status_code, content=content,
            headers=getattr(exc, "headers", None),
        )


def build_decoding_error(exc: RequestValidationError) -> BadRequestError:
    """Translate a FastAPI decoding failure into a BadRequestError."""
    errors = exc.errors()
    if any(e["loc"] and e["loc"][0] == "path" for e in errors):
        return BadRequestError("Invalid ID")

    details: dict[str, str] = {}
    for e in errors:
        loc = e["loc"]
        if len(loc) > 1 and isinstance(loc[-1], str):
            details.setdefault(str(loc[-1]).lower(), e["msg"])
    return BadRequestError("Invalid request body", details)

