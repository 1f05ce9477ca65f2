"""HTTP Middleware — recovery, request logging, CORS and content-type enforcement.

Invariants:
    - Chain order (outermost first): recovery → logging → CORS → content type
    - Recovery turns any unhandled exception into a generic 500 envelope (no internal detail)
      that still carries the CORS and content-type headers
    - Every OPTIONS request is answered 200 by the CORS layer, before routing
    - Every response leaves with Content-Type: application/json

Design Decisions:
    - Recovery as user middleware instead of an Exception handler: Starlette's
      ServerErrorMiddleware re-raises after responding, this layer does not
    - Allowed origins come from settings; "*" allows any origin
"""

import logging
import time
from typing import Sequence

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from personality_api.core.errors import ErrorCategory

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json; charset=utf-8"
ALLOWED_METHODS = "GET, POST, PUT, DELETE, OPTIONS"
ALLOWED_HEADERS = "Content-Type, Authorization"


class RecoveryMiddleware(BaseHTTPMiddleware):
    """Last line of defence: unexpected faults become a 500 response.

    Sits outside the CORS and content-type layers, so it applies their
    headers to its own response.
    """

    def __init__(self, app: ASGIApp, allow_origins: Sequence[str] = ("*",)):
        super().__init__(app)
        self.allow_origins = list(allow_origins)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint,
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            logger.error(
                f"Unhandled exception on {request.url.path}: {e}",
                exc_info=True,
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "error_code": "INTERNAL_ERROR",
                    "category": ErrorCategory.INTERNAL.value,
                },
            )
            response = JSONResponse(
                status_code=500,
                content={
                    "error": "Internal Server Error",
                    "message": "An unexpected error occurred",
                },
            )
            apply_cors_headers(request, response, self.allow_origins)
            response.headers["Content-Type"] = JSON_CONTENT_TYPE
            return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and duration of every request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint,
    ) -> Response:
        method, path = request.method, request.url.path
        logger.info(
            f"Started {method} {path}", extra={"method": method, "path": path},
        )
        start = time.perf_counter()
        status_code = None
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            duration_ms = round((time.perf_counter() - start) * 1000, 2)
            logger.info(
                f"Completed {method} {path} in {duration_ms}ms",
                extra={
                    "method": method,
                    "path": path,
                    "status_code": status_code,
                    "duration_ms": duration_ms,
                },
            )


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """Inject CORS headers; answer preflight (OPTIONS) requests directly."""

    def __init__(self, app: ASGIApp, allow_origins: Sequence[str] = ("*",)):
        super().__init__(app)
        self.allow_origins = list(allow_origins)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint,
    ) -> Response:
        if request.method == "OPTIONS":
            response = Response(status_code=200)
        else:
            response = await call_next(request)
        apply_cors_headers(request, response, self.allow_origins)
        return response


def apply_cors_headers(
    request: Request, response: Response, allow_origins: Sequence[str],
) -> None:
    origin = _allowed_origin(request.headers.get("origin"), allow_origins)
    if origin:
        response.headers["Access-Control-Allow-Origin"] = origin
        if origin != "*":
            response.headers.append("Vary", "Origin")
    response.headers["Access-Control-Allow-Methods"] = ALLOWED_METHODS
    response.headers["Access-Control-Allow-Headers"] = ALLOWED_HEADERS


def _allowed_origin(origin: str | None, allow_origins: Sequence[str]) -> str | None:
    if "*" in allow_origins:
        return "*"
    if origin and origin in allow_origins:
        return origin
    return None


class ContentTypeMiddleware(BaseHTTPMiddleware):
    """Force a JSON content type on every response."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint,
    ) -> Response:
        response = await call_next(request)
        response.headers["Content-Type"] = JSON_CONTENT_TYPE
        return response


def register_middleware(app: FastAPI, cors_origins: Sequence[str]) -> None:
    """Install the middleware chain. add_middleware prepends, so innermost goes first."""
    app.add_middleware(ContentTypeMiddleware)
    app.add_middleware(CORSHeadersMiddleware, allow_origins=cors_origins)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RecoveryMiddleware, allow_origins=cors_origins)
