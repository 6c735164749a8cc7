"""
Method guard, CORS headers and error handlers.

ProxyHeadersMiddleware runs before routing:
    - OPTIONS on any path   -> empty 200 (preflight)
    - anything but GET      -> 400 "Only GET requests are allowed"
    - GET                   -> routed normally

Whatever the outcome, the response leaves with the CORS headers and an
X-Request-Id. Unknown paths reach the HTTPException handler below and
become the 404 envelope; any other exception escaping a route (such as
an invalid configuration) becomes a 500 envelope.
"""
from __future__ import annotations

import uuid

from fastapi import FastAPI, Request, Response
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from piccy_tts.api.responses import error_from, error_response
from piccy_tts.core.config import CORS_HEADERS
from piccy_tts.core.logging import error, get_logger, set_request_id, verbose, warn
from piccy_tts.services.errors import MethodNotAllowedError, NotFoundError

_LOG = get_logger("piccy-tts.http")


class ProxyHeadersMiddleware(BaseHTTPMiddleware):
    """Enforce GET-only access and stamp every response with CORS headers."""

    async def dispatch(self, request: Request, call_next) -> Response:
        rid = str(uuid.uuid4())[:12]
        set_request_id(rid)

        if request.method == "OPTIONS":
            response = Response(status_code=200)
        elif request.method != "GET":
            warn(_LOG, "method_rejected", method=request.method, path=request.url.path)
            response = error_from(MethodNotAllowedError())
        else:
            try:
                response = await call_next(request)
            except Exception as e:
                msg = str(e).strip() or e.__class__.__name__
                error(_LOG, "unhandled_error", path=request.url.path, error=msg, type=e.__class__.__name__)
                response = error_response(f"Internal server error: {msg}", 500)

        response.headers.update(CORS_HEADERS)
        response.headers["X-Request-Id"] = rid
        verbose(_LOG, "response", method=request.method, path=request.url.path, status=response.status_code)
        return response


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Render router-level HTTP errors (mostly 404) as envelopes."""
    if exc.status_code == 404:
        warn(_LOG, "not_found", path=request.url.path)
        return error_from(NotFoundError())
    return error_response(str(exc.detail), exc.status_code)


def install(app: FastAPI) -> None:
    """Attach the middleware and error handlers to an app."""
    app.add_middleware(ProxyHeadersMiddleware)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
