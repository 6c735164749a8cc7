"""
FastAPI Application Entry Point.

Creates the piccy-tts ASGI app: structured logging, the GET-only
method guard with CORS headers, envelope error handlers, and the
/, /voices and /tts routes.

Usage:
    uvicorn piccy_tts.main:app --host 0.0.0.0 --port 8000

    # or through the CLI
    piccy-tts --serve --port 8000
"""

from __future__ import annotations

from fastapi import FastAPI

from piccy_tts import __version__
from piccy_tts.api import middleware
from piccy_tts.api.routes import router
from piccy_tts.core.logging import configure_logging, get_logger, info


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    The interactive docs and OpenAPI routes are disabled: every path
    other than /, /voices and /tts must answer 404. Slash redirects are
    off because both slash variants are registered explicitly.
    """
    configure_logging()

    app = FastAPI(
        title="piccy-tts",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )

    middleware.install(app)
    app.include_router(router)

    info(get_logger("piccy-tts"), "app_created", version=__version__)
    return app


# Global application instance for ASGI servers (uvicorn, gunicorn, etc.)
app = create_app()
