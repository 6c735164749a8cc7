"""
Response builders.

All JSON leaves the service through json_response(), and all errors
through error_response(), so the envelope shape is the same on every
exit path. CORS and X-Request-Id headers are added by the middleware,
not here.
"""
from __future__ import annotations

import json
from typing import Any, Dict, Union

from fastapi import Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from piccy_tts.api.schemas import ErrorEnvelope
from piccy_tts.services.errors import ProxyError
from piccy_tts.services.speech_service import SpeechResult


class PrettyJSONResponse(JSONResponse):
    """JSONResponse rendered with 2-space indentation."""

    def render(self, content: Any) -> bytes:
        return json.dumps(content, ensure_ascii=False, indent=2).encode("utf-8")


def json_response(data: Union[BaseModel, Dict[str, Any]], status_code: int = 200) -> PrettyJSONResponse:
    """Render an envelope model or dict as pretty JSON."""
    content = data.model_dump() if isinstance(data, BaseModel) else data
    return PrettyJSONResponse(content=content, status_code=status_code)


def error_response(message: str, status_code: int) -> PrettyJSONResponse:
    """Render an error envelope (error=true) with the given status."""
    return json_response(ErrorEnvelope(status_code=status_code, message=message), status_code)


def error_from(exc: ProxyError) -> PrettyJSONResponse:
    """Render a ProxyError with its own status and message."""
    return error_response(exc.message, exc.status_code)


def audio_response(result: SpeechResult) -> Response:
    """Return upstream audio untouched as an mp3 attachment."""
    return Response(
        content=result.audio,
        media_type="audio/mpeg",
        headers={"Content-Disposition": f'attachment; filename="{result.filename}"'},
    )
