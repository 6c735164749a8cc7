"""
TTS API Routes.

Endpoints (GET only; the middleware rejects other methods):
    GET /         - Service descriptor with an example URL
    GET /voices   - Supported voices and their count
    GET /tts      - Generate speech: ?voice=<voice>&text=<text>

Trailing slashes are accepted on /voices and /tts.

/tts Request Flow:
    1. Read the first value of voice and text from the query string
    2. Validate and normalize (400 on the first violated rule)
    3. Call PiccyBot through SpeechService
    4. Return audio/mpeg, or 500 "Generation failed: <reason>"

Example:
    curl "http://localhost:8000/tts?voice=nova&text=Hello" --output hello.mp3

See Also:
    - api/middleware.py: Method guard, CORS, 404 handling
    - services/speech_service.py: Validation and upstream call
"""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Request

from piccy_tts.api.dependencies import get_speech_service
from piccy_tts.api.responses import audio_response, error_from, error_response, json_response
from piccy_tts.api.schemas import Endpoints, ServiceInfo, VoiceList
from piccy_tts.core.logging import error, get_logger, warn
from piccy_tts.services.errors import UpstreamError, ValidationError
from piccy_tts.services.speech_service import SpeechService

router = APIRouter()

_LOG = get_logger("piccy-tts.api")


def _first_param(request: Request, name: str) -> Optional[str]:
    """Return the first value of a repeated query key, or None."""
    values = request.query_params.getlist(name)
    return values[0] if values else None


@router.get("/")
def service_info(request: Request):
    """Describe the API; the example URL uses the caller's origin."""
    origin = f"{request.url.scheme}://{request.url.netloc}"
    return json_response(ServiceInfo(
        status_code=200,
        message="Text to Speech API - PiccyBot",
        endpoints=Endpoints(
            voices="/voices - List available voices",
            tts="/tts?voice=alloy&text=Hello - Generate audio",
        ),
        example=f"{origin}/tts?voice=nova&text=Hello",
    ))


@router.get("/voices")
@router.get("/voices/")
def list_voices(service: SpeechService = Depends(get_speech_service)):
    """List supported voices in their fixed order."""
    voices = list(service.voices)
    return json_response(VoiceList(
        status_code=200,
        message="Available voices in PiccyBot",
        voices=voices,
        total=len(voices),
    ))


@router.get("/tts")
@router.get("/tts/")
async def tts(request: Request, service: SpeechService = Depends(get_speech_service)):
    """
    Generate speech through PiccyBot.

    Returns:
        audio/mpeg bytes exactly as the provider sent them, with
        Content-Disposition: attachment; filename="tts_<voice>.mp3".

    Errors:
        400: Missing/blank params, unknown voice, text over the limit
        500: Upstream status error, empty body, transport failure, timeout
    """
    try:
        params = service.validate(_first_param(request, "voice"), _first_param(request, "text"))
    except ValidationError as e:
        warn(_LOG, "tts_rejected", code=e.code, error=e.message)
        return error_from(e)

    try:
        result = await service.synthesize(params)
    except UpstreamError as e:
        return error_response(f"Generation failed: {e.message}", 500)
    except Exception as e:
        msg = str(e).strip() or e.__class__.__name__
        error(_LOG, "tts_unexpected_error", error=msg, type=e.__class__.__name__)
        return error_response(f"Generation failed: {msg}", 500)

    return audio_response(result)
