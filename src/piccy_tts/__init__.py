"""
piccy-tts: Text-to-Speech HTTP proxy for the PiccyBot speech API.

A small GET-only API that validates a voice and a text, forwards them to
PiccyBot, and streams back the MP3 it produces.

Endpoints:
    - GET /        Service descriptor
    - GET /voices  Supported voices (alloy, echo, fable, onyx, nova, shimmer)
    - GET /tts     ?voice=...&text=... -> audio/mpeg

Every response carries permissive CORS headers; every error is a JSON
envelope {"status_code", "error": true, "message"}.

Example Usage:
    >>> import asyncio
    >>> from piccy_tts.core.config import ProxyConfig
    >>> from piccy_tts.services import SpeechService
    >>>
    >>> service = SpeechService(ProxyConfig())
    >>> params = service.validate("nova", "Hello")
    >>> result = asyncio.run(service.synthesize(params))
    >>> with open(result.filename, "wb") as f:
    ...     f.write(result.audio)
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
