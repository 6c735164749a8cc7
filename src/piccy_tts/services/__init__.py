"""
piccy-tts Services Layer.

Business logic between the HTTP API and the upstream provider.

Components:
    - errors.py: ProxyError hierarchy and error codes
    - validators.py: /tts parameter validation and normalization
    - piccy_client.py: Async PiccyBot client
    - speech_service.py: SpeechService (validation + generation)
"""
from .errors import (
    ErrorCode,
    MethodNotAllowedError,
    NotFoundError,
    ProxyError,
    UpstreamError,
    ValidationError,
)
from .piccy_client import PiccyClient
from .speech_service import SpeechResult, SpeechService
from .validators import TTSParams

__all__ = [
    "SpeechService",
    "SpeechResult",
    "PiccyClient",
    "TTSParams",
    "ProxyError",
    "MethodNotAllowedError",
    "ValidationError",
    "NotFoundError",
    "UpstreamError",
    "ErrorCode",
]
