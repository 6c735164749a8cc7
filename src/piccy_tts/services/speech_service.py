"""
SpeechService - the /tts pipeline.

Architecture:
    Query params -> Validate/normalize -> PiccyBot POST -> Audio bytes

The service holds only immutable configuration and an upstream client,
so one instance is shared by all requests. Both the HTTP API and the CLI
go through it.

Example:
    >>> from piccy_tts.core.config import ProxyConfig
    >>> service = SpeechService(ProxyConfig())
    >>> params = service.validate(" NOVA ", "Hello")
    >>> result = await service.synthesize(params)
    >>> result.filename
    'tts_nova.mp3'
"""
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Optional, Tuple

from piccy_tts.core.config import ProxyConfig
from piccy_tts.core.logging import fail, get_logger, info, success
from piccy_tts.services.errors import UpstreamError
from piccy_tts.services.piccy_client import PiccyClient, build_payload
from piccy_tts.services.validators import TTSParams, validate_tts_params

_LOG = get_logger("piccy-tts.service")


@dataclass(frozen=True)
class SpeechResult:
    """
    Result of one generation.

    Attributes:
        audio: Raw bytes exactly as returned by the provider.
        voice: Normalized voice used.
        total_seconds: Wall time of the upstream call.
    """
    audio: bytes
    voice: str
    total_seconds: float

    @property
    def filename(self) -> str:
        return f"tts_{self.voice}.mp3"


class SpeechService:
    """Validates TTS parameters and proxies generation to PiccyBot."""

    def __init__(self, config: ProxyConfig, client: Optional[PiccyClient] = None):
        self._config = config
        self._client = client or PiccyClient(config.upstream)

    @property
    def config(self) -> ProxyConfig:
        return self._config

    @property
    def voices(self) -> Tuple[str, ...]:
        return self._config.voices

    def validate(self, voice: Optional[str], text: Optional[str]) -> TTSParams:
        """
        Validate and normalize raw query values.

        Raises:
            ValidationError: On the first violated rule.
        """
        return validate_tts_params(
            voice,
            text,
            voices=self._config.voices,
            max_length=self._config.limits.max_text_chars,
        )

    def preview_payload(self, params: TTSParams) -> dict:
        """Return the body that synthesize() would send upstream."""
        return build_payload(params.voice, params.text)

    async def synthesize(self, params: TTSParams) -> SpeechResult:
        """
        Generate audio for validated parameters.

        Raises:
            UpstreamError: When the provider call fails.
        """
        info(_LOG, "tts_request", voice=params.voice, chars=len(params.text))
        t0 = time.perf_counter()
        try:
            audio = await self._client.synthesize(params.voice, params.text)
        except UpstreamError as e:
            fail(_LOG, "tts_failed", code=e.code, error=e.message,
                 seconds=round(time.perf_counter() - t0, 4))
            raise

        elapsed = time.perf_counter() - t0
        success(_LOG, "tts_success", seconds=round(elapsed, 4), bytes=len(audio), voice=params.voice)
        return SpeechResult(audio=audio, voice=params.voice, total_seconds=elapsed)
