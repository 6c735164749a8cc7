"""
Input Validation for /tts.

Checks run in a fixed order, and the first failure wins:
    1. voice and text present and non-blank
    2. voice (lower-cased, trimmed) is a supported voice
    3. text (trimmed) is at most max_length characters

Length is measured in UTF-16 code units (what browsers report as
String.length), not bytes: characters outside the Basic Multilingual
Plane, such as most emoji, count as two.

Usage:
    from piccy_tts.services.validators import validate_tts_params, ValidationError

    try:
        params = validate_tts_params(voice, text)
    except ValidationError as e:
        return error_response(e.message, e.status_code)
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from piccy_tts.core.config import Defaults, VOICES
from piccy_tts.services.errors import ErrorCode, ValidationError


@dataclass(frozen=True)
class TTSParams:
    """Normalized /tts parameters."""
    voice: str
    text: str


def validate_required(voice: Optional[str], text: Optional[str]) -> None:
    """
    Reject missing or blank voice/text.

    Raises:
        ValidationError: PARAMS_REQUIRED
    """
    if not voice or not text or not voice.strip() or not text.strip():
        raise ValidationError("Voice and text parameters are required", ErrorCode.PARAMS_REQUIRED)


def normalize_voice(voice: str) -> str:
    """Lower-case and trim a voice name."""
    return voice.lower().strip()


def validate_voice(voice: str, voices: Sequence[str] = VOICES) -> str:
    """
    Validate a voice name.

    Args:
        voice: Raw voice name; normalized before the lookup.
        voices: Supported voices, in the order they are listed in errors.

    Returns:
        The normalized voice.

    Raises:
        ValidationError: VOICE_INVALID
    """
    clean = normalize_voice(voice)
    if clean not in voices:
        raise ValidationError(
            f"Invalid voice. Available voices: {', '.join(voices)}",
            ErrorCode.VOICE_INVALID,
        )
    return clean


def text_length(text: str) -> int:
    """Length of text in UTF-16 code units."""
    return len(text.encode("utf-16-le", "surrogatepass")) // 2


def validate_text(text: str, max_length: int = Defaults.LIMITS_MAX_TEXT_CHARS) -> str:
    """
    Validate text length.

    Returns:
        The trimmed text, case preserved.

    Raises:
        ValidationError: TEXT_TOO_LONG
    """
    clean = text.strip()
    if text_length(clean) > max_length:
        raise ValidationError(
            f"Text cannot exceed {max_length} characters",
            ErrorCode.TEXT_TOO_LONG,
        )
    return clean


def validate_tts_params(
    voice: Optional[str],
    text: Optional[str],
    voices: Sequence[str] = VOICES,
    max_length: int = Defaults.LIMITS_MAX_TEXT_CHARS,
) -> TTSParams:
    """
    Validate and normalize the /tts query parameters.

    Raises:
        ValidationError: On the first violated rule.
    """
    validate_required(voice, text)
    clean_voice = validate_voice(voice, voices)
    clean_text = validate_text(text, max_length)
    return TTSParams(voice=clean_voice, text=clean_text)
