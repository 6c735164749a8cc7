"""
Tests for /tts parameter validation.

Tests cover:
- validate_required() - None, empty, whitespace
- validate_voice() - normalization, unknown voices, message format
- validate_text() - trimming, limit, UTF-16 unit counting
- validate_tts_params() - rule ordering
"""
import pytest

from piccy_tts.services.errors import ErrorCode, ValidationError
from piccy_tts.services.validators import (
    TTSParams,
    normalize_voice,
    text_length,
    validate_required,
    validate_text,
    validate_tts_params,
    validate_voice,
)


class TestValidateRequired:
    """Tests for validate_required()."""

    @pytest.mark.parametrize("voice,text", [
        (None, "Hello"),
        ("alloy", None),
        (None, None),
        ("", "Hello"),
        ("alloy", ""),
        ("   ", "Hello"),
        ("alloy", "\t\n "),
    ])
    def test_missing_or_blank(self, voice, text):
        with pytest.raises(ValidationError) as exc_info:
            validate_required(voice, text)
        assert exc_info.value.message == "Voice and text parameters are required"
        assert exc_info.value.code == ErrorCode.PARAMS_REQUIRED
        assert exc_info.value.status_code == 400

    def test_present(self):
        validate_required("alloy", "Hello")


class TestValidateVoice:
    """Tests for validate_voice()."""

    @pytest.mark.parametrize("raw", ["nova", "NOVA", " Nova ", "\tnova\n"])
    def test_normalized(self, raw):
        assert validate_voice(raw) == "nova"

    def test_normalize_voice(self):
        assert normalize_voice("  SHIMMER ") == "shimmer"

    @pytest.mark.parametrize("raw", ["bogus", "no va", "novaa", "ash"])
    def test_unknown(self, raw):
        with pytest.raises(ValidationError) as exc_info:
            validate_voice(raw)
        assert exc_info.value.code == ErrorCode.VOICE_INVALID
        assert exc_info.value.message == (
            "Invalid voice. Available voices: alloy, echo, fable, onyx, nova, shimmer"
        )

    def test_custom_voice_set(self):
        assert validate_voice("A", voices=("a", "b")) == "a"
        with pytest.raises(ValidationError) as exc_info:
            validate_voice("c", voices=("a", "b"))
        assert exc_info.value.message == "Invalid voice. Available voices: a, b"


class TestValidateText:
    """Tests for validate_text()."""

    def test_trimmed_case_kept(self):
        assert validate_text("  Hello World  ") == "Hello World"

    def test_at_limit(self):
        assert len(validate_text("a" * 5000)) == 5000

    def test_over_limit(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_text("a" * 5001)
        assert exc_info.value.code == ErrorCode.TEXT_TOO_LONG
        assert exc_info.value.message == "Text cannot exceed 5000 characters"

    def test_whitespace_not_counted(self):
        assert validate_text(" " * 100 + "a" * 5000 + " " * 100) == "a" * 5000

    def test_multibyte_counted_as_characters(self):
        text = "ğ" * 5000
        assert len(text.encode("utf-8")) > 5000
        assert validate_text(text) == text

    @pytest.mark.parametrize("text,units", [
        ("hello", 5),
        ("ğüş", 3),
        ("\U0001F600", 2),
        ("a\U0001F3B5b", 4),
    ])
    def test_text_length_utf16_units(self, text, units):
        assert text_length(text) == units

    def test_emoji_count_double(self):
        assert validate_text("\U0001F600" * 2500) == "\U0001F600" * 2500
        with pytest.raises(ValidationError) as exc_info:
            validate_text("\U0001F600" * 2501)
        assert exc_info.value.code == ErrorCode.TEXT_TOO_LONG

    def test_custom_limit(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_text("hello", max_length=3)
        assert exc_info.value.message == "Text cannot exceed 3 characters"


class TestValidateTTSParams:
    """Tests for the full validation pipeline."""

    def test_valid(self):
        assert validate_tts_params(" ECHO ", " Hi there ") == TTSParams(voice="echo", text="Hi there")

    def test_required_checked_first(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_tts_params("bogus", "")
        assert exc_info.value.code == ErrorCode.PARAMS_REQUIRED

    def test_voice_checked_before_length(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_tts_params("bogus", "a" * 6000)
        assert exc_info.value.code == ErrorCode.VOICE_INVALID

    def test_length_with_valid_voice(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_tts_params("fable", "a" * 6000)
        assert exc_info.value.code == ErrorCode.TEXT_TOO_LONG

    def test_params_frozen(self):
        params = validate_tts_params("alloy", "Hello")
        with pytest.raises(Exception):
            params.voice = "echo"
