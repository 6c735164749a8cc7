"""
FastAPI Dependency Injection Providers.

    1. get_settings() - Loads and caches settings.yaml (defaults if absent)
    2. get_proxy_config() - Validated, immutable ProxyConfig
    3. get_speech_service() - Shared SpeechService

Everything here is built once per process and never mutated, so
requests share it without locking. Tests swap the service through
app.dependency_overrides[get_speech_service].
"""
from __future__ import annotations

from functools import lru_cache

from piccy_tts.core.config import ProxyConfig, Settings, load_settings_or_defaults
from piccy_tts.services.speech_service import SpeechService


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Load and cache application settings.

    The path comes from PICCY_TTS_SETTINGS (default config/settings.yaml).
    A missing file means all defaults.
    """
    return load_settings_or_defaults()


@lru_cache(maxsize=1)
def get_proxy_config() -> ProxyConfig:
    """Validate settings once; ConfigValidationError surfaces at first use."""
    return get_settings().get_proxy_config()


@lru_cache(maxsize=1)
def get_speech_service() -> SpeechService:
    """Get the process-wide SpeechService."""
    return SpeechService(get_proxy_config())
