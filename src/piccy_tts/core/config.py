"""
Configuration Management for piccy-tts.

This module provides centralized configuration handling with:
    - Default values (Defaults class)
    - Frozen dataclass configuration objects
    - YAML file loading with environment variable overrides
    - Validation with meaningful error messages

Configuration Hierarchy (highest priority first):
    1. Environment variables (PICCY_TTS_UPSTREAM_URL, PICCY_TTS_TIMEOUT_S, ...)
    2. YAML config file (config/settings.yaml)
    3. Defaults class values

Example settings.yaml:
    upstream:
      url: https://www.sparklingapps.com/piccybotapi/index.php/speech
      timeout_s: 30

    limits:
      max_text_chars: 5000

    logging:
      level: 2  # NORMAL

All configuration objects are immutable. They are built once at startup and
shared by every request without synchronization.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Tuple
import os
import yaml


class ConfigValidationError(Exception):
    """
    Raised when configuration validation fails.

    Thrown when a configuration value is outside acceptable bounds
    or of the wrong type.
    """
    pass


class Defaults:
    """
    Centralized default configuration values.

    Sections:
        - Upstream: PiccyBot endpoint and request identity
        - Limits: Input size limits
        - Logging: Log level and formatting
        - Server: Bind address for the CLI --serve mode
    """

    # ─────────────────────────────────────────────────────────────────────────
    # Upstream (PiccyBot speech API)
    # ─────────────────────────────────────────────────────────────────────────
    UPSTREAM_URL = "https://www.sparklingapps.com/piccybotapi/index.php/speech"
    UPSTREAM_USER_AGENT = "PiccyBot/1.76"
    UPSTREAM_TIMEOUT_S = 30.0

    # ─────────────────────────────────────────────────────────────────────────
    # Limits
    # ─────────────────────────────────────────────────────────────────────────
    LIMITS_MAX_TEXT_CHARS = 5000

    # ─────────────────────────────────────────────────────────────────────────
    # Logging
    # ─────────────────────────────────────────────────────────────────────────
    LOGGING_LEVEL = 2                   # 1=MINIMAL, 2=NORMAL, 3=VERBOSE, 4=DEBUG

    # ─────────────────────────────────────────────────────────────────────────
    # Server
    # ─────────────────────────────────────────────────────────────────────────
    SERVER_HOST = "0.0.0.0"
    SERVER_PORT = 8000


# Voices accepted by the upstream provider, in display order
VOICES: Tuple[str, ...] = ("alloy", "echo", "fable", "onyx", "nova", "shimmer")

# Headers attached to every response
CORS_HEADERS: Dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


@dataclass(frozen=True)
class UpstreamConfig:
    """
    Upstream provider configuration.

    timeout_s bounds the whole outbound call, not a single socket read.
    """
    url: str = Defaults.UPSTREAM_URL
    user_agent: str = Defaults.UPSTREAM_USER_AGENT
    timeout_s: float = Defaults.UPSTREAM_TIMEOUT_S


@dataclass(frozen=True)
class LimitsConfig:
    """Input limits applied before any upstream call."""
    max_text_chars: int = Defaults.LIMITS_MAX_TEXT_CHARS


@dataclass(frozen=True)
class ProxyConfig:
    """
    Validated configuration for the TTS proxy.

    This is the main configuration object created from Settings.

    Usage:
        settings = load_settings("config/settings.yaml")
        config = ProxyConfig.from_settings(settings)
        print(config.upstream.timeout_s)
    """
    upstream: UpstreamConfig = field(default_factory=UpstreamConfig)
    limits: LimitsConfig = field(default_factory=LimitsConfig)
    voices: Tuple[str, ...] = VOICES

    @classmethod
    def from_settings(cls, settings: "Settings") -> "ProxyConfig":
        """
        Create ProxyConfig from Settings with validation.

        Reads the raw configuration dictionary, applies defaults and
        environment overrides, validates constraints, and returns typed
        configuration.

        Raises:
            ConfigValidationError: If any value fails validation.
        """
        raw = settings.raw

        # ─────────────────────────────────────────────────────────────────────
        # Upstream configuration (with environment variable overrides)
        # ─────────────────────────────────────────────────────────────────────
        upstream_raw = raw.get("upstream", {}) or {}
        url = os.getenv("PICCY_TTS_UPSTREAM_URL") or upstream_raw.get("url", Defaults.UPSTREAM_URL)
        timeout_raw = os.getenv("PICCY_TTS_TIMEOUT_S") or upstream_raw.get("timeout_s", Defaults.UPSTREAM_TIMEOUT_S)
        try:
            timeout_s = float(timeout_raw)
        except (TypeError, ValueError):
            raise ConfigValidationError(f"upstream.timeout_s must be a number, got {timeout_raw!r}")

        upstream = UpstreamConfig(
            url=str(url),
            user_agent=str(upstream_raw.get("user_agent", Defaults.UPSTREAM_USER_AGENT)),
            timeout_s=timeout_s,
        )
        cls._validate_url("upstream.url", upstream.url)
        cls._validate_positive("upstream.timeout_s", upstream.timeout_s)

        # ─────────────────────────────────────────────────────────────────────
        # Limits configuration
        # ─────────────────────────────────────────────────────────────────────
        limits_raw = raw.get("limits", {}) or {}
        max_chars_raw = limits_raw.get("max_text_chars", Defaults.LIMITS_MAX_TEXT_CHARS)
        try:
            max_text_chars = int(max_chars_raw)
        except (TypeError, ValueError):
            raise ConfigValidationError(f"limits.max_text_chars must be an integer, got {max_chars_raw!r}")

        limits = LimitsConfig(max_text_chars=max_text_chars)
        cls._validate_positive("limits.max_text_chars", limits.max_text_chars)

        return cls(upstream=upstream, limits=limits)

    @staticmethod
    def _validate_positive(name: str, value: int | float) -> None:
        """Validate that a value is positive (> 0)."""
        if value <= 0:
            raise ConfigValidationError(f"{name} must be positive, got {value}")

    @staticmethod
    def _validate_url(name: str, value: str) -> None:
        """Validate that a value looks like an http(s) URL."""
        if not value.startswith(("http://", "https://")):
            raise ConfigValidationError(f"{name} must be an http(s) URL, got {value!r}")


@dataclass(frozen=True)
class Settings:
    """
    Immutable settings container loaded from YAML.

    This is the raw settings object before validation. Use
    get_proxy_config() to get the validated ProxyConfig.

    Attributes:
        raw: Dictionary of raw configuration values.
    """
    raw: Dict[str, Any] = field(default_factory=dict)

    @property
    def log_level(self) -> Any:
        """Get the configured log level (int or level name)."""
        return (self.raw.get("logging") or {}).get("level", Defaults.LOGGING_LEVEL)

    @property
    def server_host(self) -> str:
        """Get the bind host for --serve."""
        return str((self.raw.get("server") or {}).get("host", Defaults.SERVER_HOST))

    @property
    def server_port(self) -> int:
        """Get the bind port for --serve."""
        return int((self.raw.get("server") or {}).get("port", Defaults.SERVER_PORT))

    def get_proxy_config(self) -> ProxyConfig:
        """
        Get validated ProxyConfig from these settings.

        Raises:
            ConfigValidationError: If validation fails.
        """
        return ProxyConfig.from_settings(self)


def settings_path() -> str:
    """Return the settings file path, honoring PICCY_TTS_SETTINGS."""
    return os.getenv("PICCY_TTS_SETTINGS", "config/settings.yaml")


def load_settings(path: str = "config/settings.yaml") -> Settings:
    """
    Load settings from a YAML configuration file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        Settings object with loaded configuration.

    Raises:
        FileNotFoundError: If the settings file doesn't exist.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"settings file not found: {p.resolve()}")

    with p.open("r", encoding="utf-8") as f:
        raw: Dict[str, Any] = yaml.safe_load(f) or {}

    return Settings(raw=raw)


def load_settings_or_defaults(path: str | None = None) -> Settings:
    """Load settings from path, falling back to empty (default) settings."""
    path = path or settings_path()
    if not Path(path).exists():
        return Settings(raw={})
    return load_settings(path)
