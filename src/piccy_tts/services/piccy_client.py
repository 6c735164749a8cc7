"""
Async client for the PiccyBot speech API.

One call = one POST (redirects are followed, and the status checked is
the final one). The user text is wrapped in a fixed instruction so
the provider reads it verbatim, and the response body is returned as-is
(no transcoding, no format checks).

Failure modes, all raised as UpstreamError:
    - non-2xx status          "PiccyBot API returned status <code>"
    - 2xx with empty body     "Empty response from PiccyBot API"
    - transport failure       "PiccyBot API request failed: <reason>"
    - total time > timeout_s  "PiccyBot API request timed out after <n>s"

Nothing is retried and nothing is cached.
"""
from __future__ import annotations

import asyncio
from typing import Any, Dict

import httpx

from piccy_tts.core.config import UpstreamConfig
from piccy_tts.core.logging import debug, get_logger, verbose
from piccy_tts.services.errors import ErrorCode, UpstreamError

_LOG = get_logger("piccy-tts.upstream")

INSTRUCTION_PREFIX = "Read only this text word by word, do not add anything else: "


def build_payload(voice: str, text: str) -> Dict[str, Any]:
    """
    Build the PiccyBot request body.

    Only extracted_content and voice vary; the remaining fields are the
    constants the provider expects from its own app.
    """
    return {
        "extracted_content": f"{INSTRUCTION_PREFIX}{text}",
        "voice": voice,
        "exp": True,
        "mode": "standard",
        "purchase_token": "",
        "sub": True,
        "piccy_valid": "",
    }


class PiccyClient:
    """Thin async wrapper around the PiccyBot /speech endpoint."""

    def __init__(
        self,
        config: UpstreamConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or UpstreamConfig()
        self._transport = transport

    @property
    def config(self) -> UpstreamConfig:
        return self._config

    def headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "User-Agent": self._config.user_agent,
            "Accept": "*/*",
        }

    async def synthesize(self, voice: str, text: str) -> bytes:
        """
        Generate speech for already-validated voice and text.

        The whole call (connect, send, read) shares one deadline.

        Returns:
            Raw audio bytes from the provider.

        Raises:
            UpstreamError: On any failure, including the deadline.
        """
        timeout_s = self._config.timeout_s
        try:
            return await asyncio.wait_for(self._post(voice, text), timeout=timeout_s)
        except asyncio.TimeoutError as e:
            raise UpstreamError(
                f"PiccyBot API request timed out after {timeout_s:g}s",
                ErrorCode.UPSTREAM_TIMEOUT,
            ) from e

    async def _post(self, voice: str, text: str) -> bytes:
        payload = build_payload(voice, text)
        debug(_LOG, "upstream_payload", url=self._config.url, payload=payload)

        async with httpx.AsyncClient(
            timeout=self._config.timeout_s,
            transport=self._transport,
            follow_redirects=True,
        ) as client:
            try:
                resp = await client.post(self._config.url, json=payload, headers=self.headers())
            except httpx.TimeoutException as e:
                raise UpstreamError(
                    f"PiccyBot API request timed out after {self._config.timeout_s:g}s",
                    ErrorCode.UPSTREAM_TIMEOUT,
                ) from e
            except httpx.HTTPError as e:
                msg = str(e).strip() or e.__class__.__name__
                raise UpstreamError(
                    f"PiccyBot API request failed: {msg}",
                    ErrorCode.UPSTREAM_TRANSPORT,
                ) from e

        verbose(_LOG, "upstream_status", status=resp.status_code, bytes=len(resp.content))

        if not resp.is_success:
            raise UpstreamError(
                f"PiccyBot API returned status {resp.status_code}",
                ErrorCode.UPSTREAM_STATUS,
                upstream_status=resp.status_code,
            )

        audio = resp.content
        if len(audio) == 0:
            raise UpstreamError("Empty response from PiccyBot API", ErrorCode.UPSTREAM_EMPTY)

        return audio
