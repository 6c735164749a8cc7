"""Shared fixtures: an app wired to a fake PiccyBot upstream."""
from __future__ import annotations

import os
from typing import Callable, List

import httpx
import pytest

os.environ.setdefault("PICCY_TTS_NO_COLOR", "1")

FAKE_MP3 = b"ID3\x03\x00\x00\x00\x00\x00\x00\xff\xfb\x90\x00" + b"\x00" * 64


class FakeUpstream:
    """Records every request sent to the fake PiccyBot endpoint."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self._handler = handler
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    @property
    def calls(self) -> int:
        return len(self.requests)


def make_service(handler, timeout_s: float = 30.0):
    from piccy_tts.core.config import ProxyConfig, UpstreamConfig
    from piccy_tts.services.piccy_client import PiccyClient
    from piccy_tts.services.speech_service import SpeechService

    config = ProxyConfig(upstream=UpstreamConfig(timeout_s=timeout_s))
    client = PiccyClient(config.upstream, transport=httpx.MockTransport(handler))
    return SpeechService(config, client=client)


@pytest.fixture
def upstream_ok():
    return FakeUpstream(lambda request: httpx.Response(200, content=FAKE_MP3))


@pytest.fixture
def make_client():
    """Build a TestClient whose SpeechService talks to the given handler."""
    from fastapi.testclient import TestClient

    from piccy_tts.api.dependencies import get_speech_service
    from piccy_tts.main import create_app

    clients = []

    def _make(handler=None, service=None, timeout_s: float = 30.0) -> TestClient:
        if service is None:
            service = make_service(handler, timeout_s=timeout_s)
        app = create_app()
        app.dependency_overrides[get_speech_service] = lambda: service
        client = TestClient(app)
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.close()
