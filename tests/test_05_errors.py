"""Tests for the error taxonomy and its JSON rendering."""
import json

import pytest

from piccy_tts.api.responses import error_from, error_response
from piccy_tts.services.errors import (
    ErrorCode,
    MethodNotAllowedError,
    NotFoundError,
    ProxyError,
    UpstreamError,
    ValidationError,
)


class TestStatusCodes:
    """Each error kind maps to a fixed HTTP status."""

    @pytest.mark.parametrize("exc,status", [
        (MethodNotAllowedError(), 400),
        (ValidationError("bad"), 400),
        (NotFoundError(), 404),
        (UpstreamError("down"), 500),
        (ProxyError("oops"), 500),
    ])
    def test_status(self, exc, status):
        assert exc.status_code == status
        assert isinstance(exc, ProxyError)

    def test_status_override(self):
        assert ProxyError("teapot", status_code=418).status_code == 418
        assert ProxyError("plain").status_code == 500

    def test_default_messages(self):
        assert MethodNotAllowedError().message == "Only GET requests are allowed"
        assert NotFoundError().message == "Endpoint not found. Use /, /voices or /tts"
        assert str(NotFoundError()) == NotFoundError().message

    def test_codes(self):
        assert MethodNotAllowedError().code == ErrorCode.METHOD_NOT_ALLOWED
        assert NotFoundError().code == ErrorCode.NOT_FOUND
        assert UpstreamError("x").code == ErrorCode.UPSTREAM_STATUS
        assert UpstreamError("x", ErrorCode.UPSTREAM_EMPTY).code == ErrorCode.UPSTREAM_EMPTY
        assert ProxyError("x").code == ErrorCode.INTERNAL_ERROR

    def test_upstream_status_kept(self):
        assert UpstreamError("x", upstream_status=503).upstream_status == 503
        assert UpstreamError("x").upstream_status is None


class TestEnvelope:
    """Error responses share one JSON envelope."""

    def test_error_response(self):
        resp = error_response("Something broke", 500)
        assert resp.status_code == 500
        assert json.loads(resp.body) == {"status_code": 500, "error": True, "message": "Something broke"}
        assert list(json.loads(resp.body)) == ["status_code", "error", "message"]

    def test_error_from(self):
        resp = error_from(ValidationError("Voice and text parameters are required"))
        assert resp.status_code == 400
        body = json.loads(resp.body)
        assert body["status_code"] == 400
        assert body["error"] is True
        assert body["message"] == "Voice and text parameters are required"

    def test_envelope_pretty_printed(self):
        resp = error_response("x", 404)
        assert resp.body.decode("utf-8").startswith("{\n  ")

    def test_envelope_ignores_unknown_fields(self):
        from piccy_tts.api.schemas import Envelope

        assert Envelope(message="ok", stray=1).model_dump() == {"status_code": 200, "message": "ok"}
