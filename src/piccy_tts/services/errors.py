"""
Error Codes and Exceptions.

Every failure a request can hit is a ProxyError subclass that knows its
HTTP status. The API renders it as the shared JSON envelope:

    {
        "status_code": 400,
        "error": true,
        "message": "Voice and text parameters are required"
    }

Taxonomy:
    - MethodNotAllowedError: non-GET request            -> 400
    - ValidationError: bad /tts query parameters        -> 400
    - NotFoundError: unknown path                       -> 404
    - UpstreamError: PiccyBot failure, empty body,
      transport error or timeout                        -> 500
"""
from __future__ import annotations


class ErrorCode:
    """
    Machine-readable error codes.

    Codes appear in logs only; the client-facing envelope carries the
    status code and message.
    """
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
    PARAMS_REQUIRED = "PARAMS_REQUIRED"
    VOICE_INVALID = "VOICE_INVALID"
    TEXT_TOO_LONG = "TEXT_TOO_LONG"
    NOT_FOUND = "NOT_FOUND"
    UPSTREAM_STATUS = "UPSTREAM_STATUS"
    UPSTREAM_EMPTY = "UPSTREAM_EMPTY"
    UPSTREAM_TIMEOUT = "UPSTREAM_TIMEOUT"
    UPSTREAM_TRANSPORT = "UPSTREAM_TRANSPORT"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ProxyError(Exception):
    """
    Base exception for request-level failures.

    Attributes:
        message: Human-readable error message.
        code: Error code from ErrorCode.
        status_code: HTTP status returned to the client.
    """
    status_code: int = 500

    def __init__(self, message: str, code: str = ErrorCode.INTERNAL_ERROR, status_code: int | None = None):
        self.message = message
        self.code = code
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class MethodNotAllowedError(ProxyError):
    """Raised for any method other than GET and OPTIONS."""
    status_code = 400

    def __init__(self, message: str = "Only GET requests are allowed"):
        super().__init__(message, ErrorCode.METHOD_NOT_ALLOWED)


class ValidationError(ProxyError):
    """Raised when /tts query parameters fail validation."""
    status_code = 400

    def __init__(self, message: str, code: str = ErrorCode.PARAMS_REQUIRED):
        super().__init__(message, code)


class NotFoundError(ProxyError):
    """Raised for paths outside /, /voices and /tts."""
    status_code = 404

    def __init__(self, message: str = "Endpoint not found. Use /, /voices or /tts"):
        super().__init__(message, ErrorCode.NOT_FOUND)


class UpstreamError(ProxyError):
    """Raised when the PiccyBot call fails for any reason."""
    status_code = 500

    def __init__(self, message: str, code: str = ErrorCode.UPSTREAM_STATUS, upstream_status: int | None = None):
        self.upstream_status = upstream_status
        super().__init__(message, code)
