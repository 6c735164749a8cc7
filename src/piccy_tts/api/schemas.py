"""
API Response Schemas.

Every JSON body the service returns is an Envelope: it always starts with
status_code and message. Endpoint-specific fields extend it.

Models:
    Envelope: Base shape {status_code, message}
    ErrorEnvelope: {status_code, error, message}
    ServiceInfo: Body of GET /
    VoiceList: Body of GET /voices

Example Error:
    {
      "status_code": 400,
      "error": true,
      "message": "Text cannot exceed 5000 characters"
    }
"""
from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class Envelope(BaseModel):
    """Common JSON envelope."""
    status_code: int = Field(default=200, description="HTTP status mirrored in the body")
    message: str = Field(..., description="Human readable summary")


class ErrorEnvelope(BaseModel):
    """Body of every error response."""
    status_code: int
    error: bool = True
    message: str


class Endpoints(BaseModel):
    """Descriptions of the public endpoints."""
    voices: str
    tts: str


class ServiceInfo(Envelope):
    """
    Service descriptor returned by GET /.

    Attributes:
        endpoints: Short usage line per endpoint.
        example: Ready-to-use /tts URL on the caller's origin.
    """
    endpoints: Endpoints
    example: str


class VoiceList(Envelope):
    """Supported voices, in order, returned by GET /voices."""
    voices: List[str]
    total: int
