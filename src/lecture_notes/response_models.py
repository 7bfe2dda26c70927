"""Response models for the lecture-notes API."""

from typing import Literal

from pydantic import BaseModel


class TranscriptResponse(BaseModel):
    """Response returned after a successful transcription."""

    status: Literal["success"] = "success"
    transcript: str


class SummaryResponse(BaseModel):
    """Response returned after a successful summarization."""

    status: Literal["success"] = "success"
    summary: str


class AccessResponse(BaseModel):
    """Body returned when the auth guard rejects a request."""

    access: str
