"""Request models for the lecture-notes API."""

from pydantic import BaseModel


class SummarizeRequest(BaseModel):
    """Body of a summarize request."""

    text: str = ""
