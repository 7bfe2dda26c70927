"""Groq chat-completion implementation of the SummarizationService interface."""

import httpx
from pydantic import BaseModel, ValidationError

from lecture_notes.exceptions import EmptyCompletionError, SummarizationError
from lecture_notes.interfaces import SummarizationService
from lecture_notes.logging import setup_logging

logger = setup_logging()


class _Message(BaseModel):
    content: str | None = None


class _Choice(BaseModel):
    message: _Message


class _CompletionResponse(BaseModel):
    choices: list[_Choice] = []


class GroqSummarizer(SummarizationService):
    """Summarizes transcripts through Groq's OpenAI-compatible chat endpoint."""

    def __init__(self, client: httpx.Client, model_name: str):
        self._client = client
        self._model_name = model_name

    def summarize(self, prompt: str) -> str:
        payload = {
            "model": self._model_name,
            "messages": [{"role": "user", "content": prompt}],
        }

        try:
            response = self._client.post("/chat/completions", json=payload)
        except httpx.HTTPError as e:
            logger.exception("Groq request failed", extra={"model": self._model_name})
            raise SummarizationError(f"request to completion API failed: {e}", e) from e

        logger.info(
            "Groq response received",
            extra={"model": self._model_name, "status_code": response.status_code},
        )

        if response.status_code != httpx.codes.OK:
            raise SummarizationError(
                f"unexpected status code: {response.status_code}, {response.text}"
            )

        try:
            completion = _CompletionResponse.model_validate_json(response.content)
        except ValidationError as e:
            logger.exception("Groq response could not be parsed")
            raise SummarizationError(f"invalid completion response: {e}", e) from e

        if not completion.choices:
            raise EmptyCompletionError()

        return completion.choices[0].message.content or ""


def build_groq_client(api_key: str, base_url: str, timeout_seconds: float) -> httpx.Client:
    """Creates the HTTP client used for every completion request."""
    return httpx.Client(
        base_url=base_url,
        headers={"Authorization": f"Bearer {api_key}"},
        timeout=timeout_seconds,
    )
