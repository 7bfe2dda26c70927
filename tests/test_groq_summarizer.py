import json

import httpx
import pytest

from lecture_notes.exceptions import EmptyCompletionError, SummarizationError
from lecture_notes.infrastructure import GroqSummarizer
from lecture_notes.infrastructure.groq_summarizer import build_groq_client

BASE_URL = "https://api.groq.com/openai/v1"


def _summarizer(handler):
    client = httpx.Client(
        base_url=BASE_URL,
        headers={"Authorization": "Bearer groq-test-key"},
        transport=httpx.MockTransport(handler),
    )
    return GroqSummarizer(client, "llama-3.3-70b-versatile")


def _completion(*contents):
    return {
        "id": "chatcmpl-1",
        "choices": [
            {"index": i, "message": {"role": "assistant", "content": c}}
            for i, c in enumerate(contents)
        ],
    }


def test_posts_single_user_message_and_returns_first_choice():
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(200, json=_completion("# Summary\n- calculus", "other"))

    result = _summarizer(handler).summarize("prompt text")

    assert result == "# Summary\n- calculus"
    assert len(requests) == 1
    request = requests[0]
    assert request.method == "POST"
    assert str(request.url) == f"{BASE_URL}/chat/completions"
    assert request.headers["Authorization"] == "Bearer groq-test-key"
    assert json.loads(request.content) == {
        "model": "llama-3.3-70b-versatile",
        "messages": [{"role": "user", "content": "prompt text"}],
    }


def test_non_200_status_embeds_code_and_body():
    def handler(request):
        return httpx.Response(429, text="rate limit exceeded")

    with pytest.raises(SummarizationError) as exc_info:
        _summarizer(handler).summarize("prompt")

    assert str(exc_info.value) == "unexpected status code: 429, rate limit exceeded"


def test_zero_choices_is_a_distinct_error():
    def handler(request):
        return httpx.Response(200, json={"choices": []})

    with pytest.raises(EmptyCompletionError, match="no response from AI"):
        _summarizer(handler).summarize("prompt")


def test_unparseable_body_is_a_summarization_error():
    def handler(request):
        return httpx.Response(200, text="<html>gateway</html>")

    with pytest.raises(SummarizationError):
        _summarizer(handler).summarize("prompt")


def test_transport_failure_is_a_summarization_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(SummarizationError) as exc_info:
        _summarizer(handler).summarize("prompt")

    assert isinstance(exc_info.value.cause, httpx.ConnectError)


def test_null_content_becomes_empty_string():
    def handler(request):
        return httpx.Response(200, json=_completion(None))

    assert _summarizer(handler).summarize("prompt") == ""


def test_build_groq_client_sets_auth_and_timeout():
    client = build_groq_client("secret", BASE_URL, 45.0)

    assert client.headers["Authorization"] == "Bearer secret"
    assert str(client.base_url) == f"{BASE_URL}/"
    assert client.timeout.read == 45.0
    client.close()
