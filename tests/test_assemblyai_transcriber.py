import io
from types import SimpleNamespace

import assemblyai as aai
import pytest

from lecture_notes.exceptions import TranscriptionError
from lecture_notes.infrastructure import AssemblyAITranscriber


class StubTranscriber:
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.received = []

    def transcribe(self, data):
        self.received.append(data)
        if self.error is not None:
            raise self.error
        return self.result


def _transcript(status, text=None, error=None):
    return SimpleNamespace(id="tr_1", status=status, text=text, error=error)


def test_returns_transcript_text_for_completed_job():
    stub = StubTranscriber(_transcript(aai.TranscriptStatus.completed, "hello world"))
    audio = io.BytesIO(b"RIFF")

    assert AssemblyAITranscriber(stub).transcribe(audio) == "hello world"
    assert stub.received == [audio]


def test_error_status_raises_with_provider_message():
    stub = StubTranscriber(
        _transcript(aai.TranscriptStatus.error, error="File does not appear to contain audio")
    )

    with pytest.raises(TranscriptionError, match="File does not appear to contain audio"):
        AssemblyAITranscriber(stub).transcribe(io.BytesIO(b""))


def test_sdk_exception_is_wrapped():
    stub = StubTranscriber(error=RuntimeError("upload failed"))

    with pytest.raises(TranscriptionError) as exc_info:
        AssemblyAITranscriber(stub).transcribe(io.BytesIO(b"RIFF"))

    assert "upload failed" in str(exc_info.value)
    assert isinstance(exc_info.value.cause, RuntimeError)


def test_completed_job_without_text_returns_empty_string():
    stub = StubTranscriber(_transcript(aai.TranscriptStatus.completed, None))

    assert AssemblyAITranscriber(stub).transcribe(io.BytesIO(b"RIFF")) == ""
