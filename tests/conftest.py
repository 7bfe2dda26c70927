from typing import BinaryIO

import pytest
from fastapi.testclient import TestClient

from lecture_notes.config import (
    AppConfig,
    AssemblyAIConfig,
    ClerkConfig,
    GroqConfig,
    UploadConfig,
)
from lecture_notes.dependencies import (
    get_identity_provider,
    get_summarization_service,
    get_transcription_service,
)
from lecture_notes.domain import SessionClaims, UserProfile
from lecture_notes.interfaces import (
    IdentityProvider,
    SummarizationService,
    TranscriptionService,
)
from lecture_notes.main import create_app

VALID_TOKEN = "valid-token"
AUTH_HEADERS = {"Authorization": f"Bearer {VALID_TOKEN}"}


class FakeIdentityProvider(IdentityProvider):
    """Accepts a single bearer token and serves one user record."""

    def __init__(self):
        self.user = UserProfile(id="user_123")
        self.lookup_error: Exception | None = None
        self.lookups: list[str] = []

    def authenticate(self, request):
        if request.headers.get("Authorization") != f"Bearer {VALID_TOKEN}":
            return None
        return SessionClaims(subject=self.user.id, session_id="sess_1")

    def get_user(self, user_id: str) -> UserProfile:
        self.lookups.append(user_id)
        if self.lookup_error is not None:
            raise self.lookup_error
        return self.user


class FakeTranscriber(TranscriptionService):
    """Records what it was asked to transcribe."""

    def __init__(self):
        self.text = "hello world"
        self.error: Exception | None = None
        self.calls: list[tuple[str, bytes]] = []

    def transcribe(self, audio: BinaryIO) -> str:
        self.calls.append((audio.name, audio.read()))
        if self.error is not None:
            raise self.error
        return self.text


class FakeSummarizer(SummarizationService):
    """Returns a canned completion and records prompts."""

    def __init__(self):
        self.reply = "# Summary\n- calculus"
        self.error: Exception | None = None
        self.prompts: list[str] = []

    def summarize(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def scratch_dir(tmp_path):
    path = tmp_path / "scratch"
    path.mkdir()
    return path


@pytest.fixture
def config(scratch_dir):
    return AppConfig(
        assemblyai=AssemblyAIConfig(api_key="assembly-test-key"),
        groq=GroqConfig(api_key="groq-test-key"),
        clerk=ClerkConfig(secret_key="sk_test_clerk"),
        upload=UploadConfig(scratch_dir=scratch_dir),
    )


@pytest.fixture
def identity():
    return FakeIdentityProvider()


@pytest.fixture
def transcriber():
    return FakeTranscriber()


@pytest.fixture
def summarizer():
    return FakeSummarizer()


@pytest.fixture
def app(config, identity, transcriber, summarizer):
    app = create_app(config)
    app.dependency_overrides[get_identity_provider] = lambda: identity
    app.dependency_overrides[get_transcription_service] = lambda: transcriber
    app.dependency_overrides[get_summarization_service] = lambda: summarizer
    return app


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def auth_headers():
    return dict(AUTH_HEADERS)
