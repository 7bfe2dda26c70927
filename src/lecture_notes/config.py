"""Application configuration loaded from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from lecture_notes.exceptions import ConfigurationError


class AssemblyAIConfig(BaseModel, frozen=True):
    """AssemblyAI API configuration."""

    api_key: str = Field(min_length=1)
    punctuate: bool = True
    format_text: bool = True


class GroqConfig(BaseModel, frozen=True):
    """Groq chat-completion API configuration."""

    api_key: str = Field(min_length=1)
    model_name: str = "llama-3.3-70b-versatile"
    base_url: str = "https://api.groq.com/openai/v1"
    timeout_seconds: float = 120.0


class ClerkConfig(BaseModel, frozen=True):
    """Clerk identity provider configuration."""

    secret_key: str = Field(min_length=1)
    authorized_parties: list[str] = []


class UploadConfig(BaseModel, frozen=True):
    """Scratch file configuration for audio uploads."""

    scratch_dir: Path | None = None


class ServerConfig(BaseModel, frozen=True):
    """HTTP server bind configuration."""

    host: str = "0.0.0.0"
    port: int = 8080


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    assemblyai: AssemblyAIConfig
    groq: GroqConfig
    clerk: ClerkConfig
    upload: UploadConfig = UploadConfig()
    server: ServerConfig = ServerConfig()


def _require(name: str) -> str:
    value = os.getenv(name, "")
    if not value:
        raise ConfigurationError(name)
    return value


def _number(name: str, default: str, convert):
    value = os.getenv(name, default)
    try:
        return convert(value)
    except ValueError as e:
        raise ConfigurationError(name, f"must be a number, got '{value}'") from e


def _split_list(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def load_config() -> AppConfig:
    """
    Loads configuration from environment variables.

    A ``.env`` file in the working directory is read first; variables already
    present in the environment take precedence.

    Raises:
        ConfigurationError: If a required API key is missing or empty, or a
            numeric setting cannot be parsed.
    """
    load_dotenv()

    scratch_dir = os.getenv("SCRATCH_DIR")

    return AppConfig(
        assemblyai=AssemblyAIConfig(
            api_key=_require("ASSEMBLY_API_KEY"),
        ),
        groq=GroqConfig(
            api_key=_require("GROQ_API_KEY"),
            model_name=os.getenv("GROQ_MODEL", "llama-3.3-70b-versatile"),
            base_url=os.getenv("GROQ_BASE_URL", "https://api.groq.com/openai/v1"),
            timeout_seconds=_number("GROQ_TIMEOUT_SECONDS", "120", float),
        ),
        clerk=ClerkConfig(
            secret_key=_require("CLERK_API_KEY"),
            authorized_parties=_split_list(os.getenv("CLERK_AUTHORIZED_PARTIES", "")),
        ),
        upload=UploadConfig(
            scratch_dir=Path(scratch_dir) if scratch_dir else None,
        ),
        server=ServerConfig(
            host=os.getenv("HOST", "0.0.0.0"),
            port=_number("PORT", "8080", int),
        ),
    )
