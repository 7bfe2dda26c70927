"""FastAPI dependency injection configuration."""

from typing import Annotated

import assemblyai as aai
from clerk_backend_api import Clerk
from fastapi import Depends, FastAPI, Request

from lecture_notes.config import AppConfig
from lecture_notes.domain import UserProfile
from lecture_notes.exceptions import AccessDeniedError, UserLookupError
from lecture_notes.handlers import SummaryHandler, TranscriptionHandler
from lecture_notes.infrastructure import (
    AssemblyAITranscriber,
    ClerkIdentityProvider,
    GroqSummarizer,
)
from lecture_notes.infrastructure.groq_summarizer import build_groq_client
from lecture_notes.interfaces import (
    IdentityProvider,
    SummarizationService,
    TranscriptionService,
)
from lecture_notes.logging import setup_logging

logger = setup_logging()


def configure_services(app: FastAPI, config: AppConfig) -> None:
    """Builds the provider clients once and attaches them to the application."""
    app.state.config = config

    # AssemblyAI reads its key from process-wide settings
    aai.settings.api_key = config.assemblyai.api_key
    _aai_config = aai.TranscriptionConfig(
        punctuate=config.assemblyai.punctuate,
        format_text=config.assemblyai.format_text,
    )
    app.state.transcription_service = AssemblyAITranscriber(
        aai.Transcriber(config=_aai_config)
    )

    app.state.groq_client = build_groq_client(
        config.groq.api_key, config.groq.base_url, config.groq.timeout_seconds
    )
    app.state.summarization_service = GroqSummarizer(
        app.state.groq_client, config.groq.model_name
    )

    app.state.identity_provider = ClerkIdentityProvider(
        Clerk(bearer_auth=config.clerk.secret_key),
        config.clerk.authorized_parties,
    )

    logger.info(
        "Services configured",
        extra={"model": config.groq.model_name, "base_url": config.groq.base_url},
    )


def get_config(request: Request) -> AppConfig:
    """Returns the configuration the application was created with."""
    return request.app.state.config


def get_identity_provider(request: Request) -> IdentityProvider:
    """Returns the configured identity provider."""
    return request.app.state.identity_provider


def get_transcription_service(request: Request) -> TranscriptionService:
    """Returns the configured transcription service."""
    return request.app.state.transcription_service


def get_summarization_service(request: Request) -> SummarizationService:
    """Returns the configured summarization service."""
    return request.app.state.summarization_service


ConfigDep = Annotated[AppConfig, Depends(get_config)]
IdentityDep = Annotated[IdentityProvider, Depends(get_identity_provider)]
TranscriptionServiceDep = Annotated[
    TranscriptionService, Depends(get_transcription_service)
]
SummarizationServiceDep = Annotated[
    SummarizationService, Depends(get_summarization_service)
]


def get_transcription_handler(
    service: TranscriptionServiceDep, config: ConfigDep
) -> TranscriptionHandler:
    """Returns a transcription handler writing scratch files to the configured dir."""
    return TranscriptionHandler(service, config.upload.scratch_dir)


def get_summary_handler(service: SummarizationServiceDep) -> SummaryHandler:
    """Returns a summary handler bound to the configured LLM."""
    return SummaryHandler(service)


def require_active_user(request: Request, identity: IdentityDep) -> UserProfile:
    """
    Resolves the requesting user and rejects anyone who may not use the API.

    Raises:
        AccessDeniedError: 401 without a valid session, 500 if the user
            lookup fails, 403 if the user is banned.
    """
    claims = identity.authenticate(request)
    if claims is None:
        logger.error("No session claims found")
        logger.info("Request headers", extra={"headers": list(request.headers.keys())})
        raise AccessDeniedError(401, "unauthorized")

    try:
        user = identity.get_user(claims.subject)
    except UserLookupError as e:
        logger.error("Error getting user", extra={"error": str(e)})
        raise AccessDeniedError(500, "internal server error") from e

    logger.info("User resolved", extra={"user_id": user.id})

    if user.banned:
        logger.info("Banned user rejected", extra={"user_id": user.id})
        raise AccessDeniedError(403, "forbidden")

    return user


ActiveUserDep = Annotated[UserProfile, Depends(require_active_user)]
