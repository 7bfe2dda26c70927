"""Abstract interfaces for external provider dependencies."""

from .identity_provider import IdentityProvider
from .summarization_service import SummarizationService
from .transcription_service import TranscriptionService

__all__ = ["IdentityProvider", "SummarizationService", "TranscriptionService"]
