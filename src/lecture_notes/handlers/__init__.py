"""Request orchestration handlers."""

from .summary_handler import SummaryHandler
from .transcription_handler import TranscriptionHandler

__all__ = ["SummaryHandler", "TranscriptionHandler"]
