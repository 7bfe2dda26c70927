"""Concrete implementations of provider interfaces."""

from .assemblyai_transcriber import AssemblyAITranscriber
from .clerk_identity import ClerkIdentityProvider
from .groq_summarizer import GroqSummarizer

__all__ = ["AssemblyAITranscriber", "ClerkIdentityProvider", "GroqSummarizer"]
