"""Abstract interface for transcription service operations."""

from abc import ABC, abstractmethod
from typing import BinaryIO


class TranscriptionService(ABC):
    """Abstract base class for audio transcription backends."""

    @abstractmethod
    def transcribe(self, audio: BinaryIO) -> str:
        """
        Transcribes an audio file and returns its text.

        Blocks until the provider has finished the transcription job.

        Args:
            audio: Readable binary handle positioned at the start of the audio.

        Returns:
            The transcript text.

        Raises:
            TranscriptionError: If transcription fails.
        """
