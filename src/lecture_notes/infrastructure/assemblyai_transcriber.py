"""AssemblyAI implementation of the TranscriptionService interface."""

from typing import BinaryIO

import assemblyai as aai

from lecture_notes.exceptions import TranscriptionError
from lecture_notes.interfaces import TranscriptionService
from lecture_notes.logging import setup_logging

logger = setup_logging()


class AssemblyAITranscriber(TranscriptionService):
    """Handles audio transcription using AssemblyAI."""

    def __init__(self, transcriber: aai.Transcriber):
        self._transcriber = transcriber

    def transcribe(self, audio: BinaryIO) -> str:
        """
        Uploads the audio stream to AssemblyAI and waits for the transcript.

        The SDK handles the upload and polls until the job completes.
        """
        try:
            transcript = self._transcriber.transcribe(audio)
        except Exception as e:
            logger.exception("AssemblyAI transcription failed")
            raise TranscriptionError(f"Error transcribing file: {e}", e) from e

        if transcript.status == aai.TranscriptStatus.error:
            logger.error(
                "AssemblyAI returned an error status",
                extra={"transcript_id": transcript.id, "error": transcript.error},
            )
            raise TranscriptionError(transcript.error or "Transcription failed")

        text = transcript.text or ""
        logger.info(
            "Audio transcription successful",
            extra={"transcript_id": transcript.id, "characters": len(text)},
        )
        return text
