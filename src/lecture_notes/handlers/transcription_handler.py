"""Handler for turning an uploaded audio file into a transcript."""

import shutil
import tempfile
from pathlib import Path
from typing import BinaryIO

from lecture_notes.exceptions import ScratchFileError
from lecture_notes.interfaces import TranscriptionService
from lecture_notes.logging import setup_logging

logger = setup_logging()


class TranscriptionHandler:
    """Copies an upload to a scratch file and transcribes it."""

    def __init__(
        self,
        transcription_service: TranscriptionService,
        scratch_dir: Path | None = None,
    ):
        self._transcription_service = transcription_service
        self._scratch_dir = scratch_dir

    def process(self, upload: BinaryIO, file_name: str, size: int | None) -> str:
        """
        Stores the upload in a temporary file and returns its transcript.

        The temporary file is removed when this method returns or raises.

        Args:
            upload: Readable stream with the uploaded audio.
            file_name: Client-supplied file name, used for logging only.
            size: Declared upload size in bytes, if known.

        Returns:
            The transcript text.

        Raises:
            ScratchFileError: If the temporary file cannot be created or written.
            TranscriptionError: If transcription fails.
        """
        logger.info("Got file", extra={"file_name": file_name, "size": size})

        try:
            scratch = tempfile.NamedTemporaryFile(
                prefix="upload-", suffix=".tmp", dir=self._scratch_dir
            )
        except OSError as e:
            logger.exception("Error creating temporary file")
            raise ScratchFileError(file_name, e) from e

        with scratch:
            logger.info("Created temporary file", extra={"path": scratch.name})

            try:
                shutil.copyfileobj(upload, scratch)
                written = scratch.tell()
                scratch.flush()
                scratch.seek(0)
            except OSError as e:
                logger.exception("Error copying file", extra={"path": scratch.name})
                raise ScratchFileError(file_name, e) from e

            logger.info(
                "Copied upload to temporary file",
                extra={"path": scratch.name, "bytes": written},
            )

            return self._transcription_service.transcribe(scratch)
