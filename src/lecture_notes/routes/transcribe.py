"""Audio transcription endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.concurrency import run_in_threadpool
from starlette.datastructures import FormData, UploadFile

from lecture_notes.dependencies import (
    ActiveUserDep,
    get_transcription_handler,
    require_active_user,
)
from lecture_notes.exceptions import ScratchFileError, TranscriptionError
from lecture_notes.handlers import TranscriptionHandler
from lecture_notes.logging import setup_logging
from lecture_notes.response_models import TranscriptResponse

logger = setup_logging()

router = APIRouter(tags=["transcription"], dependencies=[Depends(require_active_user)])

HandlerDep = Annotated[TranscriptionHandler, Depends(get_transcription_handler)]

UPLOAD_FIELD = "uploadfile"


@router.post("/transcribe", response_model=TranscriptResponse)
async def transcribe(
    request: Request,
    user: ActiveUserDep,
    handler: HandlerDep,
) -> TranscriptResponse:
    """
    Transcribes an uploaded audio file.

    The file must be sent as multipart form data in the ``uploadfile`` field.
    The form is parsed only after the session has been checked.
    """
    logger.info("Received request", extra={"user_id": user.id})

    try:
        form = await request.form()
    except Exception as e:
        logger.error("Error parsing form", extra={"user_id": user.id, "error": str(e)})
        raise HTTPException(
            status_code=400, detail="There was an error parsing the body"
        ) from e

    try:
        transcript = await _transcribe_upload(form, handler)
    finally:
        await form.close()

    return TranscriptResponse(transcript=transcript)


async def _transcribe_upload(form: FormData, handler: TranscriptionHandler) -> str:
    uploadfile = form.get(UPLOAD_FIELD)
    if not isinstance(uploadfile, UploadFile):
        logger.error("Error getting file")
        raise HTTPException(status_code=400, detail=f"no such file: {UPLOAD_FIELD}")

    try:
        return await run_in_threadpool(
            handler.process,
            uploadfile.file,
            uploadfile.filename or "",
            uploadfile.size,
        )
    except ScratchFileError as e:
        raise HTTPException(status_code=500, detail=str(e))
    except TranscriptionError as e:
        logger.error("Error sending file to AssemblyAI", extra={"error": str(e)})
        raise HTTPException(status_code=500, detail=str(e))
