"""Transcript summarization endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.concurrency import run_in_threadpool
from pydantic import ValidationError

from lecture_notes.dependencies import (
    ActiveUserDep,
    get_summary_handler,
    require_active_user,
)
from lecture_notes.exceptions import SummarizationError
from lecture_notes.handlers import SummaryHandler
from lecture_notes.logging import setup_logging
from lecture_notes.request_models import SummarizeRequest
from lecture_notes.response_models import SummaryResponse

logger = setup_logging()

router = APIRouter(tags=["summarization"], dependencies=[Depends(require_active_user)])

HandlerDep = Annotated[SummaryHandler, Depends(get_summary_handler)]


@router.post("/summarize", response_model=SummaryResponse)
async def summarize(
    request: Request,
    user: ActiveUserDep,
    handler: HandlerDep,
) -> SummaryResponse:
    """
    Summarizes a lecture transcript as Markdown.

    The body is read only after the session has been checked, so requests
    without a valid session are rejected before their payload is parsed.
    """
    logger.info("Received request", extra={"user_id": user.id})

    try:
        body = SummarizeRequest.model_validate_json(await request.body())
    except ValidationError:
        logger.error("Invalid JSON body", extra={"user_id": user.id})
        raise HTTPException(status_code=400, detail="Invalid JSON body")

    if not body.text:
        logger.error("No transcript provided", extra={"user_id": user.id})
        raise HTTPException(status_code=400, detail="No transcript provided")

    try:
        summary = await run_in_threadpool(handler.process, body.text)
    except SummarizationError as e:
        logger.error("Error getting summary from AI", extra={"error": str(e)})
        raise HTTPException(status_code=500, detail=str(e))

    return SummaryResponse(summary=summary)
