"""Handler for summarizing lecture transcripts."""

from lecture_notes.domain import build_summary_prompt, strip_control_characters
from lecture_notes.interfaces import SummarizationService
from lecture_notes.logging import setup_logging

logger = setup_logging()


class SummaryHandler:
    """Builds the summary prompt, calls the LLM and cleans its reply."""

    def __init__(self, summarization_service: SummarizationService):
        self._summarization_service = summarization_service

    def process(self, transcript: str) -> str:
        """
        Returns a Markdown summary of the transcript.

        Raises:
            SummarizationError: If the completion call fails.
        """
        summary = self._summarization_service.summarize(build_summary_prompt(transcript))
        summary = strip_control_characters(summary)
        logger.info("Summary generated", extra={"characters": len(summary)})
        return summary
