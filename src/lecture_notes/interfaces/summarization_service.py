"""Abstract interface for LLM summarization."""

from abc import ABC, abstractmethod


class SummarizationService(ABC):
    """Abstract base class for chat-completion backends."""

    @abstractmethod
    def summarize(self, prompt: str) -> str:
        """
        Sends a single user prompt and returns the model's reply.

        Args:
            prompt: Instruction prefix followed by the transcript text.

        Returns:
            Content of the first completion choice.

        Raises:
            SummarizationError: If the call fails or returns an error status.
            EmptyCompletionError: If the response contains no choices.
        """
