"""Abstract interface for LLM service operations."""

from abc import ABC, abstractmethod

from domain.models import SummaryResult


class LLMService(ABC):
    """Abstract base class for LLM backends."""

    @abstractmethod
    def summarize(self, transcript: str, system_prompt: str) -> SummaryResult:
        """
        Summarizes a transcript and extracts key points.

        Args:
            transcript: The full transcript text.
            system_prompt: Instruction text from the prompt builder.

        Returns:
            SummaryResult with summary and key points.

        Raises:
            SummarizationError: If the LLM call fails.
        """
        pass
