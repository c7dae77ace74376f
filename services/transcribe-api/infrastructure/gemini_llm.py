"""Gemini LLM service implementation."""

from google import genai
from speech_recap_common.logging import setup_logging

from domain.models import SummaryResult
from exceptions import SummarizationError

from .interfaces import LLMService

logger = setup_logging()


class GeminiLLMService(LLMService):
    """LLM service implementation using Google Gemini."""

    def __init__(self, client: genai.Client, model_name: str):
        self._client = client
        self._model_name = model_name

    def summarize(self, transcript: str, system_prompt: str) -> SummaryResult:
        """
        Summarizes a transcript using Gemini structured output.

        Args:
            transcript: The full transcript text.
            system_prompt: Instruction text from the prompt builder.

        Returns:
            SummaryResult with summary and key points.

        Raises:
            SummarizationError: If the Gemini API call fails.
        """
        try:
            response = self._client.models.generate_content(
                model=self._model_name,
                contents=(
                    "Please summarize this transcription and extract the key "
                    f"points:\n\n{transcript}"
                ),
                config={
                    "response_mime_type": "application/json",
                    "response_schema": SummaryResult,
                    "system_instruction": system_prompt,
                },
            )
            if not response.text:
                raise SummarizationError("Gemini returned empty response")
            result = SummaryResult.model_validate_json(response.text)
        except SummarizationError:
            logger.exception("Gemini API call failed")
            raise
        except Exception as e:
            logger.exception("Gemini API call failed")
            raise SummarizationError(f"Gemini summarization failed: {e}", cause=e) from e

        logger.info(
            "LLM summarization completed",
            extra={"key_point_count": len(result.key_points)},
        )
        return result
