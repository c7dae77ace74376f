"""Infrastructure interface exports."""

from .audio_transcoder import AudioTranscoder
from .duration_prober import DurationProber
from .llm_service import LLMService
from .transcription_service import TranscriptionService

__all__ = ["AudioTranscoder", "DurationProber", "LLMService", "TranscriptionService"]
