"""Infrastructure layer exports."""

from .ffmpeg_transcoder import FFmpegTranscoder
from .ffprobe_prober import FFprobeDurationProber
from .gemini_llm import GeminiLLMService
from .openai_transcriber import OpenAITranscriber

__all__ = [
    "FFmpegTranscoder",
    "FFprobeDurationProber",
    "GeminiLLMService",
    "OpenAITranscriber",
]
