"""Application configuration loaded from environment variables."""

import os

from pydantic import BaseModel

SIZE_CEILING_BYTES = 25 * 1024 * 1024


class FFmpegConfig(BaseModel, frozen=True):
    """Locations and encoding settings for the ffmpeg toolchain."""

    ffmpeg_path: str = "ffmpeg"
    ffprobe_path: str = "ffprobe"
    timeout_seconds: float = 600.0
    audio_bitrate: str = "128k"
    audio_codec: str = "libmp3lame"
    container_format: str = "mp3"


class OpenAIConfig(BaseModel, frozen=True):
    """OpenAI transcription API configuration."""

    api_key: str
    transcription_model: str = "whisper-1"
    timeout_seconds: float = 300.0


class GeminiConfig(BaseModel, frozen=True):
    """Gemini summarization configuration."""

    api_key: str
    model_name: str = "gemini-2.5-flash"
    timeout_seconds: float = 120.0


class PipelineConfig(BaseModel, frozen=True):
    """Segmentation limits for oversized uploads."""

    size_ceiling_bytes: int = SIZE_CEILING_BYTES
    max_minutes_per_part: int = 24
    min_parts: int = 2
    transcription_concurrency: int = 1


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    ffmpeg: FFmpegConfig
    openai: OpenAIConfig
    gemini: GeminiConfig
    pipeline: PipelineConfig = PipelineConfig()


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        ffmpeg=FFmpegConfig(
            ffmpeg_path=os.getenv("FFMPEG_PATH", "ffmpeg"),
            ffprobe_path=os.getenv("FFPROBE_PATH", "ffprobe"),
            timeout_seconds=float(os.getenv("FFMPEG_TIMEOUT_SECONDS", "600")),
        ),
        openai=OpenAIConfig(
            api_key=os.getenv("OPENAI_API_KEY", ""),
            transcription_model=os.getenv("OPENAI_TRANSCRIPTION_MODEL", "whisper-1"),
            timeout_seconds=float(os.getenv("OPENAI_TIMEOUT_SECONDS", "300")),
        ),
        gemini=GeminiConfig(
            api_key=os.getenv("GEMINI_API_KEY", ""),
            model_name=os.getenv("GEMINI_MODEL_NAME", "gemini-2.5-flash"),
            timeout_seconds=float(os.getenv("GEMINI_TIMEOUT_SECONDS", "120")),
        ),
        pipeline=PipelineConfig(
            transcription_concurrency=int(
                os.getenv("TRANSCRIPTION_CONCURRENCY", "1")
            ),
        ),
    )
