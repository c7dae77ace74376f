"""FastAPI dependency injection configuration."""

from google import genai
from google.genai import types
from openai import OpenAI
from speech_recap_common.logging import setup_logging

from config import AppConfig, load_config
from domain import PartPlanner, SizeGuard
from domain.prefix_trimmer import PrefixTrimmer
from domain.segment_cutter import SegmentCutter
from domain.transcript_aggregator import TranscriptAggregator
from handlers import RecapHandler
from infrastructure import (
    FFmpegTranscoder,
    FFprobeDurationProber,
    GeminiLLMService,
    OpenAITranscriber,
)

logger = setup_logging()

_config = load_config()

# ffmpeg toolchain
_prober = FFprobeDurationProber(
    _config.ffmpeg.ffprobe_path, _config.ffmpeg.timeout_seconds
)
_transcoder = FFmpegTranscoder(_config.ffmpeg)
if not _prober.is_available():
    logger.warning(
        "ffprobe not found, split mode will fail",
        extra={"ffprobe_path": _config.ffmpeg.ffprobe_path},
    )

# OpenAI transcription
_openai_client = OpenAI(
    api_key=_config.openai.api_key,
    timeout=_config.openai.timeout_seconds,
    max_retries=0,
)
_transcriber = OpenAITranscriber(_openai_client, _config.openai.transcription_model)

# Gemini summarization
_gemini_client = genai.Client(
    api_key=_config.gemini.api_key,
    http_options=types.HttpOptions(
        timeout=int(_config.gemini.timeout_seconds * 1000)
    ),
)
_llm = GeminiLLMService(_gemini_client, _config.gemini.model_name)

# Service composition
_size_guard = SizeGuard(_config.pipeline.size_ceiling_bytes)
_handler = RecapHandler(
    prober=_prober,
    planner=PartPlanner(
        _config.pipeline.max_minutes_per_part, _config.pipeline.min_parts
    ),
    cutter=SegmentCutter(_transcoder),
    size_guard=_size_guard,
    aggregator=TranscriptAggregator(
        _transcriber, _config.pipeline.transcription_concurrency
    ),
    trimmer=PrefixTrimmer(_transcoder),
    llm=_llm,
)


def get_config() -> AppConfig:
    """Returns the loaded application configuration."""
    return _config


def get_size_guard() -> SizeGuard:
    """Returns the configured upload size guard."""
    return _size_guard


def get_handler() -> RecapHandler:
    """Returns the configured recap handler."""
    return _handler
