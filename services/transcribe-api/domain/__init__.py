"""Domain layer exports."""

from .models import (
    AudioAsset,
    DirectMode,
    ProcessingMode,
    RecapRequest,
    RecapResult,
    Segment,
    SplitMode,
    SummaryConfig,
    SummaryResult,
    TrimMode,
    Window,
)
from .part_planner import PartPlanner
from .processing_mode import resolve_processing_mode
from .prompt_builder import build_summary_prompt
from .size_guard import SizeGuard

__all__ = [
    "AudioAsset",
    "DirectMode",
    "ProcessingMode",
    "RecapRequest",
    "RecapResult",
    "Segment",
    "SplitMode",
    "SummaryConfig",
    "SummaryResult",
    "TrimMode",
    "Window",
    "PartPlanner",
    "resolve_processing_mode",
    "build_summary_prompt",
    "SizeGuard",
]
