"""Domain models for the transcription and recap pipeline."""

import os
from pathlib import PureWindowsPath
from typing import Literal

from pydantic import BaseModel, Field

SummaryLength = Literal["brief", "moderate", "detailed", "comprehensive", "extensive"]


def base_file_name(name: str, default: str = "audio") -> str:
    """Drops any client-side directory from an upload name, for either separator."""
    return PureWindowsPath(name).name or default


class AudioAsset(BaseModel, frozen=True):
    """An uploaded or encoded audio payload."""

    data: bytes = Field(repr=False)
    name: str
    media_type: str

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def suffix(self) -> str:
        return os.path.splitext(self.name)[1]


class Window(BaseModel, frozen=True):
    """A time range within the source audio. No length means 'to the end'."""

    index: int
    start_seconds: float
    length_seconds: float | None = None

    @property
    def is_open_ended(self) -> bool:
        return self.length_seconds is None

    def end_seconds(self, duration: float) -> float:
        if self.length_seconds is None:
            return duration
        return self.start_seconds + self.length_seconds


class Segment(BaseModel, frozen=True):
    """One encoded slice of an oversized asset."""

    window: Window
    asset: AudioAsset

    @property
    def index(self) -> int:
        return self.window.index

    @property
    def size(self) -> int:
        return self.asset.size


class SummaryConfig(BaseModel, frozen=True):
    """User-selected options for the summarization step."""

    context: str | None = None
    summary_length: SummaryLength = "moderate"
    output_language: str = "same"


class SummaryResult(BaseModel, frozen=True):
    """Summary and key points returned by the LLM."""

    summary: str = ""
    key_points: list[str] = Field(default_factory=list)


class DirectMode(BaseModel, frozen=True):
    """Transcribe the upload as-is."""

    kind: Literal["direct"] = "direct"


class TrimMode(BaseModel, frozen=True):
    """Transcribe only the first ``minutes`` of the upload."""

    kind: Literal["trim"] = "trim"
    minutes: int


class SplitMode(BaseModel, frozen=True):
    """Split the upload into size-bounded parts and transcribe all of them."""

    kind: Literal["split"] = "split"


ProcessingMode = DirectMode | TrimMode | SplitMode


class RecapRequest(BaseModel, frozen=True):
    """A fully validated transcription request."""

    asset: AudioAsset
    language: str
    summary_config: SummaryConfig = SummaryConfig()
    mode: ProcessingMode = Field(default_factory=DirectMode, discriminator="kind")


class RecapResult(BaseModel, frozen=True):
    """Transcript plus its summary."""

    transcription: str
    summary: str
    key_points: list[str]
