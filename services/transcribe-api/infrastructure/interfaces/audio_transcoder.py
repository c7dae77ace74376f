"""Abstract interface for audio re-encoding."""

from abc import ABC, abstractmethod
from pathlib import Path


class AudioTranscoder(ABC):
    """Abstract base class for audio encode/trim backends."""

    @property
    @abstractmethod
    def output_suffix(self) -> str:
        """File suffix of the produced container, e.g. ``.mp3``."""

    @property
    @abstractmethod
    def output_media_type(self) -> str:
        """MIME type of the produced container."""

    @abstractmethod
    def encode(
        self,
        source_path: Path,
        output_path: Path,
        start_seconds: float = 0.0,
        duration_seconds: float | None = None,
    ) -> None:
        """
        Re-encodes a time range of the source into ``output_path``.

        Args:
            source_path: Input audio file.
            output_path: Destination file, overwritten if present.
            start_seconds: Offset of the range start.
            duration_seconds: Range length, or None to read to the end.

        Raises:
            TranscoderError: If encoding fails.
        """
