"""Abstract interface for media duration inspection."""

from abc import ABC, abstractmethod
from pathlib import Path


class DurationProber(ABC):
    """Abstract base class for media inspection backends."""

    @abstractmethod
    def probe(self, source_path: Path) -> float:
        """
        Returns the exact duration of an audio file.

        Args:
            source_path: Path to the materialized audio file.

        Returns:
            Duration in seconds.

        Raises:
            ProbeUnavailableError: If the inspection backend cannot be run.
            ProbeFailedError: If the backend rejects the file.
        """
        pass
