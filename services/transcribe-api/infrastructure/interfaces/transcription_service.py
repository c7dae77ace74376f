"""Abstract interface for transcription service operations."""

from abc import ABC, abstractmethod

from domain.models import AudioAsset


class TranscriptionService(ABC):
    """Abstract base class for audio transcription backends."""

    @abstractmethod
    def transcribe(self, asset: AudioAsset, language_code: str) -> str:
        """
        Transcribes one audio payload.

        Args:
            asset: Audio within the provider's size limit.
            language_code: ISO-639-1 language hint, e.g. ``en``.

        Returns:
            The transcript text.

        Raises:
            TranscriptionError: If transcription fails.
        """
        pass
