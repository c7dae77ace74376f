"""Ordered transcription of one or many audio parts."""

from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from speech_recap_common.logging import setup_logging

from domain.models import AudioAsset, Segment
from infrastructure.interfaces import TranscriptionService

logger = setup_logging()

LANGUAGE_CODES = {
    "english": "en",
    "french": "fr",
}
DEFAULT_LANGUAGE_CODE = "en"


def language_code(language: str) -> str:
    """Maps a language selector to the provider's code, defaulting to English."""
    return LANGUAGE_CODES.get(language.strip().lower(), DEFAULT_LANGUAGE_CODE)


def join_fragments(fragments: Sequence[str]) -> str:
    return " ".join(fragments)


class TranscriptAggregator:
    """Transcribes parts in window order and stitches the results together."""

    def __init__(self, transcription_service: TranscriptionService, max_workers: int = 1):
        self._transcription_service = transcription_service
        self._max_workers = max(1, max_workers)

    def transcribe_one(self, asset: AudioAsset, language: str) -> str:
        """Transcribes a single asset within the provider limit."""
        return self._transcription_service.transcribe(asset, language_code(language))

    def transcribe_all(self, segments: Sequence[Segment], language: str) -> str:
        """
        Transcribes every segment and joins the fragments with single spaces.

        Fragments are always assembled by window index, even when several
        calls run at once. The first failing call aborts the whole batch;
        nothing partial is returned.

        Raises:
            TranscriptionError: If any segment fails to transcribe.
        """
        code = language_code(language)
        ordered = sorted(segments, key=lambda s: s.index)

        if self._max_workers == 1 or len(ordered) < 2:
            fragments = [self._transcribe_part(s, code, len(ordered)) for s in ordered]
        else:
            fragments = self._transcribe_concurrently(ordered, code)

        transcript = join_fragments(fragments)
        logger.info(
            "Transcriptions combined",
            extra={"part_count": len(ordered), "transcript_length": len(transcript)},
        )
        return transcript

    def _transcribe_concurrently(self, segments: list[Segment], code: str) -> list[str]:
        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            futures = [
                executor.submit(self._transcribe_part, s, code, len(segments))
                for s in segments
            ]
            try:
                return [future.result() for future in futures]
            except Exception:
                for future in futures:
                    future.cancel()
                raise

    def _transcribe_part(self, segment: Segment, code: str, part_count: int) -> str:
        logger.info(
            "Transcribing part",
            extra={"part": segment.index + 1, "part_count": part_count},
        )
        return self._transcription_service.transcribe(segment.asset, code)
