"""Upload ceiling check for encoded audio."""

from collections.abc import Sequence

from speech_recap_common.logging import setup_logging

from config import SIZE_CEILING_BYTES
from domain.models import AudioAsset, Segment
from exceptions import SegmentTooLargeError

logger = setup_logging()


class SizeGuard:
    """Rejects any audio payload the transcription provider would refuse."""

    def __init__(self, limit_bytes: int = SIZE_CEILING_BYTES):
        self._limit = limit_bytes

    @property
    def limit(self) -> int:
        return self._limit

    def fits(self, size: int) -> bool:
        return size <= self._limit

    def verify(self, parts: Sequence[Segment | AudioAsset], part_count: int) -> None:
        """
        Checks every part against the ceiling before anything is transcribed.

        Args:
            parts: Segments or assets in window order.
            part_count: Number of parts the audio was split into, reported
                back so the caller can suggest a larger count.

        Raises:
            SegmentTooLargeError: For the first part above the ceiling.
        """
        for index, part in enumerate(parts):
            if not self.fits(part.size):
                logger.error(
                    "Part exceeds upload limit",
                    extra={
                        "part": index + 1,
                        "size": part.size,
                        "limit": self._limit,
                        "part_count": part_count,
                    },
                )
                raise SegmentTooLargeError(index, part.size, self._limit, part_count)

        logger.info(
            "All parts within upload limit",
            extra={"part_count": part_count, "limit": self._limit},
        )
