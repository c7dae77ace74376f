"""Part-count arithmetic for splitting oversized audio."""

import math

from speech_recap_common.logging import setup_logging

logger = setup_logging()

# At 128kbps an encoded minute is roughly 1MB, so 24 minutes stays under 25MB.
MAX_MINUTES_PER_PART = 24
MIN_PARTS = 2


class PartPlanner:
    """Decides how many parts an audio file must be split into."""

    def __init__(
        self,
        max_minutes_per_part: int = MAX_MINUTES_PER_PART,
        min_parts: int = MIN_PARTS,
    ):
        self._max_minutes_per_part = max_minutes_per_part
        self._min_parts = min_parts

    def plan_parts(self, duration_seconds: float) -> int:
        """
        Returns the number of parts needed for the given duration.

        Args:
            duration_seconds: Exact audio duration in seconds.

        Returns:
            ``ceil(minutes / max_minutes_per_part)``, never below ``min_parts``.

        Raises:
            ValueError: If the duration is negative.
        """
        if duration_seconds < 0:
            raise ValueError(f"Duration must be non-negative, got {duration_seconds}")

        total_minutes = duration_seconds / 60
        required_parts = math.ceil(total_minutes / self._max_minutes_per_part)
        part_count = max(required_parts, self._min_parts)

        logger.info(
            "Parts planned",
            extra={
                "duration_minutes": round(total_minutes, 2),
                "part_count": part_count,
            },
        )
        return part_count
