"""Core business logic for cutting oversized audio into parts."""

from speech_recap_common.logging import setup_logging

from domain.audio_workspace import AudioWorkspace
from domain.models import AudioAsset, Segment, Window
from exceptions import BYTES_PER_MB, EncodeFailedError, TranscoderError
from infrastructure.interfaces import AudioTranscoder

logger = setup_logging()


def plan_windows(duration_seconds: float, part_count: int) -> list[Window]:
    """
    Splits ``[0, duration]`` into ``part_count`` contiguous windows.

    All windows share the same length except the last, which is left
    open-ended so it always reaches the true end of the source.
    """
    if part_count < 1:
        raise ValueError(f"Part count must be at least 1, got {part_count}")
    if duration_seconds < 0:
        raise ValueError(f"Duration must be non-negative, got {duration_seconds}")

    window_length = duration_seconds / part_count
    windows = []
    for i in range(part_count):
        is_last = i == part_count - 1
        windows.append(
            Window(
                index=i,
                start_seconds=i * window_length,
                length_seconds=None if is_last else window_length,
            )
        )
    return windows


class SegmentCutter:
    """Re-encodes each window of an audio file into its own segment."""

    def __init__(self, transcoder: AudioTranscoder):
        self._transcoder = transcoder

    def cut(
        self, workspace: AudioWorkspace, duration_seconds: float, part_count: int
    ) -> list[Segment]:
        """
        Produces one encoded segment per window, in window order.

        Args:
            workspace: Open workspace holding the source file.
            duration_seconds: Exact source duration from the prober.
            part_count: Number of parts from the planner.

        Returns:
            Segments ordered by window index.

        Raises:
            EncodeFailedError: If any window fails to encode. Files already
                written stay in the workspace and go away with it.
        """
        windows = plan_windows(duration_seconds, part_count)
        logger.info(
            "Splitting audio",
            extra={
                "part_count": part_count,
                "part_minutes": round(duration_seconds / part_count / 60, 2),
            },
        )

        segments = []
        for window in windows:
            segments.append(self._encode_window(workspace, window, part_count))
        return segments

    def _encode_window(
        self, workspace: AudioWorkspace, window: Window, part_count: int
    ) -> Segment:
        name = f"part{window.index + 1}{self._transcoder.output_suffix}"
        output_path = workspace.part_path(name)

        logger.info(
            "Creating part",
            extra={
                "part": window.index + 1,
                "part_count": part_count,
                "start_minutes": round(window.start_seconds / 60, 2),
            },
        )
        try:
            self._transcoder.encode(
                workspace.source_path,
                output_path,
                start_seconds=window.start_seconds,
                duration_seconds=window.length_seconds,
            )
            data = workspace.read(output_path)
        except (TranscoderError, OSError) as e:
            logger.exception("Part encoding failed", extra={"part": window.index + 1})
            raise EncodeFailedError(window.index, e) from e

        segment = Segment(
            window=window,
            asset=AudioAsset(
                data=data,
                name=name,
                media_type=self._transcoder.output_media_type,
            ),
        )
        logger.info(
            "Part created",
            extra={
                "part": window.index + 1,
                "size_mb": round(segment.size / BYTES_PER_MB, 2),
            },
        )
        return segment
