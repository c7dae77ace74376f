"""Truncates audio to its opening minutes."""

import os

from speech_recap_common.logging import setup_logging

from domain.audio_workspace import AudioWorkspace
from domain.models import AudioAsset, base_file_name
from exceptions import EncodeFailedError, TranscoderError
from infrastructure.interfaces import AudioTranscoder

logger = setup_logging()


class PrefixTrimmer:
    """Keeps only the first N minutes of an upload."""

    def __init__(self, transcoder: AudioTranscoder):
        self._transcoder = transcoder

    def trim(self, workspace: AudioWorkspace, minutes: int) -> AudioAsset:
        """
        Encodes ``[0, minutes * 60)`` of the workspace source.

        Returns the original asset untouched when ``minutes`` is zero or less.

        Raises:
            EncodeFailedError: If the transcoder fails.
        """
        if minutes <= 0:
            logger.info("Trim skipped", extra={"minutes": minutes})
            return workspace.asset

        stem = os.path.splitext(base_file_name(workspace.asset.name))[0] or "audio"
        name = f"trimmed-{stem}{self._transcoder.output_suffix}"
        output_path = workspace.part_path(name)

        logger.info("Trimming audio", extra={"minutes": minutes})
        try:
            self._transcoder.encode(
                workspace.source_path,
                output_path,
                duration_seconds=minutes * 60,
            )
            data = workspace.read(output_path)
        except (TranscoderError, OSError) as e:
            logger.exception("Trim encoding failed", extra={"minutes": minutes})
            raise EncodeFailedError(0, e) from e

        logger.info("Audio trimmed", extra={"minutes": minutes, "size": len(data)})
        return AudioAsset(
            data=data,
            name=name,
            media_type=self._transcoder.output_media_type,
        )
