"""ffmpeg implementation of the AudioTranscoder interface."""

import subprocess
from pathlib import Path

from speech_recap_common.logging import setup_logging

from config import FFmpegConfig
from exceptions import TranscoderError

from .interfaces import AudioTranscoder

logger = setup_logging()

MEDIA_TYPES = {
    "mp3": "audio/mpeg",
    "wav": "audio/wav",
    "ogg": "audio/ogg",
    "flac": "audio/flac",
}


def stderr_tail(error: Exception, limit: int = 500) -> str:
    """Last part of a failed process's stderr, for log context."""
    stderr = getattr(error, "stderr", None) or ""
    if isinstance(stderr, bytes):
        stderr = stderr.decode("utf-8", errors="replace")
    return stderr.strip()[-limit:]


class FFmpegTranscoder(AudioTranscoder):
    """Re-encodes audio ranges with the ffmpeg binary."""

    def __init__(self, config: FFmpegConfig):
        self._config = config

    @property
    def output_suffix(self) -> str:
        return f".{self._config.container_format}"

    @property
    def output_media_type(self) -> str:
        return MEDIA_TYPES.get(self._config.container_format, "application/octet-stream")

    def build_command(
        self,
        source_path: Path,
        output_path: Path,
        start_seconds: float = 0.0,
        duration_seconds: float | None = None,
    ) -> list[str]:
        cmd = [self._config.ffmpeg_path, "-y", "-v", "error"]
        if start_seconds > 0:
            cmd += ["-ss", f"{start_seconds:.3f}"]
        cmd += ["-i", str(source_path)]
        if duration_seconds is not None:
            cmd += ["-t", f"{duration_seconds:.3f}"]
        cmd += [
            "-vn",
            "-c:a",
            self._config.audio_codec,
            "-b:a",
            self._config.audio_bitrate,
            "-f",
            self._config.container_format,
            str(output_path),
        ]
        return cmd

    def encode(
        self,
        source_path: Path,
        output_path: Path,
        start_seconds: float = 0.0,
        duration_seconds: float | None = None,
    ) -> None:
        cmd = self.build_command(source_path, output_path, start_seconds, duration_seconds)
        try:
            subprocess.run(
                cmd,
                check=True,
                capture_output=True,
                text=True,
                timeout=self._config.timeout_seconds,
            )
        except (OSError, subprocess.SubprocessError) as e:
            logger.exception(
                "ffmpeg encoding failed",
                extra={
                    "output_name": output_path.name,
                    "stderr": stderr_tail(e),
                },
            )
            raise TranscoderError(output_path.name, e) from e

        if not output_path.exists():
            raise TranscoderError(output_path.name)

        logger.info(
            "ffmpeg encoding completed",
            extra={
                "output_name": output_path.name,
                "start_seconds": start_seconds,
                "duration_seconds": duration_seconds,
            },
        )
