"""ffprobe implementation of the DurationProber interface."""

import math
import shutil
import subprocess
from pathlib import Path

from speech_recap_common.logging import setup_logging

from exceptions import ProbeFailedError, ProbeUnavailableError

from .ffmpeg_transcoder import stderr_tail
from .interfaces import DurationProber

logger = setup_logging()


class FFprobeDurationProber(DurationProber):
    """Reads container duration with the ffprobe binary."""

    def __init__(self, ffprobe_path: str, timeout_seconds: float):
        self._ffprobe_path = ffprobe_path
        self._timeout_seconds = timeout_seconds

    def is_available(self) -> bool:
        return shutil.which(self._ffprobe_path) is not None

    def probe(self, source_path: Path) -> float:
        if not self.is_available():
            logger.error(
                "ffprobe not found", extra={"ffprobe_path": self._ffprobe_path}
            )
            raise ProbeUnavailableError(self._ffprobe_path)

        cmd = [
            self._ffprobe_path,
            "-v",
            "error",
            "-show_entries",
            "format=duration",
            "-of",
            "default=noprint_wrappers=1:nokey=1",
            str(source_path),
        ]

        try:
            result = subprocess.run(
                cmd,
                check=True,
                capture_output=True,
                text=True,
                timeout=self._timeout_seconds,
            )
        except OSError as e:
            logger.exception(
                "ffprobe could not be executed",
                extra={"ffprobe_path": self._ffprobe_path},
            )
            raise ProbeUnavailableError(self._ffprobe_path, e) from e
        except (subprocess.CalledProcessError, subprocess.TimeoutExpired) as e:
            logger.exception(
                "ffprobe failed",
                extra={"file_name": source_path.name, "stderr": stderr_tail(e)},
            )
            raise ProbeFailedError(source_path.name, e) from e

        duration = self._parse_duration(result.stdout, source_path.name)
        logger.info(
            "Audio duration probed",
            extra={
                "file_name": source_path.name,
                "duration_seconds": round(duration, 1),
                "duration_minutes": round(duration / 60, 2),
            },
        )
        return duration

    def _parse_duration(self, output: str, file_name: str) -> float:
        raw = output.strip()
        try:
            duration = float(raw)
        except ValueError as e:
            logger.error(
                "Unparseable ffprobe duration",
                extra={"file_name": file_name, "output": raw},
            )
            raise ProbeFailedError(file_name, e) from e

        if not math.isfinite(duration) or duration < 0:
            logger.error(
                "Invalid ffprobe duration",
                extra={"file_name": file_name, "output": raw},
            )
            raise ProbeFailedError(file_name)
        return duration

