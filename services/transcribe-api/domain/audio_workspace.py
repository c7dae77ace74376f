"""Request-scoped scratch directory for audio processing."""

import tempfile
from pathlib import Path

from speech_recap_common.logging import setup_logging

from domain.models import AudioAsset

logger = setup_logging()


class AudioWorkspace:
    """
    Holds the materialized upload and every intermediate encoding of one request.

    Use as a context manager. The directory and everything in it is removed
    on exit, whether the block succeeded or raised.
    """

    def __init__(self, asset: AudioAsset, prefix: str = "speech-recap-"):
        self._asset = asset
        self._prefix = prefix
        self._temp_dir: tempfile.TemporaryDirectory | None = None
        self.root: Path | None = None
        self.source_path: Path | None = None

    def __enter__(self) -> "AudioWorkspace":
        self._temp_dir = tempfile.TemporaryDirectory(prefix=self._prefix)
        self.root = Path(self._temp_dir.name)
        try:
            self.source_path = self.root / f"source{self._asset.suffix or '.bin'}"
            self.source_path.write_bytes(self._asset.data)
        except Exception:
            self.close()
            raise

        logger.info(
            "Workspace created",
            extra={"path": str(self.root), "source_size": self._asset.size},
        )
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def asset(self) -> AudioAsset:
        return self._asset

    def part_path(self, name: str) -> Path:
        """Returns a path inside the workspace for an intermediate file."""
        if self.root is None:
            raise RuntimeError("Workspace is not open")
        return self.root / name

    def read(self, path: Path) -> bytes:
        return path.read_bytes()

    def close(self) -> None:
        if self._temp_dir is None:
            return
        root = self.root
        self._temp_dir.cleanup()
        self._temp_dir = None
        logger.info("Workspace released", extra={"path": str(root)})
