"""Disk-backed file storage served by the app's ``/uploads`` static mount."""

import time
from pathlib import Path

import structlog

from shared.errors import StorageError
from shared.storage.port import FileStorage

logger = structlog.get_logger(__name__)


class LocalFileStorage(FileStorage):
    def __init__(self, upload_dir: str) -> None:
        self.upload_dir = Path(upload_dir)

    def save(self, original_name: str, content: bytes) -> str:
        # Mirrors "<millis>-<original name>"; directory parts of the name are dropped
        filename = f"{int(time.time() * 1000)}-{Path(original_name).name}"
        try:
            self.upload_dir.mkdir(parents=True, exist_ok=True)
            (self.upload_dir / filename).write_bytes(content)
        except OSError as exc:
            raise StorageError(f"Could not store upload {filename}") from exc

        logger.info("upload_stored", filename=filename, size=len(content))
        return f"{self.public_prefix}/{filename}"
