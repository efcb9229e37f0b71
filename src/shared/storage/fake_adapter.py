"""In-memory file storage for development and testing.

Keeps uploads in a dict so tests can assert on what was stored without
touching the filesystem. Can be told to fail to exercise storage errors.
"""

from shared.errors import StorageError
from shared.storage.port import FileStorage


class InMemoryFileStorage(FileStorage):
    def __init__(self) -> None:
        self.files: dict[str, bytes] = {}
        self.should_fail: bool = False
        self._counter = 0

    def save(self, original_name: str, content: bytes) -> str:
        if self.should_fail:
            raise StorageError("Upload storage unavailable")

        self._counter += 1
        filename = f"{self._counter:06d}-{original_name}"
        self.files[filename] = content
        return f"{self.public_prefix}/{filename}"
