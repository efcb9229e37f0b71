"""File storage port (abstract interface).

Craft images are the only uploaded files. The storage adapter receives the
raw bytes and returns the public path the image will be served from.
"""

from abc import ABC, abstractmethod


class FileStorage(ABC):
    """Abstract file storage interface."""

    public_prefix = "/uploads"

    @abstractmethod
    def save(self, original_name: str, content: bytes) -> str:
        """Persist an upload and return its public URL path."""
        ...
