"""Upload storage wiring.

The active storage adapter is attached to ``app.state.storage`` when the
application is built; routes receive it through the ``get_storage``
dependency. Tests attach ``InMemoryFileStorage`` instead.
"""

from fastapi import Request

from shared.storage.fake_adapter import InMemoryFileStorage
from shared.storage.local_adapter import LocalFileStorage
from shared.storage.port import FileStorage


def get_storage(request: Request) -> FileStorage:
    """Return the storage adapter configured on the running app."""
    return request.app.state.storage


__all__ = ["FileStorage", "InMemoryFileStorage", "LocalFileStorage", "get_storage"]
