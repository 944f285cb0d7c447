"""Base storage backend interface."""

from __future__ import annotations

from typing import Any, Protocol


class StorageBackend(Protocol):
    """Protocol defining the storage operations the reconciler needs.

    Implementations raise ``BackendError`` subclasses on failure.
    """

    async def request(self, resource_type: str, operation_name: str, params: dict[str, Any]) -> dict[str, Any]:
        """Issue a named operation (e.g. ``headBucket``) and return its response."""
        ...

    async def wait_for(self, name: str, state: str) -> None:
        """Block until the named bucket reaches ``state`` (e.g. ``bucket_exists``)."""
        ...
