"""Base class for sub-resource reconcilers."""

from __future__ import annotations

from typing import Any

from ..constants import RESOURCE_TYPE_S3
from ..logging import Reporter
from ..services.s3.base import StorageBackend
from .retry import RetryingExecutor


class SubResourceReconciler:
    """Common wiring for one bucket sub-resource.

    Reads go straight to the backend and treat any failure as
    "not configured". Writes go through the shared retrying executor.
    """

    def __init__(self, backend: StorageBackend, executor: RetryingExecutor, reporter: Reporter) -> None:
        self.backend = backend
        self.executor = executor
        self.reporter = reporter

    async def probe(self, operation_name: str, name: str) -> dict[str, Any] | None:
        """Read a sub-resource, returning None on any failure."""
        try:
            return await self.backend.request(RESOURCE_TYPE_S3, operation_name, {"Bucket": name})
        except Exception:
            return None
