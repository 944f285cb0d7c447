"""Bucket existence reconciler."""

from __future__ import annotations

from typing import Any

from ..constants import (
    OP_CREATE_BUCKET,
    OP_HEAD_BUCKET,
    RESOURCE_TYPE_S3,
    STATE_BUCKET_EXISTS,
)
from ..logging import Reporter
from ..services.s3.base import StorageBackend

# Region that rejects an explicit LocationConstraint
DEFAULT_REGION = "us-east-1"


class ExistenceReconciler:
    """Creates the bucket when it is missing.

    Neither the existence check nor the wait after creation is retried, and
    any failure of either is read as a negative result.
    """

    def __init__(self, backend: StorageBackend, reporter: Reporter, region: str | None = None) -> None:
        self.backend = backend
        self.reporter = reporter
        self.region = region

    async def exists(self, name: str) -> bool:
        try:
            await self.backend.request(RESOURCE_TYPE_S3, OP_HEAD_BUCKET, {"Bucket": name})
            return True
        except Exception:
            return False

    async def create(self, name: str) -> dict[str, Any]:
        params: dict[str, Any] = {"Bucket": name, "ACL": "private"}
        if self.region and self.region != DEFAULT_REGION:
            params["CreateBucketConfiguration"] = {"LocationConstraint": self.region}
        return await self.backend.request(RESOURCE_TYPE_S3, OP_CREATE_BUCKET, params)

    async def await_state(self, name: str, state: str) -> bool:
        try:
            await self.backend.wait_for(name, state)
            return True
        except Exception as e:
            self.reporter.warning(f"Unable to wait for '{state}' - {e}")
            return False

    async def reconcile(self, name: str) -> None:
        if await self.exists(name):
            self.reporter.log(f"(Existing) '{name}'")
            return

        self.reporter.log(f"(Creating) '{name}'")
        await self.create(name)
        # Later steps go ahead whether or not the wait succeeded
        await self.await_state(name, STATE_BUCKET_EXISTS)
