"""Bucket versioning reconciler."""

from __future__ import annotations

from typing import Any

from ..constants import OP_GET_BUCKET_VERSIONING, OP_PUT_BUCKET_VERSIONING
from .base import SubResourceReconciler


class VersioningReconciler(SubResourceReconciler):
    """Enables or suspends versioning when it differs from the desired state."""

    async def current(self, name: str) -> bool:
        """True only when the bucket reports ``Status: Enabled``."""
        response = await self.probe(OP_GET_BUCKET_VERSIONING, name)
        return bool(response) and response.get("Status") == "Enabled"

    async def apply(self, name: str, desired: bool) -> dict[str, Any]:
        params = {
            "Bucket": name,
            "VersioningConfiguration": {"Status": "Enabled" if desired else "Suspended"},
        }
        return await self.executor.execute(OP_PUT_BUCKET_VERSIONING, params)

    async def reconcile(self, name: str, desired: bool) -> None:
        if await self.current(name) == desired:
            return

        await self.apply(name, desired)
        if desired:
            self.reporter.log(f"Enabled versioning on custom bucket '{name}'")
        else:
            self.reporter.log(f"Suspended versioning on custom bucket '{name}'")
