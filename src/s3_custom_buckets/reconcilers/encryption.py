"""Server side encryption reconciler."""

from __future__ import annotations

from typing import Any

from ..constants import OP_GET_BUCKET_ENCRYPTION, OP_PUT_BUCKET_ENCRYPTION
from .base import SubResourceReconciler


class EncryptionReconciler(SubResourceReconciler):
    """Applies default encryption only to buckets that have none."""

    async def has_encryption(self, name: str) -> bool:
        return await self.probe(OP_GET_BUCKET_ENCRYPTION, name) is not None

    async def apply(self, name: str, algorithm: str, key_id: str | None = None) -> dict[str, Any]:
        default: dict[str, Any] = {"SSEAlgorithm": algorithm}
        if key_id:
            default["KMSMasterKeyID"] = key_id

        params = {
            "Bucket": name,
            "ServerSideEncryptionConfiguration": {
                "Rules": [{"ApplyServerSideEncryptionByDefault": default}],
            },
        }
        return await self.executor.execute(OP_PUT_BUCKET_ENCRYPTION, params)

    async def reconcile(self, name: str, algorithm: str, key_id: str | None = None) -> None:
        if await self.has_encryption(name):
            self.reporter.log(
                f"Custom bucket '{name}' already has Server Side Encryption setup. "
                f"({algorithm}) has not been applied"
            )
            return

        await self.apply(name, algorithm, key_id)
        self.reporter.log(f"Applied Server Side Encryption ({algorithm}) to custom bucket '{name}'")
