"""Reconcilers for sub-resources that are written whenever they are declared.

Policy, public access block and CORS are never compared with the live
bucket; a declared value always replaces whatever is there.
"""

from __future__ import annotations

import json
from typing import Any

from ..constants import OP_PUT_BUCKET_CORS, OP_PUT_BUCKET_POLICY, OP_PUT_PUBLIC_ACCESS_BLOCK
from .base import SubResourceReconciler


class PolicyReconciler(SubResourceReconciler):
    async def apply(self, name: str, policy: dict[str, Any]) -> dict[str, Any]:
        params = {"Bucket": name, "Policy": json.dumps(policy)}
        return await self.executor.execute(OP_PUT_BUCKET_POLICY, params)

    async def reconcile(self, name: str, policy: dict[str, Any]) -> None:
        await self.apply(name, policy)
        self.reporter.log(f"Applied custom bucket policy for '{name}'")


class PublicAccessReconciler(SubResourceReconciler):
    async def apply(self, name: str, public_access: dict[str, Any]) -> dict[str, Any]:
        params = {"Bucket": name, **public_access}
        return await self.executor.execute(OP_PUT_PUBLIC_ACCESS_BLOCK, params)

    async def reconcile(self, name: str, public_access: dict[str, Any]) -> None:
        await self.apply(name, public_access)
        self.reporter.log(f"Applied custom bucket public access for '{name}'")


class CorsReconciler(SubResourceReconciler):
    async def apply(self, name: str, cors: dict[str, Any]) -> dict[str, Any]:
        params = {"Bucket": name, **cors}
        return await self.executor.execute(OP_PUT_BUCKET_CORS, params)

    async def reconcile(self, name: str, cors: dict[str, Any]) -> None:
        await self.apply(name, cors)
        self.reporter.log(f"Applied custom bucket cors for '{name}'")
