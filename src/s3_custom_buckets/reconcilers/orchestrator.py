"""Sequential reconciliation of declared buckets."""

from __future__ import annotations

from typing import Sequence

from ..constants import LOG_PREFIX, MAX_RETRIES
from ..logging import Reporter
from ..models import BucketSpec, ReconcileResult
from ..services.s3.base import StorageBackend
from ..tracing import trace_span
from ..utils.errors import sanitize_exception
from .encryption import EncryptionReconciler
from .existence import ExistenceReconciler
from .overwrite import CorsReconciler, PolicyReconciler, PublicAccessReconciler
from .retry import RetryBudget, RetryingExecutor
from .versioning import VersioningReconciler


class BucketReconciler:
    """Converges declared buckets one at a time, in declaration order.

    Each instance owns one retry budget. Buckets are never reconciled
    concurrently because every mutating call draws from that budget.
    """

    def __init__(
        self,
        backend: StorageBackend,
        reporter: Reporter | None = None,
        max_retries: int = MAX_RETRIES,
        region: str | None = None,
    ) -> None:
        self.backend = backend
        self.reporter = reporter or Reporter()
        self.executor = RetryingExecutor(backend, self.reporter, RetryBudget(max_retries))

        self.existence = ExistenceReconciler(backend, self.reporter, region=region)
        self.encryption = EncryptionReconciler(backend, self.executor, self.reporter)
        self.versioning = VersioningReconciler(backend, self.executor, self.reporter)
        self.policy = PolicyReconciler(backend, self.executor, self.reporter)
        self.public_access = PublicAccessReconciler(backend, self.executor, self.reporter)
        self.cors = CorsReconciler(backend, self.executor, self.reporter)

    @property
    def budget(self) -> RetryBudget:
        return self.executor.budget

    async def reconcile_bucket(self, bucket: BucketSpec) -> None:
        """Run every sub-resource reconciler for one named bucket."""
        name = bucket.name
        config = bucket.config

        await self.existence.reconcile(name)

        if config.server_side_encryption:
            await self.encryption.reconcile(name, config.server_side_encryption, config.kms_master_key_id)

        if config.versioning is not None:
            await self.versioning.reconcile(name, config.versioning)

        if config.policy is not None:
            await self.policy.reconcile(name, config.policy)

        if config.public_access is not None:
            await self.public_access.reconcile(name, config.public_access)

        if config.cors is not None:
            await self.cors.reconcile(name, config.cors)

    async def run(self, buckets: Sequence[BucketSpec]) -> ReconcileResult:
        """Reconcile ``buckets`` in order.

        The first error raised while reconciling any bucket ends the whole
        pass: it is reported once and the remaining buckets are left
        untouched. The returned result says how far the pass got.
        """
        result = ReconcileResult()
        current: str | None = None

        try:
            for bucket in buckets:
                if not bucket.name:
                    self.reporter.log("bucket name not provided")
                    result.skipped += 1
                    continue

                current = bucket.name
                with trace_span("reconcile_bucket", attributes={"bucket.name": bucket.name}):
                    await self.reconcile_bucket(bucket)
                result.reconciled.append(bucket.name)
                current = None
        except Exception as e:
            message = sanitize_exception(e)
            self.reporter.error(f"\n-------- {LOG_PREFIX} Custom Bucket Create Error --------\n{message}")
            result.failed = current
            result.error = message
            result.error_type = type(e).__name__

        return result
