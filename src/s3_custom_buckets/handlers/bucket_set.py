"""Handler for CustomBucketSet CRD."""

from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Any

import kopf

from .. import metrics
from ..builders.backend import create_backend_from_settings
from ..builders.bucket import create_bucket_specs_from_config
from ..config import BackendSettings
from ..constants import KIND_BUCKET_SET
from ..logging import Reporter
from ..models import BucketSpec, ReconcileResult
from ..reconcilers.orchestrator import BucketReconciler
from ..services.aws.client import AWSBackend
from ..tracing import trace_span
from ..utils.conditions import pass_conditions
from ..utils.events import emit_reconcile_failed, emit_reconcile_started, emit_reconcile_succeeded
from .base import BaseHandler

# Seconds before kopf retries a pass that stopped on a backend error
RETRY_DELAY_SECONDS = 60


class BucketSetHandler(BaseHandler):
    """Runs one reconciliation pass per CustomBucketSet change."""

    def __init__(self, settings: BackendSettings | None = None):
        super().__init__(KIND_BUCKET_SET)
        self.settings = settings

    def _build(self, spec: dict[str, Any], meta: dict[str, Any]) -> tuple[list[BucketSpec], BackendSettings, AWSBackend]:
        try:
            buckets = create_bucket_specs_from_config(spec.get("buckets"))
            settings = (self.settings or BackendSettings.from_env()).with_overrides(spec.get("backend"))
            backend = create_backend_from_settings(settings)
        except ValueError as e:
            self.handle_validation_error(meta, str(e))
        return buckets, settings, backend

    async def reconcile(
        self,
        spec: dict[str, Any],
        meta: dict[str, Any],
        status: dict[str, Any],
        patch: kopf.Patch,
    ) -> ReconcileResult:
        """Reconcile every bucket declared in ``spec.buckets``."""
        buckets, settings, backend = self._build(spec, meta)

        emit_reconcile_started(meta, len(buckets))
        self.log_info(meta, f"Reconciling {len(buckets)} declared bucket(s)", reason="ReconcileStarted")
        metrics.reconcile_total.labels(kind=self.kind, result="started").inc()

        reconciler = BucketReconciler(
            backend,
            reporter=Reporter(),
            max_retries=settings.max_retries,
            region=settings.region,
        )

        start_time = time.time()
        try:
            with trace_span("reconcile_bucket_set", kind=self.kind, attributes={"bucket_set.name": meta.get("name", "")}):
                result = await reconciler.run(buckets)
        finally:
            metrics.reconcile_duration_seconds.labels(kind=self.kind).observe(time.time() - start_time)

        generation = meta.get("generation", 0)

        if result.succeeded:
            message = f"Reconciled {len(result.reconciled)} bucket(s)"
            emit_reconcile_succeeded(meta, result.reconciled)
            self.log_info(meta, message, reason="ReconcileSucceeded", buckets=result.reconciled)
            metrics.reconcile_total.labels(kind=self.kind, result="success").inc()
        else:
            message = f"Bucket '{result.failed}' failed: {result.error}"
            emit_reconcile_failed(meta, message)
            self.log_error(meta, message, reason="ReconcileFailed", buckets=result.reconciled)
            metrics.error_total.labels(kind=self.kind, error_type=result.error_type or "Unknown").inc()
            metrics.reconcile_total.labels(kind=self.kind, result="failed").inc()

        conditions = pass_conditions(status.get("conditions", []), result.succeeded, message, generation)
        patch.status.update({
            "observedGeneration": generation,
            "reconciledBuckets": result.reconciled,
            "skippedBuckets": result.skipped,
            "failedBucket": result.failed,
            "lastSyncTime": datetime.now(timezone.utc).isoformat(),
            "conditions": conditions,
        })

        if not result.succeeded:
            raise kopf.TemporaryError(message, delay=RETRY_DELAY_SECONDS)
        return result
