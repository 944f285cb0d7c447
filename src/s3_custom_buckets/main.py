"""Kopf operator entrypoint for CustomBucketSet resources."""

from __future__ import annotations

import os
import threading
from typing import Any

import kopf
from werkzeug.serving import make_server

from . import health
from . import logging as structured_logging
from .constants import API_GROUP_VERSION, KIND_BUCKET_SET
from .handlers.bucket_set import BucketSetHandler
from .tracing import initialize_tracing

bucket_set_handler = BucketSetHandler()


@kopf.on.startup()
def configure(settings: kopf.OperatorSettings, **_: Any) -> None:
    """Configure the operator."""
    structured_logging.setup_structured_logging()
    initialize_tracing()

    # Use annotations so progress does not collide with status updates
    settings.persistence.progress_storage = kopf.AnnotationsProgressStorage()
    settings.persistence.diffbase_storage = kopf.AnnotationsDiffBaseStorage()

    settings.posting.level = 0
    settings.networking.request_timeout = 30.0

    metrics_port = int(os.getenv("METRICS_PORT", "8080"))
    server = make_server("", metrics_port, health.create_combined_wsgi_app(), threaded=True)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()


@kopf.on.create(API_GROUP_VERSION, KIND_BUCKET_SET)
@kopf.on.update(API_GROUP_VERSION, KIND_BUCKET_SET)
@kopf.on.resume(API_GROUP_VERSION, KIND_BUCKET_SET)
async def handle_bucket_set(
    spec: dict[str, Any],
    meta: dict[str, Any],
    status: dict[str, Any],
    patch: kopf.Patch,
    **kwargs: Any,
) -> None:
    """Handle CustomBucketSet reconciliation."""
    await bucket_set_handler.reconcile(spec, meta, status, patch)
