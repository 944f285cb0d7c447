"""Base handler class with common functionality for CRD handlers."""

from __future__ import annotations

import logging
from typing import Any, NoReturn

import kopf

from .. import metrics
from ..logging import log_resource_event
from ..utils.errors import sanitize_exception
from ..utils.events import emit_validate_failed

CONTROLLER_NAME = "s3-custom-buckets"


class BaseHandler:
    """Base class for CRD handlers with structured logging helpers."""

    def __init__(self, kind: str):
        """Initialize base handler.

        Args:
            kind: The Kubernetes resource kind (e.g., "CustomBucketSet")
        """
        self.kind = kind
        self.logger = logging.getLogger(__name__)

    def _get_resource_context(self, meta: dict[str, Any]) -> dict[str, Any]:
        return {
            "name": meta.get("name", "unknown"),
            "namespace": meta.get("namespace", "default"),
            "uid": meta.get("uid", "unknown"),
        }

    def _log(self, meta: dict[str, Any], message: str, event: str, reason: str, **kwargs: Any) -> None:
        ctx = self._get_resource_context(meta)
        log_resource_event(
            self.logger,
            controller=CONTROLLER_NAME,
            resource_kind=self.kind,
            resource_name=ctx["name"],
            namespace=ctx["namespace"],
            uid=ctx["uid"],
            event=event,
            reason=reason,
            message=message,
            **kwargs,
        )

    def log_info(
        self,
        meta: dict[str, Any],
        message: str,
        event: str = "info",
        reason: str = "Info",
        **kwargs: Any,
    ) -> None:
        """Log an info-level structured log message."""
        self._log(meta, message, event, reason, **kwargs)

    def log_error(
        self,
        meta: dict[str, Any],
        message: str,
        error: Exception | None = None,
        event: str = "error",
        reason: str = "Error",
        **kwargs: Any,
    ) -> None:
        """Log an error-level structured log message.

        Args:
            meta: Kubernetes resource metadata
            message: Log message
            error: Optional exception to include sanitized error details
            event: Event type (default: "error")
            reason: Reason for the event (default: "Error")
            **kwargs: Additional fields to include in the log
        """
        log_data = kwargs.copy()
        if error is not None:
            log_data["error"] = sanitize_exception(error)
            log_data["error_type"] = type(error).__name__
        self._log(meta, message, event, reason, **log_data)

    def handle_validation_error(self, meta: dict[str, Any], error_msg: str) -> NoReturn:
        """Handle validation error consistently.

        Raises:
            kopf.PermanentError: Always; retrying an invalid spec cannot help
        """
        self.log_error(meta, error_msg, reason="ValidationFailed")
        emit_validate_failed(meta, error_msg)
        metrics.reconcile_total.labels(kind=self.kind, result="invalid").inc()
        raise kopf.PermanentError(error_msg)
