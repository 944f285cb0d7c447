"""Utilities for emitting Kubernetes events."""

from __future__ import annotations

from typing import Any

import kopf

from ..constants import (
    EVENT_REASON_RECONCILE_FAILED,
    EVENT_REASON_RECONCILE_STARTED,
    EVENT_REASON_RECONCILE_SUCCEEDED,
    EVENT_REASON_VALIDATE_FAILED,
)


def emit_event(
    meta: dict[str, Any],
    reason: str,
    message: str,
    type_: str = "Normal",
) -> None:
    """Emit a Kubernetes event.

    Args:
        meta: Resource metadata
        reason: Event reason
        message: Event message
        type_: Event type (Normal or Warning)
    """
    kopf.event(
        meta,
        reason=reason,
        message=message,
        type=type_,
    )


def emit_reconcile_started(meta: dict[str, Any], bucket_count: int) -> None:
    """Emit reconcile started event."""
    emit_event(meta, EVENT_REASON_RECONCILE_STARTED, f"Reconciling {bucket_count} declared bucket(s)")


def emit_reconcile_succeeded(meta: dict[str, Any], reconciled: list[str]) -> None:
    """Emit reconcile succeeded event."""
    emit_event(
        meta,
        EVENT_REASON_RECONCILE_SUCCEEDED,
        f"Reconciled {len(reconciled)} bucket(s): {', '.join(reconciled) or 'none'}",
    )


def emit_reconcile_failed(meta: dict[str, Any], message: str) -> None:
    """Emit reconcile failed event."""
    emit_event(meta, EVENT_REASON_RECONCILE_FAILED, message, type_="Warning")


def emit_validate_failed(meta: dict[str, Any], message: str) -> None:
    """Emit validation failed event."""
    emit_event(meta, EVENT_REASON_VALIDATE_FAILED, message, type_="Warning")
