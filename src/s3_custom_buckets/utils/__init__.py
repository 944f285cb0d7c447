"""Utility functions for the custom bucket reconciler."""

from .conditions import pass_conditions
from .errors import sanitize_error_message, sanitize_exception
from .events import (
    emit_event,
    emit_reconcile_failed,
    emit_reconcile_started,
    emit_reconcile_succeeded,
    emit_validate_failed,
)

__all__ = [
    "pass_conditions",
    "sanitize_error_message",
    "sanitize_exception",
    "emit_event",
    "emit_reconcile_started",
    "emit_reconcile_succeeded",
    "emit_reconcile_failed",
    "emit_validate_failed",
]
