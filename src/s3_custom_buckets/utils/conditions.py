"""Status conditions for CustomBucketSet resources."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from ..constants import COND_APPLY_FAILED, COND_READY

APPLIED_MESSAGE = "All declared buckets applied"


def _condition(
    previous: list[dict[str, Any]],
    condition_type: str,
    status: bool,
    reason: str,
    message: str,
    observed_generation: int | None,
    now: str,
) -> dict[str, Any]:
    status_text = "True" if status else "False"
    transition_time = now
    for cond in previous:
        if cond.get("type") == condition_type and cond.get("status") == status_text:
            transition_time = cond.get("lastTransitionTime", now)
            break

    condition = {
        "type": condition_type,
        "status": status_text,
        "reason": reason,
        "message": message,
        "lastTransitionTime": transition_time,
    }
    if observed_generation is not None:
        condition["observedGeneration"] = observed_generation
    return condition


def pass_conditions(
    previous: list[dict[str, Any]],
    succeeded: bool,
    message: str,
    observed_generation: int | None = None,
) -> list[dict[str, Any]]:
    """Build the Ready and ApplyFailed conditions after a reconciliation pass.

    ``previous`` is left untouched. A condition whose status did not change
    keeps its lastTransitionTime.

    Args:
        previous: Conditions currently on the resource
        succeeded: Whether every declared bucket was applied
        message: Summary of the pass (the failure message when it failed)
        observed_generation: Generation the pass ran against

    Returns:
        The new conditions list
    """
    now = datetime.now(timezone.utc).isoformat()
    return [
        _condition(
            previous,
            COND_READY,
            succeeded,
            "Ready" if succeeded else "NotReady",
            message,
            observed_generation,
            now,
        ),
        _condition(
            previous,
            COND_APPLY_FAILED,
            not succeeded,
            "Applied" if succeeded else "ApplyFailed",
            APPLIED_MESSAGE if succeeded else message,
            observed_generation,
            now,
        ),
    ]
