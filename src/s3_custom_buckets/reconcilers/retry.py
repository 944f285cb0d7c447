"""Retrying request executor for mutating storage operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .. import metrics
from ..constants import MAX_RETRIES, RESOURCE_TYPE_S3
from ..logging import Reporter
from ..services.s3.base import StorageBackend
from ..services.s3.errors import TerminalBackendError, TransientBackendError


@dataclass
class RetryBudget:
    """Retries left for transient failures, shared by every call on one executor."""

    maximum: int = MAX_RETRIES
    remaining: int = field(init=False)

    def __post_init__(self) -> None:
        if self.maximum < 0:
            raise ValueError("maximum must not be negative")
        self.remaining = self.maximum

    def consume(self) -> bool:
        """Take one retry from the budget. Returns False when none are left."""
        if self.remaining <= 0:
            return False
        self.remaining -= 1
        return True

    def reset(self) -> None:
        self.remaining = self.maximum


class RetryingExecutor:
    """Runs named backend operations, retrying while the target is not yet visible.

    A ``TransientBackendError`` is retried with the same parameters as long as
    the budget has retries left. Every operation that ends, successfully or
    not, resets the budget. Retries are drawn from one budget for all
    operations, so a budget drawn down by a failing call is what the next
    call sees until that reset happens.
    """

    def __init__(
        self,
        backend: StorageBackend,
        reporter: Reporter,
        budget: RetryBudget | None = None,
    ) -> None:
        self.backend = backend
        self.reporter = reporter
        self.budget = budget if budget is not None else RetryBudget()

    async def execute(self, operation_name: str, params: dict[str, Any]) -> dict[str, Any]:
        """Run ``operation_name`` with ``params``.

        Raises:
            TerminalBackendError: On a non-transient failure, or when the
                budget runs out while the failure is still transient
        """
        while True:
            try:
                response = await self.backend.request(RESOURCE_TYPE_S3, operation_name, params)
            except TransientBackendError as e:
                if self.budget.consume():
                    metrics.retry_total.labels(operation=operation_name).inc()
                    self.reporter.log(f"Retrying operation '{operation_name}'")
                    self.reporter.log(f"Retries left = '{self.budget.remaining}'")
                    continue
                self.budget.reset()
                raise TerminalBackendError(
                    e.message,
                    status_code=e.status_code,
                    code=e.code,
                    operation=operation_name,
                ) from e
            except Exception:
                self.budget.reset()
                raise

            self.budget.reset()
            return response
