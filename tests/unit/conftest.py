"""Shared fixtures for reconciler tests."""

from __future__ import annotations

from typing import Any

import pytest

from s3_custom_buckets.logging import Reporter
from s3_custom_buckets.services.s3.errors import TerminalBackendError, TransientBackendError


class FakeBackend:
    """In-memory StorageBackend that records every call.

    Outcomes are queued per operation; an exception outcome is raised, a
    dict is returned. Operations with nothing queued return ``{}``.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.wait_calls: list[tuple[str, str]] = []
        self.outcomes: dict[str, list[Any]] = {}
        self.wait_error: Exception | None = None

    def queue(self, operation: str, *outcomes: Any) -> None:
        self.outcomes.setdefault(operation, []).extend(outcomes)

    async def request(self, resource_type: str, operation_name: str, params: dict[str, Any]) -> dict[str, Any]:
        self.calls.append((operation_name, params))
        pending = self.outcomes.get(operation_name)
        outcome = pending.pop(0) if pending else {}
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    async def wait_for(self, name: str, state: str) -> None:
        self.wait_calls.append((name, state))
        if self.wait_error is not None:
            raise self.wait_error

    @property
    def operations(self) -> list[str]:
        return [operation for operation, _ in self.calls]

    def params_for(self, operation: str) -> list[dict[str, Any]]:
        return [params for op, params in self.calls if op == operation]

    def buckets_touched(self) -> list[str]:
        return [params.get("Bucket") for _, params in self.calls]


class RecordingReporter(Reporter):
    """Reporter that keeps lines in memory."""

    def __init__(self) -> None:
        super().__init__()
        self.lines: list[str] = []
        self.warnings: list[str] = []
        self.errors: list[str] = []

    def log(self, line: str) -> None:
        self.lines.append(line)

    def warning(self, line: str) -> None:
        self.warnings.append(line)

    def error(self, line: str) -> None:
        self.errors.append(line)


@pytest.fixture
def not_found():
    """Factory for the 404 error S3 returns before a new bucket is visible."""

    def make(operation: str = "op") -> TransientBackendError:
        return TransientBackendError("The specified bucket does not exist", status_code=404, code="NoSuchBucket", operation=operation)

    return make


@pytest.fixture
def access_denied():
    """Factory for a non-retryable 403 error."""

    def make(operation: str = "op") -> TerminalBackendError:
        return TerminalBackendError("Access Denied", status_code=403, code="AccessDenied", operation=operation)

    return make


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()
