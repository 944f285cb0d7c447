"""Models for declared custom buckets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class BucketConfig:
    """Desired settings for one bucket. ``None`` leaves a setting untouched."""

    server_side_encryption: str | None = None
    kms_master_key_id: str | None = None
    versioning: bool | None = None
    policy: dict[str, Any] | None = None
    public_access: dict[str, Any] | None = None
    cors: dict[str, Any] | None = None


@dataclass(frozen=True)
class BucketSpec:
    """A declared bucket."""

    name: str | None
    config: BucketConfig = field(default_factory=BucketConfig)


@dataclass
class ReconcileResult:
    """Outcome of one reconciliation pass."""

    reconciled: list[str] = field(default_factory=list)
    skipped: int = 0
    failed: str | None = None
    error: str | None = None
    error_type: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None
