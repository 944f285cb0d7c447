"""Configuration loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from typing import Any

from .constants import MAX_RETRIES


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


@dataclass
class BackendSettings:
    """Connection settings for the storage backend."""

    region: str = "us-east-1"
    endpoint: str | None = None
    access_key: str | None = field(default=None, repr=False)
    secret_key: str | None = field(default=None, repr=False)
    session_token: str | None = field(default=None, repr=False)
    path_style: bool = False
    max_retries: int = MAX_RETRIES

    @classmethod
    def from_env(cls) -> BackendSettings:
        """Load from environment variables.

        Credentials are optional; boto3's default credential chain is used
        when they are not set.
        """
        access_key = os.getenv("AWS_ACCESS_KEY_ID") or None
        secret_key = os.getenv("AWS_SECRET_ACCESS_KEY") or None
        if bool(access_key) != bool(secret_key):
            raise ValueError(
                "AWS_ACCESS_KEY_ID and AWS_SECRET_ACCESS_KEY must be set together"
            )

        max_retries = int(os.getenv("RECONCILE_MAX_RETRIES", str(MAX_RETRIES)))
        if max_retries < 0:
            raise ValueError("RECONCILE_MAX_RETRIES must not be negative")

        return cls(
            region=os.getenv("AWS_REGION", "us-east-1"),
            endpoint=os.getenv("S3_ENDPOINT_URL") or None,
            access_key=access_key,
            secret_key=secret_key,
            session_token=os.getenv("AWS_SESSION_TOKEN") or None,
            path_style=_env_bool("S3_PATH_STYLE"),
            max_retries=max_retries,
        )

    def with_overrides(self, backend_spec: dict[str, Any] | None) -> BackendSettings:
        """Apply per-resource ``spec.backend`` overrides (endpoint, region, pathStyle).

        Raises:
            ValueError: If ``backend_spec`` is not a mapping
        """
        if not backend_spec:
            return self
        if not isinstance(backend_spec, dict):
            raise ValueError("backend must be a mapping")
        return replace(
            self,
            region=backend_spec.get("region", self.region),
            endpoint=backend_spec.get("endpoint", self.endpoint),
            path_style=bool(backend_spec.get("pathStyle", self.path_style)),
        )
