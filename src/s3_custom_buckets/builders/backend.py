"""Builder for storage backend instances."""

from __future__ import annotations

from ..config import BackendSettings
from ..services.aws.client import AWSBackend


def create_backend_from_settings(settings: BackendSettings) -> AWSBackend:
    """Create an S3 backend from connection settings.

    Raises:
        ValueError: If configuration is invalid
    """
    if not settings.region:
        raise ValueError("region is required")

    return AWSBackend(
        region=settings.region,
        endpoint=settings.endpoint,
        access_key=settings.access_key,
        secret_key=settings.secret_key,
        session_token=settings.session_token,
        path_style=settings.path_style,
    )
