"""Storage backend interface and error taxonomy."""

from .base import StorageBackend
from .errors import (
    BackendError,
    TerminalBackendError,
    TransientBackendError,
    classify_client_error,
)

__all__ = [
    "StorageBackend",
    "BackendError",
    "TransientBackendError",
    "TerminalBackendError",
    "classify_client_error",
]
