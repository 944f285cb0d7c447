"""Backend error taxonomy."""

from __future__ import annotations

from botocore.exceptions import ClientError

from ...constants import TRANSIENT_STATUS_CODE


class BackendError(Exception):
    """A failed storage operation."""

    transient = False

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        code: str | None = None,
        operation: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.operation = operation


class TransientBackendError(BackendError):
    """The target is not yet visible; the operation may succeed if retried."""

    transient = True


class TerminalBackendError(BackendError):
    """A failure that retrying will not fix."""


def is_transient_status(status_code: int | None) -> bool:
    return status_code == TRANSIENT_STATUS_CODE


def classify_client_error(error: ClientError, operation: str | None = None) -> BackendError:
    """Build the matching BackendError subclass from a botocore ClientError.

    ``headBucket`` reports a missing bucket with code ``"404"`` and no body,
    so the HTTP status is taken from the response metadata first and from a
    numeric error code second.
    """
    response = error.response or {}
    code = response.get("Error", {}).get("Code")
    status_code = response.get("ResponseMetadata", {}).get("HTTPStatusCode")
    if status_code is None and code and str(code).isdigit():
        status_code = int(code)

    error_cls = TransientBackendError if is_transient_status(status_code) else TerminalBackendError
    return error_cls(str(error), status_code=status_code, code=code, operation=operation)
