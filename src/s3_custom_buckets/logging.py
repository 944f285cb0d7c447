"""Structured logging configuration and the reconciliation reporter."""

import json
import logging
import sys
from typing import Any

from .constants import LOG_PREFIX


def setup_structured_logging() -> None:
    """Configure structured JSON logging."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def log_resource_event(
    logger: logging.Logger,
    controller: str,
    resource_kind: str,
    resource_name: str,
    namespace: str,
    uid: str,
    event: str,
    reason: str,
    message: str,
    **kwargs: Any,
) -> None:
    """Log a structured resource event."""
    log_data = {
        "controller": controller,
        "resource": resource_kind,
        "name": resource_name,
        "namespace": namespace,
        "uid": uid,
        "event": event,
        "reason": reason,
        "message": message,
    }
    log_data.update(kwargs)
    logger.info(json.dumps(log_data))


class Reporter:
    """Line-oriented progress sink for a reconciliation pass.

    ``log`` receives every progress and status line. ``error`` is reserved
    for the single error that ends a pass early.
    """

    def __init__(self, logger: logging.Logger | None = None, prefix: str = LOG_PREFIX) -> None:
        self.logger = logger or logging.getLogger("s3_custom_buckets.reconcilers")
        self.prefix = prefix

    def log(self, line: str) -> None:
        self.logger.info(f"{self.prefix} {line}")

    def warning(self, line: str) -> None:
        self.logger.warning(f"{self.prefix} {line}")

    def error(self, line: str) -> None:
        self.logger.error(line)
