"""AWS S3 backend implementation."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any

import boto3
from botocore import xform_name
from botocore.exceptions import BotoCoreError, ClientError

from ... import metrics
from ...constants import RESOURCE_TYPE_S3
from ..s3.errors import TerminalBackendError, classify_client_error

logger = logging.getLogger(__name__)


class AWSBackend:
    """S3 backend that runs boto3 calls off the event loop."""

    def __init__(
        self,
        region: str,
        endpoint: str | None = None,
        access_key: str | None = None,
        secret_key: str | None = None,
        session_token: str | None = None,
        path_style: bool = False,
    ) -> None:
        """Initialize the S3 backend.

        Args:
            region: AWS region
            endpoint: Optional S3 endpoint URL for S3-compatible services
            access_key: Access key ID (boto3 default chain when omitted)
            secret_key: Secret access key
            session_token: Optional session token for temporary credentials
            path_style: Use path-style addressing
        """
        self.region = region
        self.endpoint = endpoint

        config = boto3.session.Config(
            signature_version="s3v4",
            s3={"addressing_style": "path" if path_style else "auto"},
        )

        self.client = boto3.client(
            "s3",
            endpoint_url=endpoint,
            region_name=region,
            aws_access_key_id=access_key,
            aws_secret_access_key=secret_key,
            aws_session_token=session_token,
            config=config,
        )

    def _method_for(self, resource_type: str, operation_name: str) -> Any:
        if resource_type != RESOURCE_TYPE_S3:
            raise ValueError(f"Unsupported resource type: {resource_type}")
        method = getattr(self.client, xform_name(operation_name), None)
        if method is None:
            raise ValueError(f"Unsupported S3 operation: {operation_name}")
        return method

    async def request(self, resource_type: str, operation_name: str, params: dict[str, Any]) -> dict[str, Any]:
        """Issue ``operation_name`` (camelCase, e.g. ``putBucketCors``) with ``params``.

        Raises:
            TransientBackendError: The backend answered 404
            TerminalBackendError: Any other failure
        """
        method = self._method_for(resource_type, operation_name)
        start_time = time.time()
        try:
            response = await asyncio.to_thread(method, **params)
        except ClientError as e:
            metrics.bucket_operations_total.labels(operation=operation_name, result="failed").inc()
            logger.debug(f"{operation_name} failed for bucket {params.get('Bucket')}: {e}")
            raise classify_client_error(e, operation_name) from e
        except BotoCoreError as e:
            metrics.bucket_operations_total.labels(operation=operation_name, result="failed").inc()
            logger.error(f"{operation_name} failed for bucket {params.get('Bucket')}: {e}")
            raise TerminalBackendError(str(e), operation=operation_name) from e
        finally:
            duration = time.time() - start_time
            metrics.api_call_duration_seconds.labels(operation=operation_name).observe(duration)

        metrics.bucket_operations_total.labels(operation=operation_name, result="success").inc()
        return response

    async def wait_for(self, name: str, state: str) -> None:
        """Poll with the boto3 waiter ``state`` until bucket ``name`` reaches it."""
        waiter = self.client.get_waiter(state)
        try:
            await asyncio.to_thread(waiter.wait, Bucket=name)
        except BotoCoreError as e:
            raise TerminalBackendError(str(e), operation=f"wait:{state}") from e
