"""boto3-backed storage backend."""

from .client import AWSBackend

__all__ = ["AWSBackend"]
