"""Handlers for custom bucket CRDs."""

from .base import BaseHandler
from .bucket_set import BucketSetHandler

__all__ = ["BaseHandler", "BucketSetHandler"]
