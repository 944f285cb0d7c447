"""Builders for declared buckets and storage backends."""

from .backend import create_backend_from_settings
from .bucket import create_bucket_specs_from_config

__all__ = ["create_backend_from_settings", "create_bucket_specs_from_config"]
