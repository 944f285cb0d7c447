"""Declarative reconciliation of S3 custom buckets."""

__version__ = "0.1.0"
