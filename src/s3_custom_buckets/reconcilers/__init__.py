"""Bucket reconciliation engine."""

from .encryption import EncryptionReconciler
from .existence import ExistenceReconciler
from .orchestrator import BucketReconciler
from .overwrite import CorsReconciler, PolicyReconciler, PublicAccessReconciler
from .retry import RetryBudget, RetryingExecutor
from .versioning import VersioningReconciler

__all__ = [
    "BucketReconciler",
    "RetryBudget",
    "RetryingExecutor",
    "ExistenceReconciler",
    "EncryptionReconciler",
    "VersioningReconciler",
    "PolicyReconciler",
    "PublicAccessReconciler",
    "CorsReconciler",
]
