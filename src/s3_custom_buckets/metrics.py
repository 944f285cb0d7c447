"""Prometheus metrics for the custom bucket reconciler."""

from prometheus_client import Counter, Histogram

# Reconciliation metrics
reconcile_total = Counter(
    "s3_custom_buckets_reconcile_total",
    "Total number of reconciliation passes",
    ["kind", "result"],
)

reconcile_duration_seconds = Histogram(
    "s3_custom_buckets_reconcile_duration_seconds",
    "Duration of reconciliation passes in seconds",
    ["kind"],
    buckets=[0.1, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0],
)

# S3 operation metrics
bucket_operations_total = Counter(
    "s3_custom_buckets_bucket_operations_total",
    "Total number of S3 bucket operations",
    ["operation", "result"],
)

# Transient-failure retries drawn from the retry budget
retry_total = Counter(
    "s3_custom_buckets_retry_total",
    "Total number of retries after a transient backend failure",
    ["operation"],
)

# API call metrics
api_call_duration_seconds = Histogram(
    "s3_custom_buckets_api_call_duration_seconds",
    "Duration of storage API calls in seconds",
    ["operation"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.5, 5.0],
)

error_total = Counter(
    "s3_custom_buckets_error_total",
    "Total number of errors that ended a reconciliation pass",
    ["kind", "error_type"],
)
