"""Constants for the custom bucket reconciler."""

# API Group
API_GROUP = "s3.custombuckets.dev"
API_GROUP_VERSION = f"{API_GROUP}/v1alpha1"

# Resource Kinds
KIND_BUCKET_SET = "CustomBucketSet"

# Storage service resource type passed to the backend
RESOURCE_TYPE_S3 = "S3"

# Field Manager
FIELD_MANAGER = "s3-custom-buckets"

# Prefix for every reporter line
LOG_PREFIX = "Custom Bucket:"

# Retry policy
MAX_RETRIES = 3
TRANSIENT_STATUS_CODE = 404

# Waiter state used after bucket creation
STATE_BUCKET_EXISTS = "bucket_exists"

# Backend operations
OP_HEAD_BUCKET = "headBucket"
OP_CREATE_BUCKET = "createBucket"
OP_GET_BUCKET_ENCRYPTION = "getBucketEncryption"
OP_PUT_BUCKET_ENCRYPTION = "putBucketEncryption"
OP_GET_BUCKET_VERSIONING = "getBucketVersioning"
OP_PUT_BUCKET_VERSIONING = "putBucketVersioning"
OP_PUT_BUCKET_POLICY = "putBucketPolicy"
OP_PUT_PUBLIC_ACCESS_BLOCK = "putPublicAccessBlock"
OP_PUT_BUCKET_CORS = "putBucketCors"

# Condition Types
COND_READY = "Ready"
COND_APPLY_FAILED = "ApplyFailed"

# Event Reasons
EVENT_REASON_RECONCILE_STARTED = "ReconcileStarted"
EVENT_REASON_RECONCILE_SUCCEEDED = "ReconcileSucceeded"
EVENT_REASON_RECONCILE_FAILED = "ReconcileFailed"
EVENT_REASON_VALIDATE_FAILED = "ValidateFailed"
