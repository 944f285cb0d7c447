"""Builder for declared bucket lists."""

from __future__ import annotations

from typing import Any

from ..models import BucketConfig, BucketSpec


def create_bucket_config_from_spec(config: dict[str, Any] | None) -> BucketConfig:
    """Create a BucketConfig from a declared ``config`` mapping.

    Keys that are missing or null stay ``None`` so the matching sub-resource
    is left alone. Empty mappings are kept as-is and still applied.

    Raises:
        ValueError: If a field has the wrong type
    """
    config = config or {}
    if not isinstance(config, dict):
        raise ValueError("bucket config must be a mapping")

    versioning = config.get("versioning")
    if versioning is not None and not isinstance(versioning, bool):
        raise ValueError("config.versioning must be a boolean")

    for key in ("policy", "publicAccess", "cors"):
        value = config.get(key)
        if value is not None and not isinstance(value, dict):
            raise ValueError(f"config.{key} must be a mapping")

    return BucketConfig(
        server_side_encryption=config.get("serverSideEncryption"),
        kms_master_key_id=config.get("kmsMasterKeyId"),
        versioning=versioning,
        policy=config.get("policy"),
        public_access=config.get("publicAccess"),
        cors=config.get("cors"),
    )


def create_bucket_specs_from_config(buckets: list[dict[str, Any]] | None) -> list[BucketSpec]:
    """Create the ordered list of BucketSpecs from declared configuration.

    Entries without a name are kept; the reconciler reports and skips them.

    Args:
        buckets: Declared bucket list, e.g. ``spec.buckets`` of a CustomBucketSet

    Returns:
        BucketSpecs in declaration order
    """
    if buckets is None:
        return []
    if not isinstance(buckets, list):
        raise ValueError("buckets must be a list")

    specs = []
    for index, bucket in enumerate(buckets):
        if not isinstance(bucket, dict):
            raise ValueError(f"buckets[{index}] must be a mapping")
        specs.append(
            BucketSpec(
                name=bucket.get("name") or None,
                config=create_bucket_config_from_spec(bucket.get("config")),
            )
        )
    return specs
