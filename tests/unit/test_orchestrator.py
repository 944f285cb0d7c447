"""Unit tests for the sequential bucket reconciler."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from s3_custom_buckets.models import BucketConfig, BucketSpec
from s3_custom_buckets.reconcilers.orchestrator import BucketReconciler
from s3_custom_buckets.services.s3.errors import TerminalBackendError


def bucket(name: str | None, **config) -> BucketSpec:
    return BucketSpec(name=name, config=BucketConfig(**config))


class TestBucketReconciler:
    """Test BucketReconciler.run."""

    @pytest.fixture
    def reconciler(self, backend, reporter) -> BucketReconciler:
        return BucketReconciler(backend, reporter=reporter)

    @pytest.mark.asyncio
    async def test_missing_name_skipped_without_backend_calls(self, reconciler, backend, reporter) -> None:
        result = await reconciler.run([bucket(None, versioning=True, server_side_encryption="AES256")])

        assert backend.calls == []
        assert reporter.lines == ["bucket name not provided"]
        assert result.skipped == 1
        assert result.reconciled == []
        assert result.succeeded

    @pytest.mark.asyncio
    async def test_missing_name_does_not_stop_later_buckets(self, reconciler, backend) -> None:
        result = await reconciler.run([bucket(None), bucket("assets")])

        assert backend.operations == ["headBucket"]
        assert result.reconciled == ["assets"]

    @pytest.mark.asyncio
    async def test_wait_timeout_does_not_stop_pass(self, reconciler, backend, reporter, not_found) -> None:
        backend.queue("headBucket", not_found("headBucket"))
        backend.wait_error = TimeoutError("waiter gave up")

        result = await reconciler.run([bucket("a"), bucket("b")])

        assert result.succeeded
        assert result.reconciled == ["a", "b"]
        assert reporter.errors == []

    @pytest.mark.asyncio
    async def test_full_pipeline_order(self, reconciler, backend, not_found) -> None:
        backend.queue("headBucket", not_found("headBucket"))
        backend.queue("getBucketEncryption", not_found("getBucketEncryption"))
        backend.queue("getBucketVersioning", {"Status": "Suspended"})

        result = await reconciler.run([
            bucket(
                "assets",
                server_side_encryption="AES256",
                versioning=True,
                policy={"Version": "2012-10-17", "Statement": []},
                public_access={"PublicAccessBlockConfiguration": {"BlockPublicAcls": True}},
                cors={"CORSConfiguration": {"CORSRules": []}},
            )
        ])

        assert backend.operations == [
            "headBucket",
            "createBucket",
            "getBucketEncryption",
            "putBucketEncryption",
            "getBucketVersioning",
            "putBucketVersioning",
            "putBucketPolicy",
            "putPublicAccessBlock",
            "putBucketCors",
        ]
        assert backend.wait_calls == [("assets", "bucket_exists")]
        assert result.reconciled == ["assets"]

    @pytest.mark.asyncio
    async def test_absent_settings_not_touched(self, reconciler, backend) -> None:
        await reconciler.run([bucket("assets")])

        assert backend.operations == ["headBucket"]

    @pytest.mark.asyncio
    async def test_empty_mappings_applied(self, reconciler, backend) -> None:
        await reconciler.run([bucket("assets", policy={}, public_access={}, cors={})])

        assert backend.operations == ["headBucket", "putBucketPolicy", "putPublicAccessBlock", "putBucketCors"]

    @pytest.mark.asyncio
    async def test_versioning_false_still_compared(self, reconciler, backend) -> None:
        backend.queue("getBucketVersioning", {"Status": "Enabled"})

        await reconciler.run([bucket("assets", versioning=False)])

        assert backend.params_for("putBucketVersioning") == [
            {"Bucket": "assets", "VersioningConfiguration": {"Status": "Suspended"}}
        ]

    @pytest.mark.asyncio
    async def test_buckets_processed_in_order(self, reconciler, backend) -> None:
        await reconciler.run([bucket("a", cors={}), bucket("b", cors={}), bucket("c", cors={})])

        assert backend.buckets_touched() == ["a", "a", "b", "b", "c", "c"]

    @pytest.mark.asyncio
    async def test_terminal_error_stops_the_run(self, reconciler, backend, reporter, access_denied) -> None:
        backend.queue("putBucketPolicy", {}, access_denied("putBucketPolicy"))

        result = await reconciler.run([
            bucket("first", policy={}),
            bucket("second", policy={}),
            bucket("third", policy={}),
        ])

        assert "third" not in backend.buckets_touched()
        assert result.reconciled == ["first"]
        assert result.failed == "second"
        assert result.error == "Access Denied"
        assert result.error_type == "TerminalBackendError"
        assert not result.succeeded
        assert len(reporter.errors) == 1
        assert reporter.errors[0].endswith("Access Denied")
        assert "Custom Bucket Create Error" in reporter.errors[0]

    @pytest.mark.asyncio
    async def test_retry_exhaustion_stops_the_run(self, reconciler, backend, reporter, not_found) -> None:
        backend.queue("getBucketVersioning", {"Status": "Suspended"})
        backend.queue("putBucketVersioning", *[not_found("putBucketVersioning") for _ in range(4)])

        result = await reconciler.run([bucket("first", versioning=True), bucket("second", cors={})])

        assert backend.operations.count("putBucketVersioning") == 4
        assert "second" not in backend.buckets_touched()
        remaining = [line for line in reporter.lines if line.startswith("Retries left")]
        assert remaining == ["Retries left = '2'", "Retries left = '1'", "Retries left = '0'"]
        assert result.failed == "first"
        assert reconciler.budget.remaining == 3
        assert len(reporter.errors) == 1

    @pytest.mark.asyncio
    async def test_create_failure_stops_the_run(self, reconciler, backend, not_found, access_denied) -> None:
        backend.queue("headBucket", not_found("headBucket"))
        backend.queue("createBucket", access_denied("createBucket"))

        result = await reconciler.run([bucket("first", cors={}), bucket("second")])

        assert backend.operations == ["headBucket", "createBucket"]
        assert result.failed == "first"

    @pytest.mark.asyncio
    async def test_error_message_sanitized(self, reconciler, backend, reporter) -> None:
        backend.queue(
            "putBucketCors",
            TerminalBackendError("bad request session_token: abc123", status_code=400),
        )

        result = await reconciler.run([bucket("first", cors={})])

        assert "abc123" not in result.error
        assert "abc123" not in reporter.errors[0]

    @pytest.mark.asyncio
    async def test_each_bucket_traced(self, reconciler, backend) -> None:
        with patch("s3_custom_buckets.reconcilers.orchestrator.trace_span") as mock_span:
            await reconciler.run([bucket("a"), bucket("b")])

        assert [call.kwargs["attributes"]["bucket.name"] for call in mock_span.call_args_list] == ["a", "b"]
