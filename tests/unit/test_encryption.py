"""Tests for server-side encryption strategies (put_object decoration)."""

from typing import Any

import pytest

from payload_offloading.infrastructure.external.storage.encryption import (
    SSE_AWS_KMS,
    AwsManagedCmk,
    CustomerKey,
    NoEncryption,
    ServerSideEncryptionFactory,
    ServerSideEncryptionStrategy,
)


def _request() -> dict[str, Any]:
    return {"Bucket": "b", "Key": "k", "Body": b"payload"}


def test_no_encryption_leaves_request_untouched() -> None:
    request = _request()
    ServerSideEncryptionFactory.none().decorate(request)
    assert request == _request()


def test_aws_managed_cmk_sets_kms_without_key_id() -> None:
    request = _request()
    ServerSideEncryptionFactory.aws_managed_cmk().decorate(request)
    assert request["ServerSideEncryption"] == SSE_AWS_KMS == "aws:kms"
    assert "SSEKMSKeyId" not in request


def test_customer_key_sets_kms_and_key_id() -> None:
    request = _request()
    ServerSideEncryptionFactory.customer_key("kms-1").decorate(request)
    assert request["ServerSideEncryption"] == "aws:kms"
    assert request["SSEKMSKeyId"] == "kms-1"
    assert request["Body"] == b"payload"


@pytest.mark.parametrize(
    ("strategy", "expected_type"),
    [
        (ServerSideEncryptionFactory.none(), NoEncryption),
        (ServerSideEncryptionFactory.aws_managed_cmk(), AwsManagedCmk),
        (ServerSideEncryptionFactory.customer_key("k"), CustomerKey),
    ],
)
def test_factory_returns_strategies(strategy: Any, expected_type: type) -> None:
    assert isinstance(strategy, expected_type)
    assert isinstance(strategy, ServerSideEncryptionStrategy)


def test_strategies_are_value_objects() -> None:
    assert CustomerKey("a") == CustomerKey("a")
    assert CustomerKey("a") != CustomerKey("b")
    assert AwsManagedCmk() == AwsManagedCmk()
    with pytest.raises(AttributeError):
        CustomerKey("a").aws_kms_key_id = "b"  # type: ignore[misc]
