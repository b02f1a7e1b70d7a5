"""Fixtures for payload offloading unit tests.

S3 calls go through a real boto3 client with botocore's Stubber attached,
so request parameters are validated against the S3 model without network.
"""

from collections.abc import Callable, Iterator
from io import BytesIO

import boto3
import pytest
from botocore.response import StreamingBody
from botocore.stub import Stubber


@pytest.fixture
def s3_client():
    """boto3 S3 client with dummy credentials (never contacts AWS)."""
    return boto3.client(
        "s3",
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )


@pytest.fixture
def s3_stub(s3_client) -> Iterator[Stubber]:
    """Activated Stubber; asserts every queued response was consumed."""
    with Stubber(s3_client) as stubber:
        yield stubber
        stubber.assert_no_pending_responses()


@pytest.fixture
def streaming_body() -> Callable[[bytes], StreamingBody]:
    """Factory for get_object Body values."""

    def _make(data: bytes) -> StreamingBody:
        return StreamingBody(BytesIO(data), len(data))

    return _make
