"""Server-side encryption strategies for S3 put requests.

A strategy decorates the keyword arguments of a boto3 put_object call
before it is sent. Use ServerSideEncryptionFactory to obtain one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

SSE_AWS_KMS = "aws:kms"


@runtime_checkable
class ServerSideEncryptionStrategy(Protocol):
    """Protocol for SSE decoration of put_object requests."""

    def decorate(self, put_object_request: dict[str, Any]) -> None:
        """Add encryption parameters to put_object keyword arguments in place."""
        ...


@dataclass(frozen=True)
class NoEncryption:
    """Leaves the request untouched (bucket default encryption applies)."""

    def decorate(self, put_object_request: dict[str, Any]) -> None:
        return None


@dataclass(frozen=True)
class AwsManagedCmk:
    """SSE-KMS with the AWS managed key for S3."""

    def decorate(self, put_object_request: dict[str, Any]) -> None:
        put_object_request["ServerSideEncryption"] = SSE_AWS_KMS


@dataclass(frozen=True)
class CustomerKey:
    """SSE-KMS with a customer managed key (id, ARN or alias)."""

    aws_kms_key_id: str

    def decorate(self, put_object_request: dict[str, Any]) -> None:
        put_object_request["ServerSideEncryption"] = SSE_AWS_KMS
        put_object_request["SSEKMSKeyId"] = self.aws_kms_key_id


class ServerSideEncryptionFactory:
    """The only supported ways to build an encryption strategy."""

    @staticmethod
    def none() -> ServerSideEncryptionStrategy:
        return NoEncryption()

    @staticmethod
    def aws_managed_cmk() -> ServerSideEncryptionStrategy:
        return AwsManagedCmk()

    @staticmethod
    def customer_key(aws_kms_key_id: str) -> ServerSideEncryptionStrategy:
        return CustomerKey(aws_kms_key_id)

