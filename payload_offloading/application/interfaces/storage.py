"""S3 accessor interfaces (ports). Implementations: S3Dao, S3AsyncDao (infrastructure)."""

from collections.abc import Iterable
from typing import Protocol


class IS3Dao(Protocol):
    """Blocking put/get/delete of text payloads in S3.

    All methods raise BackendError on any S3 failure.
    """

    def get_text_from_s3(self, s3_bucket_name: str, s3_key: str) -> str:
        """Return the object's content decoded as UTF-8."""
        ...

    def store_text_in_s3(self, s3_bucket_name: str, s3_key: str, payload: str) -> None:
        """Write payload, applying configured encryption and ACL."""
        ...

    def delete_payload_from_s3(self, s3_bucket_name: str, s3_key: str) -> None:
        """Delete one object."""
        ...

    def delete_payloads_from_s3(self, s3_bucket_name: str, s3_keys: Iterable[str]) -> None:
        """Delete many objects of one bucket with batch requests."""
        ...


class IS3AsyncDao(Protocol):
    """Coroutine twin of IS3Dao; failures are raised when awaited."""

    async def get_text_from_s3(self, s3_bucket_name: str, s3_key: str) -> str:
        ...

    async def store_text_in_s3(self, s3_bucket_name: str, s3_key: str, payload: str) -> None:
        ...

    async def delete_payload_from_s3(self, s3_bucket_name: str, s3_key: str) -> None:
        ...

    async def delete_payloads_from_s3(
        self, s3_bucket_name: str, s3_keys: Iterable[str]
    ) -> None:
        ...
