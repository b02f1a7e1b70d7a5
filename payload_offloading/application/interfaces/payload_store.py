"""Payload store interfaces (ports).

A payload store offloads message bodies to S3 and hands back a pointer
string that the messaging client sends in place of the body.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol


class IPayloadStore(Protocol):
    """Blocking payload store."""

    def store_original_payload(self, payload: str, s3_key: str | None = None) -> str:
        """Store payload (under s3_key, or a fresh random key) and return pointer text.

        Every call writes a new object; there is no deduplication.

        Raises:
            BackendError: S3 write failed.
        """
        ...

    def get_original_payload(self, payload_pointer: str) -> str:
        """Return the payload referenced by pointer text.

        Raises:
            MalformedPointerError: Pointer text is invalid (no S3 call made).
            BackendError: S3 read failed.
        """
        ...

    def delete_original_payload(self, payload_pointer: str) -> None:
        """Delete the payload referenced by pointer text.

        Raises:
            MalformedPointerError: Pointer text is invalid (no S3 call made).
            BackendError: S3 delete failed.
        """
        ...

    def delete_original_payloads(self, payload_pointers: Iterable[str]) -> None:
        """Delete many payloads with one batch delete per bucket.

        Raises:
            MalformedPointerError: Any pointer is invalid (no S3 call made).
            BackendError: A batch delete failed.
        """
        ...


class IPayloadStoreAsync(Protocol):
    """Coroutine twin of IPayloadStore; every error surfaces on await."""

    async def store_original_payload(self, payload: str, s3_key: str | None = None) -> str:
        ...

    async def get_original_payload(self, payload_pointer: str) -> str:
        ...

    async def delete_original_payload(self, payload_pointer: str) -> None:
        ...

    async def delete_original_payloads(self, payload_pointers: Iterable[str]) -> None:
        ...
