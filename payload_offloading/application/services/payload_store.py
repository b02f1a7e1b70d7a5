"""S3-backed payload store (blocking).

Generates object keys, delegates I/O to an S3 accessor and converts
between (bucket, key) and pointer text. BackendError from the accessor
propagates unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from payload_offloading.application.interfaces.storage import IS3Dao
from payload_offloading.domain.value_objects.payload_pointer import PayloadPointer
from payload_offloading.shared.telemetry.logging import get_logger
from payload_offloading.shared.utils.generators import generate_s3_key


def group_keys_by_bucket(pointers: Iterable[PayloadPointer]) -> dict[str, list[str]]:
    """Group decoded pointers into {bucket: [key, ...]}, first-seen order."""
    grouped: dict[str, list[str]] = {}
    for pointer in pointers:
        grouped.setdefault(pointer.s3_bucket_name, []).append(pointer.s3_key)
    return grouped


class S3BackedPayloadStore:
    """IPayloadStore over a single configured bucket."""

    def __init__(
        self,
        s3_dao: IS3Dao,
        s3_bucket_name: str,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize store.

        Args:
            s3_dao: Accessor used for all S3 calls.
            s3_bucket_name: Bucket new payloads are written to.
            logger: Optional logger; defaults to this module's logger.
        """
        self._s3_dao = s3_dao
        self._s3_bucket_name = s3_bucket_name
        self._logger = logger or get_logger(__name__)

    @property
    def s3_bucket_name(self) -> str:
        return self._s3_bucket_name

    def store_original_payload(self, payload: str, s3_key: str | None = None) -> str:
        if s3_key is None:
            s3_key = generate_s3_key()
        # Validate before the write so a bad key never reaches S3.
        pointer = PayloadPointer(self._s3_bucket_name, s3_key)
        self._s3_dao.store_text_in_s3(self._s3_bucket_name, s3_key, payload)
        self._logger.info(
            "S3 object created, Bucket name: %s, Object key: %s.", self._s3_bucket_name, s3_key
        )
        return pointer.to_json()

    def get_original_payload(self, payload_pointer: str) -> str:
        pointer = PayloadPointer.from_json(payload_pointer)
        original_payload = self._s3_dao.get_text_from_s3(pointer.s3_bucket_name, pointer.s3_key)
        self._logger.info(
            "S3 object read, Bucket name: %s, Object key: %s.",
            pointer.s3_bucket_name,
            pointer.s3_key,
        )
        return original_payload

    def delete_original_payload(self, payload_pointer: str) -> None:
        pointer = PayloadPointer.from_json(payload_pointer)
        self._s3_dao.delete_payload_from_s3(pointer.s3_bucket_name, pointer.s3_key)

    def delete_original_payloads(self, payload_pointers: Iterable[str]) -> None:
        # Decode everything first: one bad pointer means no S3 calls at all.
        pointers = [PayloadPointer.from_json(p) for p in payload_pointers]
        for s3_bucket_name, s3_keys in group_keys_by_bucket(pointers).items():
            self._s3_dao.delete_payloads_from_s3(s3_bucket_name, s3_keys)
