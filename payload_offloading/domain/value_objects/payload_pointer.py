"""Payload pointer: the (bucket, key) reference that replaces an offloaded message body.

Wire format (shared with other payload-offloading clients):

    ["software.amazon.payloadoffloading.PayloadS3Pointer",{"s3BucketName":"b","s3Key":"k"}]

Decoding accepts the current type tag and the tags written by older
clients (POINTER_CLASS_NAMES). Unknown fields in the object are ignored.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from payload_offloading.core.constants import (
    POINTER_BUCKET_FIELD,
    POINTER_CLASS_NAME,
    POINTER_CLASS_NAMES,
    POINTER_KEY_FIELD,
)
from payload_offloading.domain.exceptions import EncodingError, MalformedPointerError
from payload_offloading.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class _PointerBody(BaseModel):
    """Shape of the pointer object on the wire."""

    model_config = ConfigDict(extra="ignore", frozen=True, strict=True)

    s3_bucket_name: str = Field(alias=POINTER_BUCKET_FIELD, min_length=1)
    s3_key: str = Field(alias=POINTER_KEY_FIELD, min_length=1)


@dataclass(frozen=True)
class PayloadPointer:
    """Value object for a stored payload location.

    Both fields are non-empty. Equality is structural.
    """

    s3_bucket_name: str
    s3_key: str

    def __post_init__(self) -> None:
        if not isinstance(self.s3_bucket_name, str) or not self.s3_bucket_name:
            raise ValueError("S3 bucket name must be a non-empty string")
        if not isinstance(self.s3_key, str) or not self.s3_key:
            raise ValueError("S3 key must be a non-empty string")

    def to_json(self) -> str:
        """Serialize to the tagged JSON wire format.

        Raises:
            EncodingError: If serialization fails.
        """
        body = {POINTER_BUCKET_FIELD: self.s3_bucket_name, POINTER_KEY_FIELD: self.s3_key}
        try:
            return json.dumps([POINTER_CLASS_NAME, body], separators=(",", ":"))
        except (TypeError, ValueError) as e:
            logger.error("Failed to convert S3 object pointer to text.", exc_info=True)
            raise EncodingError(str(e)) from e

    @classmethod
    def from_json(cls, text: str) -> PayloadPointer:
        """Parse pointer text.

        Raises:
            MalformedPointerError: If text is not a valid serialized pointer.
        """
        try:
            return cls._parse(text)
        except MalformedPointerError as e:
            logger.error("%s Reason: %s", e.message, e.details["reason"])
            raise

    @classmethod
    def try_from_json(cls, text: Any) -> PointerParseResult:
        """Parse pointer text without raising.

        Returns:
            PointerParseResult with either pointer or error set.
        """
        try:
            return PointerParseResult(pointer=cls._parse(text))
        except MalformedPointerError as e:
            return PointerParseResult(error=e)

    @classmethod
    def is_pointer(cls, text: Any) -> bool:
        """Return True if text decodes to a valid pointer."""
        return cls.try_from_json(text).ok

    @classmethod
    def _parse(cls, text: Any) -> PayloadPointer:
        if not isinstance(text, str):
            raise MalformedPointerError(f"expected str, got {type(text).__name__}")
        try:
            raw = json.loads(text)
        except ValueError as e:
            raise MalformedPointerError(f"invalid JSON: {e}") from e

        if not isinstance(raw, list) or len(raw) != 2:
            raise MalformedPointerError("expected [type tag, pointer object]")
        tag, raw = raw
        if not isinstance(tag, str) or tag not in POINTER_CLASS_NAMES:
            raise MalformedPointerError(f"unknown pointer type tag: {tag!r}")
        if not isinstance(raw, dict):
            raise MalformedPointerError(f"expected JSON object, got {type(raw).__name__}")

        try:
            body = _PointerBody.model_validate(raw)
        except ValidationError as e:
            reason = "; ".join(
                f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in e.errors()
            )
            raise MalformedPointerError(reason) from e
        return cls(body.s3_bucket_name, body.s3_key)


@dataclass(frozen=True)
class PointerParseResult:
    """Outcome of decoding pointer text: exactly one of pointer or error is set."""

    pointer: PayloadPointer | None = None
    error: MalformedPointerError | None = None

    @property
    def ok(self) -> bool:
        return self.pointer is not None
