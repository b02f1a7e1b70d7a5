"""Payload storage configuration: immutable value plus fluent builder.

PayloadStorageConfiguration is what messaging clients hand to the
factory. It is frozen; use PayloadStorageConfigurationBuilder (or
model_copy(update=...)) to derive a changed copy.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from payload_offloading.core.constants import DEFAULT_PAYLOAD_SIZE_THRESHOLD
from payload_offloading.domain.exceptions import ConfigurationException
from payload_offloading.infrastructure.external.storage.encryption import (
    ServerSideEncryptionStrategy,
)
from payload_offloading.shared.enums import ObjectCannedACL
from payload_offloading.shared.telemetry.logging import get_logger
from payload_offloading.shared.utils.size import get_string_size_in_bytes

logger = get_logger(__name__)

BUCKET_REQUIRED_MSG = "S3 bucket name cannot be null."


class PayloadStorageConfiguration(BaseModel):
    """Where and how payloads are offloaded.

    Attributes:
        s3_bucket_name: Bucket for new payloads (required when enabled).
        payload_support_enabled: Whether offloading is on at all.
        payload_size_threshold: Payloads larger than this many bytes are offloaded.
        always_through_s3: Offload every payload regardless of size.
        server_side_encryption_strategy: Optional SSE decoration for puts.
        object_canned_acl: Optional canned ACL for puts.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    s3_bucket_name: str | None = None
    payload_support_enabled: bool = False
    payload_size_threshold: int = Field(default=DEFAULT_PAYLOAD_SIZE_THRESHOLD, ge=0)
    always_through_s3: bool = False
    server_side_encryption_strategy: ServerSideEncryptionStrategy | None = None
    object_canned_acl: ObjectCannedACL | None = None

    @model_validator(mode="after")
    def validate_bucket(self) -> PayloadStorageConfiguration:
        """Bucket name is required once payload support is enabled."""
        if self.payload_support_enabled and not self.s3_bucket_name:
            raise ValueError(BUCKET_REQUIRED_MSG)
        return self

    @property
    def is_object_canned_acl_defined(self) -> bool:
        return self.object_canned_acl is not None

    def requires_offload(self, payload_size: int) -> bool:
        """Return True if a payload of payload_size bytes must go to S3.

        Always False when payload support is disabled. Otherwise True when
        always_through_s3 is set or payload_size is strictly greater than
        payload_size_threshold.
        """
        if not self.payload_support_enabled:
            return False
        return self.always_through_s3 or payload_size > self.payload_size_threshold

    def requires_offload_text(self, payload: str) -> bool:
        """requires_offload() for a text payload measured as UTF-8."""
        return self.requires_offload(get_string_size_in_bytes(payload))


class PayloadStorageConfigurationBuilder:
    """Fluent builder for PayloadStorageConfiguration.

    Example:
        config = (
            PayloadStorageConfigurationBuilder()
            .with_payload_support_enabled("my-bucket")
            .with_payload_size_threshold(1024)
            .with_server_side_encryption(ServerSideEncryptionFactory.aws_managed_cmk())
            .build()
        )
    """

    def __init__(self) -> None:
        self._values: dict[str, Any] = dict(PayloadStorageConfiguration())

    @classmethod
    def from_configuration(
        cls, configuration: PayloadStorageConfiguration
    ) -> PayloadStorageConfigurationBuilder:
        """Start from a copy of an existing configuration."""
        builder = cls()
        builder._values = dict(configuration)
        return builder

    def with_payload_support_enabled(self, s3_bucket_name: str) -> PayloadStorageConfigurationBuilder:
        """Enable offloading to s3_bucket_name (must exist and be configured in S3)."""
        if not s3_bucket_name:
            logger.error(BUCKET_REQUIRED_MSG)
            raise ConfigurationException(BUCKET_REQUIRED_MSG, field="s3_bucket_name")
        if self._values["payload_support_enabled"]:
            logger.warning("Payload support is already enabled. Overwriting S3 bucket name.")
        self._values["s3_bucket_name"] = s3_bucket_name
        self._values["payload_support_enabled"] = True
        logger.info("Payload support enabled.")
        return self

    def with_payload_support_disabled(self) -> PayloadStorageConfigurationBuilder:
        self._values["s3_bucket_name"] = None
        self._values["payload_support_enabled"] = False
        logger.info("Payload support disabled.")
        return self

    def with_payload_size_threshold(self, payload_size_threshold: int) -> PayloadStorageConfigurationBuilder:
        if payload_size_threshold < 0:
            raise ConfigurationException(
                "Payload size threshold must be non-negative.", field="payload_size_threshold"
            )
        self._values["payload_size_threshold"] = payload_size_threshold
        return self

    def with_always_through_s3(self, always_through_s3: bool) -> PayloadStorageConfigurationBuilder:
        self._values["always_through_s3"] = always_through_s3
        return self

    def with_server_side_encryption(
        self, strategy: ServerSideEncryptionStrategy | None
    ) -> PayloadStorageConfigurationBuilder:
        self._values["server_side_encryption_strategy"] = strategy
        return self

    def with_object_canned_acl(self, acl: ObjectCannedACL | str | None) -> PayloadStorageConfigurationBuilder:
        if acl is not None and acl not in ObjectCannedACL.values():
            raise ConfigurationException(
                f"Invalid object canned ACL: {acl!r}. "
                f"Must be one of: {', '.join(ObjectCannedACL.values())}",
                field="object_canned_acl",
            )
        self._values["object_canned_acl"] = ObjectCannedACL(acl) if acl is not None else None
        return self

    def build(self) -> PayloadStorageConfiguration:
        """Return the immutable configuration. The builder stays usable."""
        return PayloadStorageConfiguration(**self._values)
