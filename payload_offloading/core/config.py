"""Environment configuration (settings) for payload offloading.

Uses pydantic-settings with .env support. Variables are prefixed with
PAYLOAD_OFFLOADING_ (e.g. PAYLOAD_OFFLOADING_S3_BUCKET). Settings are
only read at construction time; stores and accessors receive plain
values, never a reference to Settings.
"""

from functools import lru_cache

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from payload_offloading.core.constants import DEFAULT_PAYLOAD_SIZE_THRESHOLD
from payload_offloading.core.storage_configuration import (
    PayloadStorageConfiguration,
    PayloadStorageConfigurationBuilder,
)
from payload_offloading.infrastructure.external.storage.encryption import (
    ServerSideEncryptionFactory,
    ServerSideEncryptionStrategy,
)
from payload_offloading.shared.enums import ObjectCannedACL, SSEMode


class Settings(BaseSettings):
    """Payload offloading settings loaded from environment and .env.

    Offloading is enabled when s3_bucket is set.
    """

    debug: bool = False  # DEBUG level for setup_logging()

    # S3 client
    s3_bucket: str | None = None
    s3_region: str = "us-east-1"
    s3_endpoint_url: str | None = None
    s3_access_key: str | None = None
    s3_secret_key: SecretStr | None = None

    # Offload policy
    payload_size_threshold: int = Field(default=DEFAULT_PAYLOAD_SIZE_THRESHOLD, ge=0)
    always_through_s3: bool = False

    # Server-side encryption and ACL
    sse_mode: SSEMode = SSEMode.NONE
    sse_kms_key_id: str | None = None
    object_canned_acl: ObjectCannedACL | None = None

    model_config = SettingsConfigDict(
        env_prefix="PAYLOAD_OFFLOADING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_encryption(self) -> "Settings":
        """customer_key mode requires a KMS key id; other modes must not set one."""
        if self.sse_mode == SSEMode.CUSTOMER_KEY and not self.sse_kms_key_id:
            raise ValueError(
                "sse_kms_key_id is required when sse_mode is 'customer_key'. "
                "Set PAYLOAD_OFFLOADING_SSE_KMS_KEY_ID."
            )
        if self.sse_mode != SSEMode.CUSTOMER_KEY and self.sse_kms_key_id:
            raise ValueError(
                f"sse_kms_key_id is only used with sse_mode 'customer_key', got: {self.sse_mode.value!r}"
            )
        return self

    def server_side_encryption_strategy(self) -> ServerSideEncryptionStrategy | None:
        """Return the strategy for sse_mode (None for 'none')."""
        if self.sse_mode == SSEMode.AWS_MANAGED_CMK:
            return ServerSideEncryptionFactory.aws_managed_cmk()
        if self.sse_mode == SSEMode.CUSTOMER_KEY:
            return ServerSideEncryptionFactory.customer_key(self.sse_kms_key_id or "")
        return None

    def to_storage_configuration(self) -> PayloadStorageConfiguration:
        """Build the immutable storage configuration from these settings."""
        builder = (
            PayloadStorageConfigurationBuilder()
            .with_payload_size_threshold(self.payload_size_threshold)
            .with_always_through_s3(self.always_through_s3)
            .with_server_side_encryption(self.server_side_encryption_strategy())
            .with_object_canned_acl(self.object_canned_acl)
        )
        if self.s3_bucket:
            builder.with_payload_support_enabled(self.s3_bucket)
        return builder.build()


@lru_cache
def get_settings() -> Settings:
    """Return cached settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
