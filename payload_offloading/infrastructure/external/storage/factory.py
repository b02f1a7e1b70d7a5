"""Storage factory: builds the boto3 client, S3 accessors and payload stores."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from payload_offloading.application.services.payload_store import S3BackedPayloadStore
from payload_offloading.application.services.payload_store_async import (
    S3BackedPayloadStoreAsync,
)
from payload_offloading.domain.exceptions import ConfigurationException
from payload_offloading.infrastructure.external.storage.s3_async_dao import S3AsyncDao
from payload_offloading.infrastructure.external.storage.s3_dao import S3Dao

if TYPE_CHECKING:
    from payload_offloading.core.config import Settings
    from payload_offloading.core.storage_configuration import PayloadStorageConfiguration


class StorageFactory:
    """Factory for S3 clients, accessors and payload stores.

    Every component receives read-only values at construction; none keeps
    a reference to Settings or to the builder.
    """

    @staticmethod
    def create_s3_client(settings: "Settings | None" = None) -> Any:
        """Create a boto3 S3 client from settings.

        Args:
            settings: Settings; if None, uses get_settings().

        Returns:
            boto3 S3 client. Credentials fall back to env/IAM when not set.
        """
        import boto3

        from payload_offloading.core.config import get_settings

        s = settings or get_settings()
        extra = {} if s.s3_endpoint_url is None else {"endpoint_url": s.s3_endpoint_url}
        return boto3.client(
            "s3",
            region_name=s.s3_region,
            aws_access_key_id=s.s3_access_key,
            aws_secret_access_key=(
                s.s3_secret_key.get_secret_value() if s.s3_secret_key else None
            ),
            **extra,
        )

    @staticmethod
    def create_dao(s3_client: Any, configuration: "PayloadStorageConfiguration") -> S3Dao:
        return S3Dao(
            s3_client,
            server_side_encryption_strategy=configuration.server_side_encryption_strategy,
            object_canned_acl=configuration.object_canned_acl,
        )

    @staticmethod
    def create_async_dao(
        s3_client: Any, configuration: "PayloadStorageConfiguration"
    ) -> S3AsyncDao:
        return S3AsyncDao(
            s3_client,
            server_side_encryption_strategy=configuration.server_side_encryption_strategy,
            object_canned_acl=configuration.object_canned_acl,
        )

    @staticmethod
    def create_payload_store(
        configuration: "PayloadStorageConfiguration | None" = None,
        s3_client: Any | None = None,
    ) -> S3BackedPayloadStore:
        """Create a blocking payload store.

        Args:
            configuration: Storage configuration; if None, built from get_settings().
            s3_client: boto3 S3 client; if None, created from get_settings().

        Raises:
            ConfigurationException: Payload support is disabled.
        """
        configuration, s3_client = StorageFactory._resolve(configuration, s3_client)
        return S3BackedPayloadStore(
            StorageFactory.create_dao(s3_client, configuration),
            configuration.s3_bucket_name or "",
        )

    @staticmethod
    def create_payload_store_async(
        configuration: "PayloadStorageConfiguration | None" = None,
        s3_client: Any | None = None,
    ) -> S3BackedPayloadStoreAsync:
        """Create an asyncio payload store. Same arguments as create_payload_store()."""
        configuration, s3_client = StorageFactory._resolve(configuration, s3_client)
        return S3BackedPayloadStoreAsync(
            StorageFactory.create_async_dao(s3_client, configuration),
            configuration.s3_bucket_name or "",
        )

    @staticmethod
    def _resolve(
        configuration: "PayloadStorageConfiguration | None",
        s3_client: Any | None,
    ) -> tuple["PayloadStorageConfiguration", Any]:
        from payload_offloading.core.config import get_settings

        if configuration is None:
            configuration = get_settings().to_storage_configuration()
        if not configuration.payload_support_enabled or not configuration.s3_bucket_name:
            raise ConfigurationException(
                "Payload support is disabled. Set PAYLOAD_OFFLOADING_S3_BUCKET "
                "or enable it with with_payload_support_enabled().",
                field="s3_bucket_name",
            )
        if s3_client is None:
            s3_client = StorageFactory.create_s3_client()
        return configuration, s3_client
