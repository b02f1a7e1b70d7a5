"""Pytest configuration and fixtures for payload offloading.

Integration tests need a reachable S3 (or S3-compatible) bucket configured
through PAYLOAD_OFFLOADING_* variables. Tests marked requires_s3 are
skipped when PAYLOAD_OFFLOADING_S3_BUCKET is not set; run without S3 via:
pytest -m 'not requires_s3'.
"""

from collections.abc import Iterator

import pytest

from payload_offloading.core.config import get_settings
from payload_offloading.core.storage_configuration import PayloadStorageConfiguration
from payload_offloading.infrastructure.external.storage import StorageFactory


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "requires_s3: needs a real S3 bucket (skipped when unset)")


@pytest.fixture
def s3_configuration() -> Iterator[PayloadStorageConfiguration]:
    """Storage configuration from the environment. Skips when no bucket is configured."""
    get_settings.cache_clear()
    configuration = get_settings().to_storage_configuration()
    if not configuration.payload_support_enabled:
        pytest.skip("S3 not configured: set PAYLOAD_OFFLOADING_S3_BUCKET")
    yield configuration
    get_settings.cache_clear()


@pytest.fixture
def live_s3_client(s3_configuration):
    """boto3 S3 client built from settings (real endpoint)."""
    return StorageFactory.create_s3_client()
