"""Shared utilities: telemetry and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from payload_offloading.shared.telemetry import get_logger, setup_logging
from payload_offloading.shared.utils import (
    CountingSink,
    generate_s3_key,
    get_string_size_in_bytes,
)

__all__ = [
    "CountingSink",
    "generate_s3_key",
    "get_logger",
    "get_string_size_in_bytes",
    "setup_logging",
]
