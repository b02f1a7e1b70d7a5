"""Shared utilities: size measurement and key generation."""

from payload_offloading.shared.utils.generators import generate_s3_key
from payload_offloading.shared.utils.size import CountingSink, get_string_size_in_bytes

__all__ = [
    "CountingSink",
    "generate_s3_key",
    "get_string_size_in_bytes",
]
