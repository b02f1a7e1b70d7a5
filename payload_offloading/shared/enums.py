"""Shared enumerations for payload offloading.

Cross-cutting enums used by configuration and the S3 accessors.
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class ObjectCannedACL(_ValuesMixin, str, Enum):
    """S3 canned ACLs accepted by put_object(ACL=...)."""

    PRIVATE = "private"
    PUBLIC_READ = "public-read"
    PUBLIC_READ_WRITE = "public-read-write"
    AUTHENTICATED_READ = "authenticated-read"
    AWS_EXEC_READ = "aws-exec-read"
    BUCKET_OWNER_READ = "bucket-owner-read"
    BUCKET_OWNER_FULL_CONTROL = "bucket-owner-full-control"


class SSEMode(_ValuesMixin, str, Enum):
    """Server-side encryption mode selectable from settings."""

    NONE = "none"
    AWS_MANAGED_CMK = "aws_managed_cmk"
    CUSTOMER_KEY = "customer_key"
