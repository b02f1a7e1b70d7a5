"""ID generators for offloaded objects."""

import uuid


def generate_s3_key() -> str:
    """Generate a fresh object key (random UUID4, canonical hyphenated form).

    No uniqueness check is made against the bucket; collisions of 122
    random bits are negligible.

    Returns:
        A new key string.
    """
    return str(uuid.uuid4())
