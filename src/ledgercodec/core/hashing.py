"""
BLAKE3 Hashing

Content hash for encoded buffers and schema fingerprints.

No seeding, no randomness, no timestamps.
"""

import blake3


def blake3_hash(data: bytes | bytearray | memoryview) -> str:
    """
    Return hex-encoded BLAKE3 digest of the byte stream.

    Args:
        data: Raw bytes to hash (any bytes-like object).

    Returns:
        str: Hexadecimal digest (64 characters for BLAKE3-256).

    Notes:
        - No seeding or personalization.
        - Output is always lowercase hex.
        - Same bytes, same hash.
    """
    hasher = blake3.blake3()
    hasher.update(bytes(data))
    return hasher.hexdigest()
