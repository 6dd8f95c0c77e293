"""
Codec Parameter Registry

Frozen constants for the wire format and the value helpers.
Every constant the codec relies on (byte order, discriminant width,
primitive widths, hash algorithm) is declared here once.

No environment lookups, no files, no optionals.
"""

WIRE_FORMAT_VERSION = "1"

# Primitive name -> width in bytes. Order is ascending width.
PRIMITIVE_WIDTHS = {
    "u8": 1,
    "u16": 2,
    "u32": 4,
    "u64": 8,
    "u128": 16,
}


def param_registry() -> dict:
    """
    Returns a frozen mapping of all constants used by the codec.

    Keys and values are JSON-serializable primitives or lists/dicts.
    wire_format_version is folded into every schema fingerprint.

    Returns:
        dict: Parameter mapping with exact keys and values.

    Raises:
        RegistryError: If any required key is missing (internal consistency check).
    """
    registry = {
        "wire_format_version": WIRE_FORMAT_VERSION,

        # Multi-byte integers are little-endian, unsigned
        "endianness": "LE",
        "signed_integers": False,

        # Tagged unions: one tag byte equal to the declaration index
        "discriminant_bytes": 1,
        "max_variants": 256,

        # No padding, no separators, no length prefixes
        "padding": "none",
        "length_prefix": "none",

        "primitive_widths": dict(PRIMITIVE_WIDTHS),

        # Freshness window default (exact timestamp match)
        "default_freshness_tolerance_ms": 0,

        # Hashing
        "hash_algo": "BLAKE3",
    }

    required_keys = {
        "wire_format_version", "endianness", "signed_integers",
        "discriminant_bytes", "max_variants", "padding", "length_prefix",
        "primitive_widths", "default_freshness_tolerance_ms", "hash_algo"
    }

    actual_keys = set(registry.keys())
    if actual_keys != required_keys:
        missing = required_keys - actual_keys
        extra = actual_keys - required_keys
        raise RegistryError(
            f"param_registry() key mismatch. Missing: {missing}, Extra: {extra}"
        )

    return registry


class RegistryError(Exception):
    """Raised when param_registry() has missing or unexpected keys."""
    pass
