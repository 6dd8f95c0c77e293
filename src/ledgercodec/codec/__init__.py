"""
Binary codec: schema model, encoder, decoder, size table, layout fingerprint.

Little-endian fixed-width unsigned integers, one-byte discriminants,
no padding, no length prefixes.
"""

from .errors import (
    CodecError,
    SchemaError,
    UnknownVariantError,
    UnknownDiscriminantError,
    TruncatedInputError,
    TrailingBytesError,
    FieldValueError,
    FingerprintMismatchError,
)
from .schema import (
    Field,
    StructSchema,
    Variant,
    EnumSchema,
    EnumValue,
    u8,
    u16,
    u32,
    u64,
    u128,
    fixed_bytes,
)
from .encoder import encode, encode_into, encode_many
from .decoder import decode, decode_exact, decode_many
from .sizes import size_of, size_table, max_size
from .fingerprint import schema_layout, schema_fingerprint, check_fingerprint

__all__ = [
    # Errors
    "CodecError",
    "SchemaError",
    "UnknownVariantError",
    "UnknownDiscriminantError",
    "TruncatedInputError",
    "TrailingBytesError",
    "FieldValueError",
    "FingerprintMismatchError",

    # Schema
    "Field",
    "StructSchema",
    "Variant",
    "EnumSchema",
    "EnumValue",
    "u8",
    "u16",
    "u32",
    "u64",
    "u128",
    "fixed_bytes",

    # Encode / decode
    "encode",
    "encode_into",
    "encode_many",
    "decode",
    "decode_exact",
    "decode_many",

    # Sizes
    "size_of",
    "size_table",
    "max_size",

    # Fingerprint
    "schema_layout",
    "schema_fingerprint",
    "check_fingerprint",
]
