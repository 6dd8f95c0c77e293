"""
ledgercodec

Deterministic binary codec for ledger program instructions and account
state, plus scaled-rational and freshness-windowed value helpers.
"""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from .codec import (
    CodecError,
    SchemaError,
    UnknownVariantError,
    UnknownDiscriminantError,
    TruncatedInputError,
    TrailingBytesError,
    FieldValueError,
    Field,
    StructSchema,
    Variant,
    EnumSchema,
    EnumValue,
    encode,
    decode,
    size_of,
)
from .values import ScaledRational, ZeroDivisorError, FreshValue

__all__ = [
    # Codec
    "CodecError",
    "SchemaError",
    "UnknownVariantError",
    "UnknownDiscriminantError",
    "TruncatedInputError",
    "TrailingBytesError",
    "FieldValueError",
    "Field",
    "StructSchema",
    "Variant",
    "EnumSchema",
    "EnumValue",
    "encode",
    "decode",
    "size_of",

    # Values
    "ScaledRational",
    "ZeroDivisorError",
    "FreshValue",
]
