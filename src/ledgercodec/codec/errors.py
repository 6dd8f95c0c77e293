"""Codec error kinds. All are terminal for the call that raised them."""


class CodecError(Exception):
    """Base class for encode/decode/size failures."""
    pass


class SchemaError(CodecError):
    """Raised when a struct or enum declaration is malformed."""
    pass


class UnknownVariantError(CodecError):
    """Raised when a variant name is not declared on the enum schema."""

    def __init__(self, schema_name: str, variant: object):
        self.schema_name = schema_name
        self.variant = variant
        super().__init__(f"Unknown variant {variant!r} for enum '{schema_name}'")


class UnknownDiscriminantError(CodecError):
    """Raised when a decoded tag byte has no matching variant."""

    def __init__(self, schema_name: str, discriminant: int, variant_count: int):
        self.schema_name = schema_name
        self.discriminant = discriminant
        self.variant_count = variant_count
        super().__init__(
            f"Unknown discriminant {discriminant} for enum '{schema_name}' "
            f"({variant_count} variants declared)"
        )


class TruncatedInputError(CodecError):
    """Raised when the buffer ends before the schema's required bytes."""

    def __init__(self, schema_name: str, needed: int, available: int):
        self.schema_name = schema_name
        self.needed = needed
        self.available = available
        super().__init__(
            f"Truncated input for '{schema_name}': "
            f"need {needed} bytes, {available} available"
        )


class TrailingBytesError(CodecError):
    """Raised by exact decoding when bytes remain after the record."""

    def __init__(self, schema_name: str, trailing: int):
        self.schema_name = schema_name
        self.trailing = trailing
        super().__init__(f"{trailing} trailing bytes after '{schema_name}'")


class FieldValueError(CodecError):
    """Raised when a field value cannot be written at its declared width."""
    pass


class FingerprintMismatchError(CodecError):
    """Raised when a schema's layout fingerprint differs from the expected one."""

    def __init__(self, schema_name: str, expected: str, actual: str):
        self.schema_name = schema_name
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Layout fingerprint mismatch for '{schema_name}': "
            f"expected {expected[:16]}..., got {actual[:16]}..."
        )
