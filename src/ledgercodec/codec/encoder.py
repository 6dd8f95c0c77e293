"""
Encoder

Typed value -> bytes, per schema.

Format (exact):
  - Struct: each field at its declared width, little-endian, declared order.
  - Enum: 1 byte discriminant (declaration index), then the payload fields.

The output is written into one bytearray pre-sized from the size table;
there is no segment chaining or concatenation step.
"""

import logging
from typing import Any, Iterable, Mapping

from .schema import (
    BYTES_KIND,
    EnumSchema,
    EnumValue,
    Field,
    Schema,
    StructSchema,
)
from .sizes import size_of
from .errors import CodecError, FieldValueError, UnknownVariantError

logger = logging.getLogger(__name__)


def encode(schema: Schema, value: Any) -> bytes:
    """
    Encode ``value`` according to ``schema``.

    Args:
        schema: StructSchema or EnumSchema.
        value: Mapping of field values for a struct; EnumValue (or the bare
            variant name of a unit variant) for an enum.

    Returns:
        bytes: Exactly ``size_of(schema, variant)`` bytes.

    Raises:
        UnknownVariantError: Enum value names an undeclared variant.
        FieldValueError: A field is missing, unexpected, or does not fit its width.
    """
    buf = bytearray(_encoded_size(schema, value))
    encode_into(schema, value, buf, 0)
    return bytes(buf)


def encode_into(schema: Schema, value: Any, buffer: bytearray, offset: int = 0) -> int:
    """
    Write the encoding of ``value`` into ``buffer`` starting at ``offset``.

    Returns:
        int: Offset just past the written bytes.

    Raises:
        CodecError: If ``buffer`` is too small for the record.
    """
    size = _encoded_size(schema, value)
    if offset < 0 or offset + size > len(buffer):
        raise CodecError(
            f"Buffer too small for '{schema.name}': need {size} bytes at offset {offset}, "
            f"buffer length {len(buffer)}"
        )

    if isinstance(schema, StructSchema):
        return _write_fields(schema.name, schema.fields, value, buffer, offset)

    variant_name, fields = _split_enum_value(schema, value)
    discriminant = schema.discriminant_of(variant_name)
    variant = schema.variants[discriminant]
    buffer[offset] = discriminant
    return _write_fields(
        f"{schema.name}::{variant.name}", variant.fields, fields, buffer, offset + 1
    )


def encode_many(schema: Schema, values: Iterable[Any]) -> bytes:
    """Encode records back-to-back into one buffer (no separators)."""
    values = list(values)
    total = sum(_encoded_size(schema, v) for v in values)
    buf = bytearray(total)
    offset = 0
    for value in values:
        offset = encode_into(schema, value, buf, offset)
    return bytes(buf)


def _encoded_size(schema: Schema, value: Any) -> int:
    if isinstance(schema, EnumSchema):
        variant_name, _ = _split_enum_value(schema, value)
        return size_of(schema, variant_name)
    return size_of(schema)


def _split_enum_value(schema: EnumSchema, value: Any) -> tuple[str, Mapping[str, Any]]:
    """Return (variant name, payload mapping) for an enum value."""
    if isinstance(value, EnumValue):
        return value.variant, value.fields
    if isinstance(value, str):
        return value, {}
    logger.debug("encode %s: unrecognized enum value %r", schema.name, value)
    raise UnknownVariantError(schema.name, value)


def _write_fields(
    owner: str,
    fields: tuple[Field, ...],
    values: Mapping[str, Any],
    buffer: bytearray,
    offset: int
) -> int:
    if not isinstance(values, Mapping):
        raise FieldValueError(
            f"'{owner}': expected a mapping of field values, got {type(values).__name__}"
        )

    declared = {f.name for f in fields}
    extra = [k for k in values if k not in declared]
    if extra:
        logger.debug("encode %s: unexpected fields %s", owner, extra)
        raise FieldValueError(f"'{owner}': unexpected fields {sorted(extra)}")

    for f in fields:
        if f.name not in values:
            logger.debug("encode %s: missing field %s", owner, f.name)
            raise FieldValueError(f"'{owner}': missing field '{f.name}'")
        chunk = _field_bytes(owner, f, values[f.name])
        buffer[offset:offset + f.width] = chunk
        offset += f.width
    return offset


def _field_bytes(owner: str, f: Field, v: Any) -> bytes:
    if f.kind == BYTES_KIND:
        if not isinstance(v, (bytes, bytearray, memoryview)):
            raise FieldValueError(
                f"'{owner}.{f.name}': expected bytes, got {type(v).__name__}"
            )
        raw = bytes(v)
        if len(raw) != f.length:
            raise FieldValueError(
                f"'{owner}.{f.name}': expected {f.length} bytes, got {len(raw)}"
            )
        return raw

    # bool is an int subclass but never a valid wire integer here
    if isinstance(v, bool) or not isinstance(v, int):
        raise FieldValueError(
            f"'{owner}.{f.name}': expected int for {f.kind}, got {type(v).__name__}"
        )
    try:
        return v.to_bytes(f.width, byteorder='little', signed=False)
    except OverflowError:
        logger.debug("encode %s: %s=%d does not fit %s", owner, f.name, v, f.kind)
        raise FieldValueError(
            f"'{owner}.{f.name}': value {v} does not fit unsigned {f.kind}"
        ) from None
