"""
Decoder

bytes -> (typed value, remainder), per schema.

The remainder is a memoryview over the unconsumed suffix of the input,
so several records packed into one buffer decode by chaining calls.
The input is never mutated or copied. Length is checked before any field
is read: a short buffer raises TruncatedInputError and no partial value
is ever returned.
"""

import logging
from typing import Any

from .schema import BYTES_KIND, EnumSchema, EnumValue, Field, Schema, StructSchema
from .errors import CodecError, TrailingBytesError, TruncatedInputError

logger = logging.getLogger(__name__)

BytesLike = bytes | bytearray | memoryview


def decode(schema: Schema, buffer: BytesLike) -> tuple[Any, memoryview]:
    """
    Decode one record from the front of ``buffer``.

    Returns:
        (value, remainder): dict of fields for a struct, EnumValue for an
        enum; remainder is a view over the bytes after the record.

    Raises:
        TruncatedInputError: Buffer shorter than the record.
        UnknownDiscriminantError: Tag byte matches no declared variant.
    """
    view = _as_view(buffer)

    if isinstance(schema, StructSchema):
        _require(schema.name, view, schema.payload_size)
        value, offset = _read_fields(schema.fields, view, 0)
        return value, view[offset:]

    if isinstance(schema, EnumSchema):
        _require(schema.name, view, 1)
        try:
            variant = schema.variant_at(view[0])
        except CodecError:
            logger.debug("decode %s: unknown discriminant %d", schema.name, view[0])
            raise
        _require(f"{schema.name}::{variant.name}", view, 1 + variant.payload_size)
        fields, offset = _read_fields(variant.fields, view, 1)
        return EnumValue(variant.name, fields), view[offset:]

    raise CodecError(f"Unsupported schema object: {type(schema).__name__}")


def decode_exact(schema: Schema, buffer: BytesLike) -> Any:
    """Decode one record that must span the whole buffer."""
    value, rest = decode(schema, buffer)
    if len(rest):
        logger.debug("decode %s: %d trailing bytes", schema.name, len(rest))
        raise TrailingBytesError(schema.name, len(rest))
    return value


def decode_many(schema: Schema, buffer: BytesLike) -> list[Any]:
    """Decode back-to-back records until the buffer is exhausted."""
    values = []
    rest = _as_view(buffer)
    while len(rest):
        value, rest = decode(schema, rest)
        values.append(value)
    return values


def _as_view(buffer: BytesLike) -> memoryview:
    view = memoryview(buffer)
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")
    return view


def _require(owner: str, view: memoryview, needed: int) -> None:
    if len(view) < needed:
        logger.debug("decode %s: need %d bytes, have %d", owner, needed, len(view))
        raise TruncatedInputError(owner, needed, len(view))


def _read_fields(fields: tuple[Field, ...], view: memoryview, offset: int) -> tuple[dict, int]:
    values = {}
    for f in fields:
        chunk = view[offset:offset + f.width]
        if f.kind == BYTES_KIND:
            values[f.name] = bytes(chunk)
        else:
            values[f.name] = int.from_bytes(chunk, byteorder='little', signed=False)
        offset += f.width
    return values, offset
