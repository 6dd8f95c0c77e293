"""
Schema Fingerprint

A BLAKE3 digest that pins the wire layout of a schema.

Fingerprint input (exact):
  - Stable JSON (sorted keys, no whitespace, UTF-8) of
    {"wire_format_version": ..., "layout": schema_layout(schema)}
  - The layout lists fields in wire order as [name, kind, width] and
    variants with their tags, so reordering fields or variants, renaming
    them, or changing a width changes the fingerprint.

A client and a deployed program that agree on the fingerprint agree on
every byte the codec reads and writes.
"""

import json
import logging

from ..core import blake3_hash
from ..core.registry import WIRE_FORMAT_VERSION
from .errors import FingerprintMismatchError
from .schema import EnumSchema, Schema

logger = logging.getLogger(__name__)


def schema_layout(schema: Schema) -> dict:
    """JSON-safe description of the wire layout (names, kinds, widths, tags)."""

    def describe(fields):
        return [[f.name, f.kind, f.width] for f in fields]

    if isinstance(schema, EnumSchema):
        return {
            "kind": "enum",
            "name": schema.name,
            "variants": [
                {"tag": i, "name": v.name, "fields": describe(v.fields)}
                for i, v in enumerate(schema.variants)
            ],
        }
    return {"kind": "struct", "name": schema.name, "fields": describe(schema.fields)}


def schema_fingerprint(schema: Schema) -> str:
    """
    Hex BLAKE3 digest of the schema's wire layout.

    Args:
        schema: Struct or enum schema.

    Returns:
        str: 64-character lowercase hex digest.
    """
    document = {
        "wire_format_version": WIRE_FORMAT_VERSION,
        "layout": schema_layout(schema),
    }
    text = json.dumps(document, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return blake3_hash(text.encode("utf-8"))


def check_fingerprint(schema: Schema, expected: str) -> None:
    """
    Raise FingerprintMismatchError unless ``schema`` hashes to ``expected``.

    Comparison is case-insensitive on the hex digest.
    """
    actual = schema_fingerprint(schema)
    if actual != expected.lower():
        logger.debug("fingerprint %s: expected %s, got %s", schema.name, expected, actual)
        raise FingerprintMismatchError(schema.name, expected, actual)
