"""
Size Table

Exact encoded lengths computed from a schema alone, without a value.
Callers use these to size account allocations before any encode happens.

  struct            -> sum of field widths
  enum, variant v   -> 1 (discriminant) + sum of v's field widths
"""

from .schema import EnumSchema, StructSchema, Schema, DISCRIMINANT_WIDTH
from .errors import CodecError, UnknownVariantError


def size_of(schema: Schema, variant_name: str | None = None) -> int:
    """
    Number of bytes ``encode`` produces for this schema (and variant).

    Args:
        schema: StructSchema or EnumSchema.
        variant_name: Required for enums, must be omitted for structs.

    Returns:
        int: Exact byte length.

    Raises:
        UnknownVariantError: Enum without a variant name, or unknown name.
        CodecError: Struct given a variant name, or unsupported schema object.
    """
    if isinstance(schema, StructSchema):
        if variant_name is not None:
            raise CodecError(
                f"Struct '{schema.name}' has no variants (got {variant_name!r})"
            )
        return schema.payload_size

    if isinstance(schema, EnumSchema):
        if variant_name is None:
            raise UnknownVariantError(schema.name, None)
        return DISCRIMINANT_WIDTH + schema.variant_named(variant_name).payload_size

    raise CodecError(f"Unsupported schema object: {type(schema).__name__}")


def size_table(schema: Schema) -> int | dict[str, int]:
    """Full table: the int size of a struct, or {variant: size} for an enum."""
    if isinstance(schema, EnumSchema):
        return {v.name: DISCRIMINANT_WIDTH + v.payload_size for v in schema.variants}
    return size_of(schema)


def max_size(schema: Schema) -> int:
    """Largest encoded length any value of this schema can take."""
    table = size_table(schema)
    if isinstance(table, dict):
        return max(table.values())
    return table
