"""
Schema Model

Static layout descriptors for structs and tagged unions.

Layout rules (frozen):
  - Struct: fields in declaration order, each a fixed-width little-endian
    unsigned integer (u8/u16/u32/u64/u128) or a fixed-length byte run.
  - Enum: one discriminant byte equal to the variant's zero-based
    declaration index, followed by the variant's payload fields (if any).
  - No padding, no separators, no length prefixes.

Schemas are built once and passed explicitly to encode/decode/size_of.
There is no global table keyed by type name.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from ..core.registry import PRIMITIVE_WIDTHS, param_registry
from .errors import SchemaError, UnknownVariantError, UnknownDiscriminantError

BYTES_KIND = "bytes"
DISCRIMINANT_WIDTH = param_registry()["discriminant_bytes"]
MAX_VARIANTS = param_registry()["max_variants"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Field:
    """One named field with a fixed wire width."""

    name: str
    kind: str
    length: int | None = None  # only for kind == "bytes"

    def __post_init__(self):
        if not self.name:
            raise SchemaError("Field name must be non-empty")
        if self.kind == BYTES_KIND:
            if not isinstance(self.length, int) or self.length <= 0:
                raise SchemaError(
                    f"Field '{self.name}': bytes fields need a positive length, got {self.length!r}"
                )
        elif self.kind in PRIMITIVE_WIDTHS:
            if self.length is not None:
                raise SchemaError(
                    f"Field '{self.name}': length only applies to bytes fields"
                )
        else:
            raise SchemaError(
                f"Field '{self.name}': unknown kind {self.kind!r}. "
                f"Allowed: {sorted(PRIMITIVE_WIDTHS)} or '{BYTES_KIND}'"
            )

    @property
    def width(self) -> int:
        if self.kind == BYTES_KIND:
            return self.length
        return PRIMITIVE_WIDTHS[self.kind]


def u8(name: str) -> Field:
    return Field(name, "u8")


def u16(name: str) -> Field:
    return Field(name, "u16")


def u32(name: str) -> Field:
    return Field(name, "u32")


def u64(name: str) -> Field:
    return Field(name, "u64")


def u128(name: str) -> Field:
    return Field(name, "u128")


def fixed_bytes(name: str, length: int) -> Field:
    """A raw byte run of exactly ``length`` bytes (e.g. a 32-byte public key)."""
    return Field(name, BYTES_KIND, length)


def _freeze_fields(owner: str, fields: Iterable[Field]) -> tuple[Field, ...]:
    frozen = tuple(fields)
    seen = set()
    for f in frozen:
        if not isinstance(f, Field):
            raise SchemaError(f"'{owner}': expected Field, got {type(f).__name__}")
        if f.name in seen:
            raise SchemaError(f"'{owner}': duplicate field name '{f.name}'")
        seen.add(f.name)
    return frozen


@dataclass(frozen=True)
class StructSchema:
    """Ordered, fixed list of fields. Field order is the wire order."""

    name: str
    fields: tuple[Field, ...]

    def __post_init__(self):
        object.__setattr__(self, "fields", _freeze_fields(self.name, self.fields))

    @property
    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]

    @property
    def payload_size(self) -> int:
        return sum(f.width for f in self.fields)


@dataclass(frozen=True)
class Variant:
    """A named enum variant; an empty field tuple means tag only."""

    name: str
    fields: tuple[Field, ...] = ()

    def __post_init__(self):
        if not self.name:
            raise SchemaError("Variant name must be non-empty")
        object.__setattr__(self, "fields", _freeze_fields(self.name, self.fields))

    @property
    def has_payload(self) -> bool:
        return bool(self.fields)

    @property
    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]

    @property
    def payload_size(self) -> int:
        return sum(f.width for f in self.fields)


@dataclass(frozen=True)
class EnumSchema:
    """
    Ordered list of variants.

    The discriminant of a variant is its index in ``variants``; the order is
    part of the wire contract and must never change for a deployed program.
    """

    name: str
    variants: tuple[Variant, ...]
    _by_name: dict = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        variants = tuple(self.variants)
        if not variants:
            raise SchemaError(f"Enum '{self.name}' declares no variants")
        if len(variants) > MAX_VARIANTS:
            raise SchemaError(
                f"Enum '{self.name}' declares {len(variants)} variants; "
                f"a one-byte discriminant allows {MAX_VARIANTS}"
            )
        by_name = {}
        for index, variant in enumerate(variants):
            if not isinstance(variant, Variant):
                raise SchemaError(
                    f"Enum '{self.name}': expected Variant, got {type(variant).__name__}"
                )
            if variant.name in by_name:
                raise SchemaError(f"Enum '{self.name}': duplicate variant '{variant.name}'")
            by_name[variant.name] = index
        object.__setattr__(self, "variants", variants)
        object.__setattr__(self, "_by_name", by_name)

    @property
    def variant_names(self) -> list[str]:
        return [v.name for v in self.variants]

    def discriminant_of(self, variant_name: str) -> int:
        """Declaration index of ``variant_name``."""
        try:
            return self._by_name[variant_name]
        except (KeyError, TypeError):
            logger.debug("%s: unknown variant %r", self.name, variant_name)
            raise UnknownVariantError(self.name, variant_name) from None

    def variant_named(self, variant_name: str) -> Variant:
        return self.variants[self.discriminant_of(variant_name)]

    def variant_at(self, discriminant: int) -> Variant:
        if 0 <= discriminant < len(self.variants):
            return self.variants[discriminant]
        raise UnknownDiscriminantError(self.name, discriminant, len(self.variants))


Schema = StructSchema | EnumSchema


@dataclass(frozen=True, eq=False)
class EnumValue:
    """
    A tagged-union value: explicit variant name plus its payload fields.

    Unit variants carry an empty mapping and also compare equal to their
    bare variant name, the other form encode accepts for them. Field values
    are ints, or bytes for fixed byte fields.
    """

    variant: str
    fields: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "fields", dict(self.fields))

    def __getitem__(self, name: str) -> Any:
        return self.fields[name]

    def __eq__(self, other):
        if isinstance(other, EnumValue):
            return (self.variant, self.fields) == (other.variant, other.fields)
        if isinstance(other, str):
            return not self.fields and self.variant == other
        return NotImplemented

    # fields is a plain dict
    __hash__ = None

    @classmethod
    def of(cls, variant: str, **fields: Any) -> "EnumValue":
        """Shorthand: ``EnumValue.of("IncrementNumber", amount=1337)``."""
        return cls(variant, fields)
