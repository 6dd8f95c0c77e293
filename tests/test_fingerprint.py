"""
Core & Fingerprint Tests

Verifies:
  - param_registry() keys and wire constants
  - blake3_hash determinism
  - schema_fingerprint is stable and tracks every layout change
  - check_fingerprint raises FingerprintMismatchError
  - configure_logging does not stack handlers
"""

import logging
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from ledgercodec.core import param_registry, blake3_hash, configure_logging
from ledgercodec.codec import (
    EnumSchema,
    FingerprintMismatchError,
    StructSchema,
    Variant,
    check_fingerprint,
    schema_fingerprint,
    schema_layout,
    u8,
    u32,
    u64,
)
from ledgercodec.programs import TestProgramInstruction, TestProgramState


# ═══════════════════════════════════════════════════════════════════════
# Registry & hashing
# ═══════════════════════════════════════════════════════════════════════

def test_param_registry_values():
    reg = param_registry()
    assert reg["endianness"] == "LE"
    assert reg["discriminant_bytes"] == 1
    assert reg["max_variants"] == 256
    assert reg["primitive_widths"] == {"u8": 1, "u16": 2, "u32": 4, "u64": 8, "u128": 16}
    assert reg["hash_algo"] == "BLAKE3"
    assert reg["default_freshness_tolerance_ms"] == 0


def test_param_registry_is_a_fresh_copy():
    reg = param_registry()
    reg["primitive_widths"]["u8"] = 99
    assert param_registry()["primitive_widths"]["u8"] == 1


def test_blake3_deterministic():
    h = blake3_hash(b"\x01\x39\x05")
    assert h == blake3_hash(b"\x01\x39\x05")
    assert len(h) == 64
    assert h != blake3_hash(b"\x01\x39\x06")


def test_blake3_accepts_memoryview():
    assert blake3_hash(memoryview(b"test")) == blake3_hash(b"test")


# ═══════════════════════════════════════════════════════════════════════
# Layout & fingerprint
# ═══════════════════════════════════════════════════════════════════════

def test_schema_layout():
    assert schema_layout(TestProgramState) == {
        "kind": "struct",
        "name": "TestProgramState",
        "fields": [["property1", "u64", 8], ["property2", "u64", 8]],
    }
    layout = schema_layout(TestProgramInstruction)
    assert [v["tag"] for v in layout["variants"]] == [0, 1, 2]
    assert layout["variants"][2]["fields"] == [["call_depth", "u8", 1], ["amount", "u64", 8]]


def test_fingerprint_stable():
    a = schema_fingerprint(TestProgramInstruction)
    b = schema_fingerprint(TestProgramInstruction)
    assert a == b
    assert len(a) == 64
    assert a == a.lower()


def test_fingerprint_same_for_equal_declarations():
    first = StructSchema("Pair", (u64("a"), u64("b")))
    second = StructSchema("Pair", (u64("a"), u64("b")))
    assert schema_fingerprint(first) == schema_fingerprint(second)


def test_fingerprint_tracks_field_order():
    ab = StructSchema("Pair", (u64("a"), u32("b")))
    ba = StructSchema("Pair", (u32("b"), u64("a")))
    assert schema_fingerprint(ab) != schema_fingerprint(ba)


def test_fingerprint_tracks_width():
    narrow = StructSchema("Counter", (u32("count"),))
    wide = StructSchema("Counter", (u64("count"),))
    assert schema_fingerprint(narrow) != schema_fingerprint(wide)


def test_fingerprint_tracks_variant_order():
    original = EnumSchema("Op", (Variant("Noop"), Variant("Bump", (u8("by"),))))
    swapped = EnumSchema("Op", (Variant("Bump", (u8("by"),)), Variant("Noop")))
    assert schema_fingerprint(original) != schema_fingerprint(swapped)


def test_fingerprint_struct_differs_from_enum():
    assert schema_fingerprint(TestProgramState) != schema_fingerprint(TestProgramInstruction)


def test_check_fingerprint_passes():
    expected = schema_fingerprint(TestProgramState)
    check_fingerprint(TestProgramState, expected)
    check_fingerprint(TestProgramState, expected.upper())


def test_check_fingerprint_mismatch():
    stale = schema_fingerprint(StructSchema("TestProgramState", (u64("property1"),)))
    with pytest.raises(FingerprintMismatchError) as exc:
        check_fingerprint(TestProgramState, stale)
    assert exc.value.schema_name == "TestProgramState"
    assert exc.value.expected == stale
    assert exc.value.actual == schema_fingerprint(TestProgramState)


# ═══════════════════════════════════════════════════════════════════════
# Logging
# ═══════════════════════════════════════════════════════════════════════

def test_configure_logging_idempotent():
    logger = configure_logging(logging.DEBUG)
    configure_logging(logging.DEBUG)
    ours = [h for h in logger.handlers if getattr(h, "_ledgercodec_stream", False)]
    assert len(ours) == 1
    assert logger.level == logging.DEBUG
    for h in ours:
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
