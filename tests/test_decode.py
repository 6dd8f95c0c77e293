"""
Decoder Tests

Verifies:
  - Round-trip for every test program variant and the state struct
  - Bare-name unit variants round-trip; EnumValue is unhashable
  - Remainder is an uncopied view over the input suffix
  - Chained decode of back-to-back records
  - TruncatedInputError on short buffers (never a partial value)
  - UnknownDiscriminantError on foreign tag bytes
  - decode_exact / decode_many
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from ledgercodec.codec import (
    EnumValue,
    StructSchema,
    TrailingBytesError,
    TruncatedInputError,
    UnknownDiscriminantError,
    decode,
    decode_exact,
    decode_many,
    encode,
    encode_many,
    fixed_bytes,
    u8,
    u32,
)
from ledgercodec.programs import (
    TestProgramInstruction,
    TestProgramState,
    hello_world,
    increment_number,
    recurse_then_increment_number,
)


INSTRUCTIONS = [
    hello_world(),
    increment_number(0),
    increment_number(1337),
    increment_number(2 ** 64 - 1),
    recurse_then_increment_number(0, 0),
    recurse_then_increment_number(255, 42),
]


# ═══════════════════════════════════════════════════════════════════════
# Round-trip
# ═══════════════════════════════════════════════════════════════════════

@pytest.mark.parametrize("value", INSTRUCTIONS, ids=lambda v: f"{v.variant}")
def test_instruction_round_trip(value):
    decoded, rest = decode(TestProgramInstruction, encode(TestProgramInstruction, value))
    assert decoded == value
    assert len(rest) == 0


def test_state_round_trip():
    state = {"property1": 1337, "property2": 2674}
    decoded, rest = decode(TestProgramState, encode(TestProgramState, state))
    assert decoded == state
    assert bytes(rest) == b""


def test_decoded_unit_variant_is_enum_value():
    decoded, _ = decode(TestProgramInstruction, b"\x00")
    assert decoded == EnumValue("HelloWorld")
    assert decoded.fields == {}


def test_bare_name_round_trip():
    decoded, rest = decode(TestProgramInstruction, encode(TestProgramInstruction, "HelloWorld"))
    assert decoded == "HelloWorld"
    assert "HelloWorld" == decoded
    assert len(rest) == 0


def test_payload_variant_never_equals_bare_name():
    assert increment_number(0) != "IncrementNumber"
    assert EnumValue("HelloWorld") != "IncrementNumber"


def test_enum_value_unhashable():
    with pytest.raises(TypeError):
        hash(EnumValue("HelloWorld"))
    with pytest.raises(TypeError):
        {increment_number(1): "x"}


def test_decode_known_bytes():
    decoded, _ = decode(TestProgramInstruction, bytes([0x01, 0x39, 0x05, 0, 0, 0, 0, 0, 0]))
    assert decoded.variant == "IncrementNumber"
    assert decoded["amount"] == 1337


def test_fixed_bytes_round_trip():
    schema = StructSchema("Owner", (fixed_bytes("owner", 32), u32("bump")))
    value = {"owner": bytes(range(32)), "bump": 254}
    decoded, rest = decode(schema, encode(schema, value))
    assert decoded == value
    assert isinstance(decoded["owner"], bytes)
    assert len(rest) == 0


# ═══════════════════════════════════════════════════════════════════════
# Remainder and chaining
# ═══════════════════════════════════════════════════════════════════════

def test_remainder_is_view_not_copy():
    buf = bytearray(encode(TestProgramInstruction, hello_world()) + b"\x07\x08")
    _, rest = decode(TestProgramInstruction, buf)
    assert isinstance(rest, memoryview)
    assert bytes(rest) == b"\x07\x08"
    buf[1] = 0x09
    assert rest[0] == 0x09


def test_input_not_mutated():
    data = encode(TestProgramInstruction, increment_number(77))
    before = bytes(data)
    decode(TestProgramInstruction, data)
    assert data == before


def test_chained_decode_matches_independent():
    a = increment_number(1337)
    b = recurse_then_increment_number(2, 9)
    buf = encode(TestProgramInstruction, a) + encode(TestProgramInstruction, b)

    first, rest = decode(TestProgramInstruction, buf)
    second, rest = decode(TestProgramInstruction, rest)

    assert first == decode(TestProgramInstruction, encode(TestProgramInstruction, a))[0]
    assert second == decode(TestProgramInstruction, encode(TestProgramInstruction, b))[0]
    assert (first, second) == (a, b)
    assert len(rest) == 0


def test_chained_state_records():
    s1 = {"property1": 1, "property2": 2}
    s2 = {"property1": 3, "property2": 4}
    rest = encode(TestProgramState, s1) + encode(TestProgramState, s2)
    got = []
    for _ in range(2):
        value, rest = decode(TestProgramState, rest)
        got.append(value)
    assert got == [s1, s2]
    assert len(rest) == 0


def test_decode_many():
    data = encode_many(TestProgramInstruction, INSTRUCTIONS)
    assert decode_many(TestProgramInstruction, data) == INSTRUCTIONS


def test_decode_many_empty():
    assert decode_many(TestProgramState, b"") == []


def test_decode_exact():
    data = encode(TestProgramState, {"property1": 5, "property2": 6})
    assert decode_exact(TestProgramState, data) == {"property1": 5, "property2": 6}


def test_decode_exact_trailing():
    data = encode(TestProgramState, {"property1": 5, "property2": 6}) + b"\x00"
    with pytest.raises(TrailingBytesError) as exc:
        decode_exact(TestProgramState, data)
    assert exc.value.trailing == 1


# ═══════════════════════════════════════════════════════════════════════
# Truncation and foreign data
# ═══════════════════════════════════════════════════════════════════════

def test_empty_buffer_enum():
    with pytest.raises(TruncatedInputError) as exc:
        decode(TestProgramInstruction, b"")
    assert exc.value.needed == 1
    assert exc.value.available == 0


@pytest.mark.parametrize("cut", range(1, 9))
def test_truncated_payload(cut):
    data = encode(TestProgramInstruction, increment_number(1337))[:cut]
    with pytest.raises(TruncatedInputError) as exc:
        decode(TestProgramInstruction, data)
    assert exc.value.needed == 9
    assert exc.value.available == cut


def test_truncated_struct():
    data = encode(TestProgramState, {"property1": 1, "property2": 2})[:15]
    with pytest.raises(TruncatedInputError):
        decode(TestProgramState, data)


def test_truncated_struct_second_record():
    data = encode(TestProgramState, {"property1": 1, "property2": 2}) + b"\x01\x02"
    _, rest = decode(TestProgramState, data)
    with pytest.raises(TruncatedInputError):
        decode(TestProgramState, rest)


def test_unknown_discriminant():
    with pytest.raises(UnknownDiscriminantError) as exc:
        decode(TestProgramInstruction, b"\x03" + b"\x00" * 16)
    assert exc.value.discriminant == 3
    assert exc.value.variant_count == 3


def test_unknown_discriminant_max_byte():
    with pytest.raises(UnknownDiscriminantError):
        decode(TestProgramInstruction, b"\xff")


def test_single_byte_struct():
    schema = StructSchema("Flag", (u8("flag"),))
    value, rest = decode(schema, b"\x01\x02")
    assert value == {"flag": 1}
    assert bytes(rest) == b"\x02"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
