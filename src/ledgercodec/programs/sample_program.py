"""
Test program layouts.

Instruction data (enum, one-byte tag):
  0  HelloWorld                                   1 byte
  1  IncrementNumber { amount: u64 }              9 bytes
  2  RecurseThenIncrementNumber {
       call_depth: u8, amount: u64 }             10 bytes

Account state (struct, 16 bytes):
  property1: u64, property2: u64
"""

from ..codec import EnumSchema, EnumValue, StructSchema, Variant, u8, u64

TestProgramInstruction = EnumSchema(
    "TestProgramInstruction",
    (
        Variant("HelloWorld"),
        Variant("IncrementNumber", (u64("amount"),)),
        Variant("RecurseThenIncrementNumber", (u8("call_depth"), u64("amount"))),
    ),
)

TestProgramState = StructSchema(
    "TestProgramState",
    (u64("property1"), u64("property2")),
)


def hello_world() -> EnumValue:
    return EnumValue("HelloWorld")


def increment_number(amount: int) -> EnumValue:
    return EnumValue.of("IncrementNumber", amount=amount)


def recurse_then_increment_number(call_depth: int, amount: int) -> EnumValue:
    return EnumValue.of("RecurseThenIncrementNumber", call_depth=call_depth, amount=amount)
