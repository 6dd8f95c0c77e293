"""Concrete program layouts built on the codec."""

from .sample_program import (
    TestProgramInstruction,
    TestProgramState,
    hello_world,
    increment_number,
    recurse_then_increment_number,
)

__all__ = [
    "TestProgramInstruction",
    "TestProgramState",
    "hello_world",
    "increment_number",
    "recurse_then_increment_number",
]
