"""
Scaled Rational Value

A (raw_value, divisor) pair of arbitrary-precision integers denoting
raw_value / divisor. All arithmetic stays in integers; integer division
truncates toward zero. Floats appear only in display_value.

Two rescaling rules:

  rebase / divisor setter:  raw_new = raw_old * divisor_old / divisor_new
  corrected_raw_value:      raw_new = raw_old * divisor_new / divisor_old
                            (keeps the represented quotient)

Mixed-divisor arithmetic first normalizes both operands to the smaller of
the two divisors (the operand with the larger divisor is scaled down):

  add:  (a + b, d)
  sub:  (a - b, d)
  mul:  (a * b / d, d)
  div:  (a * d / b, d)
"""

import functools
import math


def _div_trunc(n: int, d: int) -> int:
    """Integer division truncating toward zero (Python's // floors)."""
    q = abs(n) // abs(d)
    return q if (n < 0) == (d < 0) else -q


def _check_divisor(divisor) -> int:
    if isinstance(divisor, bool) or not isinstance(divisor, int):
        raise TypeError(f"divisor must be an int, got {type(divisor).__name__}")
    if divisor == 0:
        raise ZeroDivisorError("divisor must be non-zero")
    if divisor < 0:
        raise ValueError(f"divisor must be positive, got {divisor}")
    return divisor


@functools.total_ordering
class ScaledRational:
    """
    Fixed-point style number with an explicit divisor.

    Instances are value objects: rebase() and the arithmetic methods return
    new instances. Assigning to ``divisor`` is the one in-place operation;
    it rescales raw_value and must not race with other users of the
    same instance.
    """

    __slots__ = ("raw_value", "_divisor")

    def __init__(self, raw_value: int, divisor: int):
        if isinstance(raw_value, bool) or not isinstance(raw_value, int):
            raise TypeError(f"raw_value must be an int, got {type(raw_value).__name__}")
        self._divisor = _check_divisor(divisor)
        self.raw_value = raw_value

    @property
    def divisor(self) -> int:
        return self._divisor

    @divisor.setter
    def divisor(self, new_divisor: int) -> None:
        new_divisor = _check_divisor(new_divisor)
        self.raw_value = self._rebased_raw_value(new_divisor)
        self._divisor = new_divisor

    @property
    def display_value(self) -> float:
        """Approximate quotient for display. Never feed this back into math."""
        return self.raw_value / self._divisor

    def corrected_raw_value(self, new_divisor: int) -> int:
        """raw_value for the same quotient over ``new_divisor``, truncated toward zero."""
        new_divisor = _check_divisor(new_divisor)
        if new_divisor == self._divisor:
            return self.raw_value
        return _div_trunc(self.raw_value * new_divisor, self._divisor)

    def _rebased_raw_value(self, new_divisor: int) -> int:
        new_divisor = _check_divisor(new_divisor)
        if new_divisor == self._divisor:
            return self.raw_value
        return _div_trunc(self.raw_value * self._divisor, new_divisor)

    def rebase(self, new_divisor: int) -> "ScaledRational":
        """
        New instance over ``new_divisor`` with raw_old * divisor_old / divisor_new.

        Truncation on the integer division is expected, not an error.
        Use corrected_raw_value for the quotient-preserving rescale.
        """
        return ScaledRational(self._rebased_raw_value(new_divisor), new_divisor)

    def _normalized(self, other: "ScaledRational") -> tuple[int, int, int]:
        if not isinstance(other, ScaledRational):
            raise TypeError(
                f"expected ScaledRational, got {type(other).__name__}"
            )
        divisor = min(self._divisor, other._divisor)
        return (
            self.corrected_raw_value(divisor),
            other.corrected_raw_value(divisor),
            divisor,
        )

    def add(self, other: "ScaledRational") -> "ScaledRational":
        a, b, d = self._normalized(other)
        return ScaledRational(a + b, d)

    def sub(self, other: "ScaledRational") -> "ScaledRational":
        a, b, d = self._normalized(other)
        return ScaledRational(a - b, d)

    def mul(self, other: "ScaledRational") -> "ScaledRational":
        a, b, d = self._normalized(other)
        return ScaledRational(_div_trunc(a * b, d), d)

    def div(self, other: "ScaledRational") -> "ScaledRational":
        a, b, d = self._normalized(other)
        if b == 0:
            raise ZeroDivisorError(
                f"division by zero-valued {other!r} (after normalizing to divisor {d})"
            )
        return ScaledRational(_div_trunc(a * d, b), d)

    def __add__(self, other):
        if not isinstance(other, ScaledRational):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, ScaledRational):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other):
        if not isinstance(other, ScaledRational):
            return NotImplemented
        return self.mul(other)

    def __truediv__(self, other):
        if not isinstance(other, ScaledRational):
            return NotImplemented
        return self.div(other)

    def __neg__(self):
        return ScaledRational(-self.raw_value, self._divisor)

    # Comparisons use exact cross multiplication (divisors are positive)
    def __eq__(self, other):
        if not isinstance(other, ScaledRational):
            return NotImplemented
        return self.raw_value * other._divisor == other.raw_value * self._divisor

    def __lt__(self, other):
        if not isinstance(other, ScaledRational):
            return NotImplemented
        return self.raw_value * other._divisor < other.raw_value * self._divisor

    # Mutable through the divisor setter
    __hash__ = None

    def same_representation(self, other: "ScaledRational") -> bool:
        """True when raw_value and divisor both match (not just the quotient)."""
        return (self.raw_value, self._divisor) == (other.raw_value, other._divisor)

    def reduced(self) -> "ScaledRational":
        """Lowest-terms representation of the same quotient."""
        g = math.gcd(self.raw_value, self._divisor)
        return ScaledRational(self.raw_value // g, self._divisor // g)

    def __repr__(self) -> str:
        return f"ScaledRational(raw_value={self.raw_value}, divisor={self._divisor})"


class ZeroDivisorError(ZeroDivisionError):
    """Raised when a ScaledRational would get a zero divisor or divide by zero."""
    pass
