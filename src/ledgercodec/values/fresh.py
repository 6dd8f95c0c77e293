"""
Freshness-Windowed Value

A value captured at (timestamp_ms, slot). A timestamp or slot of 0 means
the value was never populated; such a value is never fresh.
"""

import time
from typing import Any, Generic, TypeVar

from ..core.registry import param_registry

T = TypeVar("T")

DEFAULT_TOLERANCE_MS = param_registry()["default_freshness_tolerance_ms"]


def now_ms() -> int:
    """Wall clock in integer milliseconds."""
    return time.time_ns() // 1_000_000


class FreshValue(Generic[T]):
    """Immutable capture of a value with its timestamp and slot."""

    __slots__ = ("_value", "_timestamp", "_slot")

    def __init__(self, value: T, timestamp: int, slot: int):
        self._value = value
        self._timestamp = int(timestamp)
        self._slot = int(slot)

    @property
    def timestamp(self) -> int:
        return self._timestamp

    @property
    def slot(self) -> int:
        return self._slot

    @property
    def is_populated(self) -> bool:
        return self._timestamp != 0 and self._slot != 0

    def age_ms(self, current_time_ms: int | None = None) -> int | None:
        """Milliseconds since capture, or None if never populated."""
        if not self.is_populated:
            return None
        if current_time_ms is None:
            current_time_ms = now_ms()
        return current_time_ms - self._timestamp

    def get_fresh_value(
        self,
        tolerance_ms: int = DEFAULT_TOLERANCE_MS,
        current_time_ms: int | None = None
    ) -> T | None:
        """
        The stored value if captured within ``tolerance_ms``, else None.

        Fresh iff ``current_time_ms - timestamp <= tolerance_ms``; with a
        tolerance of 0 the times must be equal. ``current_time_ms`` defaults
        to the wall clock.
        """
        age = self.age_ms(current_time_ms)
        if age is None or age > tolerance_ms:
            return None
        return self._value

    def __setattr__(self, name: str, value: Any) -> None:
        if hasattr(self, "_slot"):
            raise AttributeError(f"{type(self).__name__} is immutable")
        object.__setattr__(self, name, value)

    def __eq__(self, other):
        if not isinstance(other, FreshValue):
            return NotImplemented
        return (self._value, self._timestamp, self._slot) == (
            other._value, other._timestamp, other._slot
        )

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"FreshValue(value={self._value!r}, timestamp={self._timestamp}, "
            f"slot={self._slot})"
        )
