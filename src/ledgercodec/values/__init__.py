"""Value helpers that travel with decoded account data."""

from .scaled import ScaledRational, ZeroDivisorError
from .fresh import FreshValue, now_ms

__all__ = [
    "ScaledRational",
    "ZeroDivisorError",
    "FreshValue",
    "now_ms",
]
