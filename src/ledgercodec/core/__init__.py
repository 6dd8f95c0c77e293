"""
Core foundation: parameter registry, hashing, logging setup.

Frozen wire constants and the content hash shared by the codec.
"""

from .registry import param_registry, RegistryError, PRIMITIVE_WIDTHS
from .hashing import blake3_hash
from .logsetup import configure_logging

__all__ = [
    # Registry
    "param_registry",
    "RegistryError",
    "PRIMITIVE_WIDTHS",

    # Hashing
    "blake3_hash",

    # Logging
    "configure_logging",
]
