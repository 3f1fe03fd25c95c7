"""
Core math modules

Целочисленные примитивы с гарантией отсутствия переполнения.
"""

# U64 Safeguards
from src.core.math.u64_safeguards import (
    # Bounds
    U64_BITS,
    U64_MAX,
    # Checked arithmetic
    checked_add,
    checked_sub,
    has_headroom,
    # Validation
    is_u64,
    validate_u64,
)

__all__ = [
    "U64_BITS",
    "U64_MAX",
    "checked_add",
    "checked_sub",
    "has_headroom",
    "is_u64",
    "validate_u64",
]
