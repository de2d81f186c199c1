"""
FluentBool Types Module
=======================

Shared type aliases and structural protocols for FluentBool.
"""

from .common_types import (
    BooleanSupplier,
    Operand,
    Supplier,
    T,
    TransformFunction,
    U,
)
from .protocols import PresenceAware

__all__ = [
    "T",
    "U",
    "BooleanSupplier",
    "Supplier",
    "TransformFunction",
    "Operand",
    "PresenceAware",
]
