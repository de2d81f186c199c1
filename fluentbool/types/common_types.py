"""
FluentBool Common Types - Shared Type Definitions
=================================================

This module contains shared type definitions used across FluentBool.
It keeps the condition and value modules free of circular imports and
provides a single source of truth for the callable shapes the library accepts.
"""

from typing import TYPE_CHECKING, Callable, TypeVar, Union

# ============================================================================
# TYPE VARIABLES
# ============================================================================

T = TypeVar("T")
U = TypeVar("U")

# ============================================================================
# FORWARD REFERENCES
# ============================================================================

if TYPE_CHECKING:
    from ..condition.condition import FluentCondition

# ============================================================================
# CALLABLE TYPES
# ============================================================================

# Zero-argument computation producing a boolean
BooleanSupplier = Callable[[], bool]

# Zero-argument computation producing a value
Supplier = Callable[[], T]

TransformFunction = Callable[[T], U]

# ============================================================================
# OPERAND TYPES
# ============================================================================

# Right-hand side of and_/or_: eager bool, lazy supplier or another condition
Operand = Union[bool, BooleanSupplier, "FluentCondition"]
