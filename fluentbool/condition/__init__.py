"""
FluentBool Condition Module
===========================

This module contains the fluent conditional pipeline and its factories.
"""

from .condition import (
    FluentCondition,
    condition_from_bool,
    condition_from_lazy,
    condition_from_optional_presence,
    when,
)

__all__ = [
    "FluentCondition",
    "condition_from_bool",
    "condition_from_lazy",
    "condition_from_optional_presence",
    "when",
]
