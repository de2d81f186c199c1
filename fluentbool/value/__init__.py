"""
FluentBool Value Module
=======================

This module contains the optional value container produced by the
value-producing branches of a FluentCondition.
"""

from .value import OptionalValue, ValueNotPresentError

__all__ = [
    "OptionalValue",
    "ValueNotPresentError",
]
