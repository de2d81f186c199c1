"""
FluentBool Protocols
====================

Structural interfaces used to bridge foreign optional types into a condition.
Any object exposing an ``is_present`` attribute (a bool or a zero-argument
method) satisfies ``PresenceAware``, including ``OptionalValue`` itself.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class PresenceAware(Protocol):
    """Protocol for optional-like containers that can report presence."""

    is_present: bool
