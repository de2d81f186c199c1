"""
FluentBool OptionalValue - Conditional Result Container
=======================================================

This module provides OptionalValue, the container returned when a
FluentCondition branch produces a value. It carries the value through a
pipeline of transformations and ends in a fallback or an error.

A container holds a value slot and a presence flag. Every read treats
``None`` as absent, even when the presence flag is set:

    >>> OptionalValue(None, True).or_else("fallback")
    'fallback'

This double check is intentional and part of the container's contract.
"""

from typing import Any, Callable, Generic, Optional

from ..types.common_types import Supplier, T, TransformFunction, U


class ValueNotPresentError(LookupError):
    """
    Raised by or_else_throw() without an error supplier when the
    container holds no value.
    """


class OptionalValue(Generic[T]):
    """
    Optional container for a value produced by a conditional pipeline.

    Example:
        ```python
        user = (
            when(lambda: cache.has(key))
            .then_get(lambda: cache.get(key))
            .map(enrich)
            .or_else_throw(lambda: KeyError(key))
        )
        ```
    """

    __slots__ = ("_value", "_present")

    def __init__(self, value: Optional[T] = None, present: Optional[bool] = None):
        if present is None:
            present = value is not None
        if not present and value is not None:
            raise ValueError("an absent OptionalValue cannot carry a value")
        self._value = value
        self._present = present

    @classmethod
    def of(cls, value: Optional[T]) -> "OptionalValue[T]":
        """Wrap a value, treating None as absent."""
        if value is None:
            return cls.empty()
        return cls(value, True)

    @classmethod
    def empty(cls) -> "OptionalValue[Any]":
        """Return an absent container."""
        return cls(None, False)

    def _has_value(self) -> bool:
        return self._present and self._value is not None

    @property
    def is_present(self) -> bool:
        """True when the flag is set and the stored value is not None."""
        return self._has_value()

    @property
    def is_empty(self) -> bool:
        return not self._has_value()

    def map(self, transform: TransformFunction[T, U]) -> "OptionalValue[U]":
        """
        Apply ``transform`` to the value, if any.

        The result is wrapped as present; a None result reads as absent
        downstream. ``transform`` is not called on an absent container.
        """
        if self._has_value():
            return OptionalValue(transform(self._value), True)
        return OptionalValue.empty()

    def or_else(self, fallback: T) -> T:
        return self._value if self._has_value() else fallback

    def or_else_get(self, fallback_supplier: Supplier[T]) -> T:
        """Like or_else(), but computes the fallback only when needed."""
        if self._has_value():
            return self._value
        return fallback_supplier()

    def or_else_throw(
        self, error_supplier: Optional[Callable[[], BaseException]] = None
    ) -> T:
        """
        Return the value, or raise the error produced by ``error_supplier``.

        Without a supplier, raises ValueNotPresentError.
        """
        if self._has_value():
            return self._value
        if error_supplier is None:
            raise ValueNotPresentError("OptionalValue holds no value")
        raise error_supplier()

    or_else_raise = or_else_throw

    def if_present(self, action: Callable[[T], Any]) -> None:
        if self._has_value():
            action(self._value)

    def __bool__(self) -> bool:
        return self._has_value()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OptionalValue):
            return NotImplemented
        if not self._has_value():
            return not other._has_value()
        return other._has_value() and self._value == other._value

    def __hash__(self) -> int:
        if not self._has_value():
            return hash((OptionalValue, None))
        return hash((OptionalValue, self._value))

    def __repr__(self) -> str:
        if self._has_value():
            return f"OptionalValue({self._value!r})"
        return "OptionalValue.empty()"
