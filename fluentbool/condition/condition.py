"""
FluentCondition - Chainable Conditional Logic
=============================================

This module provides FluentCondition, an immutable pipeline that expresses
conditional logic as a chain of calls instead of imperative branches.

Natural Language Methods:
- `and_(other)` - AND composition (equivalent to `&` operator)
- `or_(other)` - OR composition (equivalent to `|` operator)
- `not_()` - negation (equivalent to `~` operator)
- `then_run(action)` / `else_run(action)` - side-effecting branches
- `if_true_supply(supplier)` / `choose_and_supply(a, b)` - value branches

Composition is lazy. Each operator returns a new FluentCondition whose
memoized condition closes over the receiver's condition and the operand; the
receiver is never modified. Nothing is evaluated until a terminal call such as
`boolean_value()` or `then_run()`, and `and_`/`or_` short-circuit like Python's
own `and`/`or`.

Example:
    ```python
    (
        when(lambda: user.is_admin)
        .or_(lambda: user.owns(document))
        .then_run(lambda: document.delete())
        .else_run(lambda: audit.denied(user))
    )
    ```
"""

from typing import Any, Callable, Optional, Tuple

from ..types.common_types import BooleanSupplier, Operand, Supplier, T
from ..types.protocols import PresenceAware
from ..util.memoize import MemoizedCondition
from ..value.value import OptionalValue


def _require_callable(func: Any, name: str) -> None:
    if func is None:
        raise ValueError(f"{name} cannot be None")
    if not callable(func):
        raise TypeError(f"{name} must be callable")


def _constant(value: bool) -> BooleanSupplier:
    return lambda: value


class FluentCondition:
    """
    Immutable, lazily evaluated boolean pipeline.

    Each instance owns exactly one MemoizedCondition, so the underlying
    computation runs at most once successfully no matter how many terminal
    operations are called or how many threads call them.

    Runs of the same operator are flattened: ``c.and_(a).and_(b).and_(d)``
    evaluates its operands in one loop, so long same-operator chains do not
    grow the call stack. Each switch between ``and_``, ``or_`` and ``not_``
    still nests one level, so alternating chains are bounded by the
    interpreter recursion limit (a few hundred levels).
    """

    __slots__ = ("_condition", "_op", "_terms")

    def __init__(self, condition: BooleanSupplier):
        self._condition = MemoizedCondition(condition)
        self._op: Optional[str] = None
        self._terms: Tuple[BooleanSupplier, ...] = ()

    # ============================================================
    # Construction
    # ============================================================

    @classmethod
    def from_bool(cls, value: bool) -> "FluentCondition":
        if not isinstance(value, bool):
            raise TypeError(f"value must be a bool, got {type(value).__name__}")
        return cls(_constant(value))

    @classmethod
    def from_lazy(cls, computation: BooleanSupplier) -> "FluentCondition":
        _require_callable(computation, "computation")
        return cls(computation)

    @classmethod
    def from_optional_presence(cls, optional: Any) -> "FluentCondition":
        """
        Condition that is true when ``optional`` holds a value.

        Presence is read once, at construction. Objects with an ``is_present``
        attribute or method are asked directly; anything else is present
        unless it is None.
        """
        if optional is None:
            return cls.from_bool(False)
        if isinstance(optional, PresenceAware):
            presence = optional.is_present
            return cls.from_bool(bool(presence() if callable(presence) else presence))
        return cls.from_bool(True)

    @classmethod
    def of(cls, condition: Any) -> "FluentCondition":
        """
        Build a condition from a bool, a zero-argument callable, another
        FluentCondition or a presence-aware optional.
        """
        if condition is None:
            raise ValueError("condition cannot be None")
        if isinstance(condition, bool):
            return cls.from_bool(condition)
        if isinstance(condition, FluentCondition):
            return cls(condition._condition)
        if callable(condition):
            return cls(condition)
        if isinstance(condition, PresenceAware):
            return cls.from_optional_presence(condition)
        raise TypeError(
            "condition must be a bool, a zero-argument callable, "
            "a FluentCondition or a presence-aware optional"
        )

    # ============================================================
    # Composition
    # ============================================================

    @staticmethod
    def _as_supplier(operand: Operand) -> BooleanSupplier:
        if operand is None:
            raise ValueError("operand cannot be None")
        if isinstance(operand, bool):
            return _constant(operand)
        if isinstance(operand, FluentCondition):
            return operand._condition
        if callable(operand):
            return MemoizedCondition(operand)
        raise TypeError(
            "operand must be a bool, a zero-argument callable or a FluentCondition"
        )

    def _compose(self, op: str, right: BooleanSupplier) -> "FluentCondition":
        """Extend a chain of the same operator, or start a new one."""
        if self._op == op:
            terms = self._terms + (right,)
        else:
            terms = (self._condition, right)
        combine = all if op == "and" else any
        composed = FluentCondition(lambda: combine(term() for term in terms))
        composed._op = op
        composed._terms = terms
        return composed

    def and_(self, other: Operand) -> "FluentCondition":
        """Logical AND; ``other`` is not evaluated when this condition is false."""
        return self._compose("and", self._as_supplier(other))

    def or_(self, other: Operand) -> "FluentCondition":
        """Logical OR; ``other`` is not evaluated when this condition is true."""
        return self._compose("or", self._as_supplier(other))

    def not_(self) -> "FluentCondition":
        left = self._condition
        return FluentCondition(lambda: not left.evaluate())

    def is_true(self) -> "FluentCondition":
        """Identity, for readability: ``when(x).is_true().then_run(...)``."""
        return self

    def is_false(self) -> "FluentCondition":
        return self.not_()

    def __and__(self, other: Operand) -> "FluentCondition":
        return self.and_(other)

    def __rand__(self, other: Operand) -> "FluentCondition":
        return FluentCondition.of(other).and_(self)

    def __or__(self, other: Operand) -> "FluentCondition":
        return self.or_(other)

    def __ror__(self, other: Operand) -> "FluentCondition":
        return FluentCondition.of(other).or_(self)

    def __invert__(self) -> "FluentCondition":
        return self.not_()

    # ============================================================
    # Terminal operations
    # ============================================================

    def then_run(self, action: Callable[[], Any]) -> "FluentCondition":
        """Run ``action`` if the condition is true. Returns this pipeline."""
        _require_callable(action, "action")
        if self._condition.evaluate():
            action()
        return self

    def else_run(self, action: Callable[[], Any]) -> "FluentCondition":
        """Run ``action`` if the condition is false. Returns this pipeline."""
        _require_callable(action, "action")
        if not self._condition.evaluate():
            action()
        return self

    def if_true_supply(self, supplier: Supplier[T]) -> OptionalValue[T]:
        """
        Produce a value when the condition is true.

        Returns the supplier's result wrapped in an OptionalValue (absent if
        it is None). When false, the supplier is not called and the container
        is absent.
        """
        _require_callable(supplier, "supplier")
        if self._condition.evaluate():
            return OptionalValue.of(supplier())
        return OptionalValue.empty()

    def if_false_supply(self, supplier: Supplier[T]) -> OptionalValue[T]:
        """Mirror of if_true_supply() for the false branch."""
        _require_callable(supplier, "supplier")
        if not self._condition.evaluate():
            return OptionalValue.of(supplier())
        return OptionalValue.empty()

    def choose_and_supply(
        self, if_true: Supplier[T], if_false: Supplier[T]
    ) -> OptionalValue[T]:
        """Call exactly one of the suppliers and wrap its result."""
        _require_callable(if_true, "if_true")
        _require_callable(if_false, "if_false")
        if self._condition.evaluate():
            return OptionalValue.of(if_true())
        return OptionalValue.of(if_false())

    then_get = if_true_supply
    else_get = if_false_supply
    choose = choose_and_supply

    def boolean_value(self) -> bool:
        return self._condition.evaluate()

    def __bool__(self) -> bool:
        return self._condition.evaluate()

    def __repr__(self) -> str:
        if self._condition.is_evaluated:
            return f"FluentCondition({self._condition.evaluate()})"
        return "FluentCondition(<pending>)"


# ============================================================================
# FACTORY FUNCTIONS
# ============================================================================


def condition_from_bool(value: bool) -> FluentCondition:
    """Wrap an already-known boolean."""
    return FluentCondition.from_bool(value)


def condition_from_lazy(computation: BooleanSupplier) -> FluentCondition:
    """Wrap a zero-argument computation, evaluated on first use."""
    return FluentCondition.from_lazy(computation)


def condition_from_optional_presence(optional: Any) -> FluentCondition:
    """Condition that is true when ``optional`` holds a value."""
    return FluentCondition.from_optional_presence(optional)


def when(condition: Any) -> FluentCondition:
    """Entry point for fluent pipelines: ``when(x).then_run(...)``."""
    return FluentCondition.of(condition)
