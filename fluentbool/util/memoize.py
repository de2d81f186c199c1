"""
Memoized Condition - Once-Only Lazy Boolean Evaluation
======================================================

This module provides MemoizedCondition, a thread-safe wrapper around a
zero-argument boolean computation. The computation runs at most once
successfully; every later evaluation returns the cached result.

Evaluation uses double-checked locking:

1. Read the ``done`` flag without locking (fast path for cached results)
2. Otherwise acquire the instance lock and check ``done`` again
3. Run the computation, store the result, then set ``done``

A computation that raises leaves ``done`` unset, so the next evaluation
retries from scratch. Errors are never cached.
"""

import logging
import threading
from typing import Optional

from ..types.common_types import BooleanSupplier

logger = logging.getLogger(__name__)


class CircularConditionError(RuntimeError):
    """
    Raised when a memoized computation re-enters its own evaluation
    on the same thread.
    """


class MemoizedCondition:
    """
    Lazy boolean computation with a permanent, thread-safe cache.

    Example:
        ```python
        check = MemoizedCondition(lambda: expensive_lookup() > 10)
        check.evaluate()  # runs expensive_lookup once
        check.evaluate()  # cached
        ```
    """

    __slots__ = ("_computation", "_value", "_done", "_computing", "_lock")

    def __init__(self, computation: BooleanSupplier):
        if computation is None:
            raise ValueError("computation cannot be None")
        if not callable(computation):
            raise TypeError("computation must be a zero-argument callable")

        self._computation: Optional[BooleanSupplier] = computation
        self._value = False
        self._done = False
        # Only ever True while the lock is held
        self._computing = False
        # Reentrant: self-referencing computations raise CircularConditionError
        self._lock = threading.RLock()

    def evaluate(self) -> bool:
        """Return the cached result, computing it first if needed."""
        if not self._done:
            with self._lock:
                if not self._done:
                    self._compute()
        return self._value

    def __call__(self) -> bool:
        return self.evaluate()

    def _compute(self) -> None:
        """Run the computation and cache its result. Caller holds the lock."""
        if self._computing:
            raise CircularConditionError(
                f"Circular condition detected: {self._computation!r} "
                "requested its own value while computing it"
            )

        self._computing = True
        try:
            result = bool(self._computation())
        except Exception:
            logger.debug(
                "Condition %r raised; result not cached", self._computation
            )
            raise
        finally:
            self._computing = False

        self._value = result
        self._done = True
        logger.debug("Condition %r cached result %s", self._computation, result)
        # Release closures held by the computation
        self._computation = None

    @property
    def is_evaluated(self) -> bool:
        """Whether a result has been computed and cached."""
        return self._done

    def __repr__(self) -> str:
        if self._done:
            return f"MemoizedCondition({self._value})"
        return "MemoizedCondition(<pending>)"
