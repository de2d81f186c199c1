"""
FluentBool Utils
================

Evaluation primitives shared by the condition pipeline.

Classes:
- MemoizedCondition: thread-safe, once-only lazy boolean evaluation
"""

from .memoize import CircularConditionError, MemoizedCondition

__all__ = [
    "MemoizedCondition",
    "CircularConditionError",
]
