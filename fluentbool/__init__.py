"""
FluentBool - Fluent Conditional Pipelines
=========================================

A small utility layer for expressing conditional logic as chainable,
lazily evaluated expressions instead of imperative branches.

    >>> from fluentbool import when
    >>> when(lambda: 2 > 1).and_(True).choose(lambda: "yes", lambda: "no").or_else("?")
    'yes'
"""

import logging

# Import the pipeline and its factories from condition/
from .condition import (
    FluentCondition,
    condition_from_bool,
    condition_from_lazy,
    condition_from_optional_presence,
    when,
)

# Import the memoized evaluation primitive from util/
from .util import CircularConditionError, MemoizedCondition

# Import the optional value container from value/
from .value import OptionalValue, ValueNotPresentError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

# Export all the main classes and functions
__all__ = [
    # Pipeline
    "FluentCondition",
    # Factory functions
    "when",
    "condition_from_bool",
    "condition_from_lazy",
    "condition_from_optional_presence",
    # Evaluation primitive
    "MemoizedCondition",
    # Value container
    "OptionalValue",
    # Exceptions
    "CircularConditionError",
    "ValueNotPresentError",
]
