"""
Shared pytest fixtures and configuration for FluentBool tests.
"""

from unittest.mock import Mock

import pytest


@pytest.fixture
def true_supplier():
    """A counting zero-argument computation that returns True."""
    return Mock(return_value=True)


@pytest.fixture
def false_supplier():
    """A counting zero-argument computation that returns False."""
    return Mock(return_value=False)


@pytest.fixture
def flaky_supplier():
    """Raises on the first call, returns True on every later call."""
    return Mock(side_effect=[RuntimeError("transient failure"), True, True, True])
