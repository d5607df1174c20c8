"""
Pytest configuration and shared fixtures for tests.
"""

from typing import Any, Callable

import pytest

from apophis import CheckPolicyRegistry


class CountingStub:
    """Callable that records how many times it ran and returns a fixed result."""

    def __init__(self, result: Any = None, func: Callable[..., Any] | None = None) -> None:
        self.calls = 0
        self._result = result
        self._func = func

    def __call__(self, *args: Any) -> Any:
        self.calls += 1
        if self._func is not None:
            return self._func(*args)
        return self._result


@pytest.fixture(scope="function")
def counting():
    """Factory for counting stubs: ``counting(result)`` or ``counting(func=...)``."""
    return CountingStub


@pytest.fixture(scope="function")
def policy_registry():
    """Provide the policy registry and drop custom policies after each test."""
    yield CheckPolicyRegistry
    CheckPolicyRegistry.clear()
