"""
Test Fixtures and Helpers for Fake Repositories.

This module provides helper functions for overriding FastAPI dependencies
with fake repository implementations.

Usage:
    from tests.fakes.conftest import override_dependency, reset_overrides

    def test_something(app):
        reset_overrides(app)
        override_dependency(app, get_record_repo, FakeRecordRepository())

        # Test code here...

        reset_overrides(app)
"""

from typing import Any, Callable

from fastapi import FastAPI

# Type for repository dependency getters
RepoGetter = Callable[..., Any]


def reset_overrides(app: FastAPI) -> None:
    """
    Reset all FastAPI dependency overrides.

    Call this in test setup/teardown to ensure clean state.
    """
    app.dependency_overrides.clear()


def override_dependency(
    app: FastAPI,
    getter: RepoGetter,
    implementation: Any,
) -> None:
    """
    Override a FastAPI dependency with a fake implementation.

    Args:
        app: Application whose dependencies are overridden
        getter: The dependency getter function (e.g., get_record_repo)
        implementation: The fake implementation instance or factory

    Example:
        repo = FakeRecordRepository()
        override_dependency(app, get_record_repo, lambda: repo)
    """
    # Handle both direct instances and factory functions
    if callable(implementation) and not isinstance(implementation, type):
        # It's a factory function, use it directly
        app.dependency_overrides[getter] = implementation
    else:
        # It's an instance, wrap in a lambda
        app.dependency_overrides[getter] = lambda: implementation
