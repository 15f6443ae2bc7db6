"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any
from unittest.mock import MagicMock

import pytest
import strawberry

from roster.store import UserStore


@pytest.fixture
def store() -> UserStore:
    """Provide a fresh store holding the two demo users."""
    return UserStore.seeded()


@pytest.fixture
def empty_store() -> UserStore:
    return UserStore()


@pytest.fixture
def mock_info(store: UserStore) -> MagicMock:
    """Create a mock GraphQL info object whose context carries the store."""
    info = MagicMock(spec=strawberry.Info)
    info.context = {"request": MagicMock(), "store": store}
    return info


@pytest.fixture
def graphql_context(store: UserStore) -> dict[str, Any]:
    """Context value for executing the schema directly."""
    return {"store": store}


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "unit: mark test as unit test")  # type: ignore[reportUnknownMemberType]
