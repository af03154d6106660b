"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Mocked collaborators (user repository, email verification service)
- A UserService wired to those mocks
- Default registration field values
"""

from unittest.mock import Mock

import pytest

from src.domain.user_service import UserService

# Lowest bcrypt work factor keeps unit tests fast
TEST_BCRYPT_COST = 4


@pytest.fixture
def fields() -> dict[str, str]:
    """Valid create_user keyword arguments."""
    return {
        "first_name": "Volodymyr",
        "last_name": "Gumennyi",
        "email": "test@test.com",
        "password": "12345678",
        "repeat_password": "12345678",
    }


@pytest.fixture
def repository() -> Mock:
    """User repository whose save() succeeds."""
    repo = Mock()
    repo.save.return_value = True
    repo.delete.return_value = True
    return repo


@pytest.fixture
def email_verification() -> Mock:
    """Email verification service whose scheduling succeeds."""
    return Mock()


@pytest.fixture
def service(repository: Mock, email_verification: Mock) -> UserService:
    """UserService wired to mocked collaborators."""
    return UserService(
        repository=repository,
        email_verification=email_verification,
        bcrypt_cost=TEST_BCRYPT_COST,
    )
