from unittest.mock import AsyncMock

import pytest

from src.service.booking.domain.entity.user_entity import UserEntity


@pytest.fixture
def mock_uow() -> AsyncMock:
    """UoW double: repositories are auto-created AsyncMock attributes."""
    uow = AsyncMock()
    uow.__aenter__.return_value = uow
    return uow


@pytest.fixture
def student() -> UserEntity:
    return UserEntity(id=2, email='student@test.com', name='Student', hashed_password='x')
