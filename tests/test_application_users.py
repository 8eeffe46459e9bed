"""
Tests for the users application layer (use cases).

Tests use cases with mocked ports. No real infrastructure needed.
"""

from unittest.mock import MagicMock

import pytest

from userapi.application.users.dtos import GetUserQuery, UserResult
from userapi.application.users.get_user import GetUserUseCase
from userapi.application.users.list_users import ListUsersUseCase
from userapi.domain.users.entities import User
from userapi.domain.users.errors import InternalError, NotFoundError
from userapi.domain.users.ports import UserRepository


class TestGetUserUseCase:
    """Tests for the GetUserUseCase."""

    def test_found_user_is_mapped_to_dto(self) -> None:
        repository = MagicMock(spec=UserRepository)
        repository.get_by_id.return_value = User(id=7, name="User")

        result = GetUserUseCase(repository=repository).execute(GetUserQuery(user_id=7))

        assert result == UserResult(id=7, name="User")
        repository.get_by_id.assert_called_once_with(7)

    def test_missing_user_raises_not_found(self) -> None:
        repository = MagicMock(spec=UserRepository)
        repository.get_by_id.return_value = None

        with pytest.raises(NotFoundError):
            GetUserUseCase(repository=repository).execute(GetUserQuery(user_id=101))


class TestListUsersUseCase:
    """Tests for the ListUsersUseCase."""

    def test_always_raises_internal_error(self) -> None:
        with pytest.raises(InternalError):
            ListUsersUseCase().execute()
