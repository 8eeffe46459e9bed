"""
Dependency injection for the users bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
"""

from userapi.application.users.get_user import GetUserUseCase
from userapi.application.users.list_users import ListUsersUseCase
from userapi.infrastructure.users.stub_user_repository import (
    StubUserRepositoryAdapter,
)


def get_user_use_case() -> GetUserUseCase:
    """Build GetUserUseCase with its repository adapter."""
    return GetUserUseCase(repository=StubUserRepositoryAdapter())


def get_list_users_use_case() -> ListUsersUseCase:
    """Build ListUsersUseCase."""
    return ListUsersUseCase()
