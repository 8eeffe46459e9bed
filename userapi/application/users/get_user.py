"""
Use case: Look up a user by id.

Input: GetUserQuery (user_id)
Output: UserResult
Side effects: None.
Failure cases: NotFoundError.
"""

import logging

from userapi.application.users.dtos import GetUserQuery, UserResult
from userapi.domain.users.errors import NotFoundError
from userapi.domain.users.ports import UserRepository

logger = logging.getLogger(__name__)


class GetUserUseCase:
    """Resolves a user through the UserRepository port.

    Raises NotFoundError when the repository has no such user.
    """

    def __init__(self, repository: UserRepository) -> None:
        self._repository = repository

    def execute(self, query: GetUserQuery) -> UserResult:
        """Run the user lookup use case.

        Args:
            query: The lookup request containing the user id.

        Returns:
            The user found for the id.
        """
        logger.info("Looking up user_id=%d", query.user_id)

        user = self._repository.get_by_id(query.user_id)
        if user is None:
            raise NotFoundError()

        return UserResult(id=user.id, name=user.name)
