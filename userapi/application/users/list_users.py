"""
Use case: List all users.

Input: None
Output: None (listing is not implemented)
Side effects: None.
Failure cases: InternalError, always.
"""

import logging

from userapi.application.users.dtos import UserResult
from userapi.domain.users.errors import InternalError

logger = logging.getLogger(__name__)


class ListUsersUseCase:
    """Stub listing use case. No user directory exists to enumerate."""

    def execute(self) -> list[UserResult]:
        logger.info("Listing users")
        raise InternalError()
