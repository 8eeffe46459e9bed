"""
Port interfaces (ABCs) for the users bounded context.

Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from userapi.domain.users.entities import User


class UserRepository(ABC):
    """Port for looking up users."""

    @abstractmethod
    def get_by_id(self, user_id: int) -> Optional[User]:
        """Return the user with the given id, or None if it does not exist."""
        raise NotImplementedError
