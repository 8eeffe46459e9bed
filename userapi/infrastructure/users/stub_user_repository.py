"""
Stub adapter for the UserRepository port.

There is no storage behind it: every id up to MAX_USER_ID
resolves to a freshly built user with the default name.
"""

from typing import Optional

from userapi.domain.users.entities import DEFAULT_USER_NAME, MAX_USER_ID, User
from userapi.domain.users.ports import UserRepository


class StubUserRepositoryAdapter(UserRepository):
    """Synthesizes users in memory, one per lookup."""

    def get_by_id(self, user_id: int) -> Optional[User]:
        if user_id > MAX_USER_ID:
            return None
        return User(id=user_id, name=DEFAULT_USER_NAME)
