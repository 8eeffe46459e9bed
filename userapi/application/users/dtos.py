"""
Data Transfer Objects for the users application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class GetUserQuery:
    """Input DTO for looking up a single user.

    Attributes:
        user_id: Unsigned integer id taken from the request path.
    """

    user_id: int


@dataclass(frozen=True)
class UserResult:
    """Output DTO for a single user.

    Attributes:
        id: The user's id.
        name: The user's display name.
    """

    id: int
    name: str
