"""
Domain entities for the users bounded context.

Users are not persisted: a record is synthesized per request
and discarded once the response is built.
"""

from dataclasses import dataclass

DEFAULT_USER_NAME = "User"

# Largest id that resolves to a user; anything above is not found.
MAX_USER_ID = 100

# Ids are unsigned 32-bit integers.
USER_ID_UPPER_BOUND = 2**32 - 1


@dataclass(frozen=True)
class User:
    """A user record."""

    id: int
    name: str
