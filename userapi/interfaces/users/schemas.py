"""
Pydantic schemas for the API responses.

These schemas define the API contract.
No business logic belongs here.
"""

from pydantic import BaseModel


class UserResponse(BaseModel):
    """A single user."""

    id: int
    name: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    message: str


class ErrorResponse(BaseModel):
    """Error envelope returned for every non-success response."""

    error: str
