"""
FastAPI router for the users bounded context.

All routes delegate to use cases. No business logic here.
Path parameters are validated by FastAPI before the handler runs.
Error mapping is handled by centralized error handlers.
Both routes are subject to the configurable per-client rate limit.
"""

from fastapi import APIRouter, Depends, Path, Request

from userapi.application.users.dtos import GetUserQuery
from userapi.application.users.get_user import GetUserUseCase
from userapi.application.users.list_users import ListUsersUseCase
from userapi.domain.users.entities import USER_ID_UPPER_BOUND
from userapi.interfaces.users.dependencies import (
    get_list_users_use_case,
    get_user_use_case,
)
from userapi.interfaces.users.schemas import ErrorResponse, UserResponse
from userapi.shared.security.rate_limiting import current_rate_limit, limiter

router = APIRouter(prefix="/users", tags=["users"])


@router.get(
    "",
    response_model=None,
    responses={500: {"model": ErrorResponse}},
    summary="List users",
    description="Not implemented; always returns 500.",
)
@limiter.limit(current_rate_limit)
def list_users(
    request: Request,
    use_case: ListUsersUseCase = Depends(get_list_users_use_case),
) -> list[UserResponse]:
    """Listing stub. The use case always raises InternalError."""
    results = use_case.execute()
    return [UserResponse(id=r.id, name=r.name) for r in results]


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Get user",
    description="Return the user with the given unsigned integer id.",
)
@limiter.limit(current_rate_limit)
def get_user(
    request: Request,
    user_id: int = Path(..., ge=0, le=USER_ID_UPPER_BOUND, description="User id"),
    use_case: GetUserUseCase = Depends(get_user_use_case),
) -> UserResponse:
    """Look up a single user by id."""
    result = use_case.execute(GetUserQuery(user_id=user_id))
    return UserResponse(id=result.id, name=result.name)
