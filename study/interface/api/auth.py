"""Identity helpers shared by the routes.

The auth_token cookie is issued by the campus identity service. Routes
that write require it; routes that read use it only to personalize the
response.
"""

from fastapi import HTTPException, status

from study.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from study.util.jwt import JWTError


async def require_user(
    get_current_user_use_case: GetCurrentUserUseCase,
    auth_token: str | None,
    action: str,
) -> GetCurrentUserResponse:
    """Resolve the caller's identity or fail with 401.

    Args:
        get_current_user_use_case: Get current user use case
        auth_token: JWT token from cookie
        action: What the caller is trying to do (for the error message)

    Raises:
        HTTPException: 401 if the token is missing or invalid
    """
    if not auth_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )

    try:
        return await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=auth_token)
        )
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )


async def optional_user_id(
    get_current_user_use_case: GetCurrentUserUseCase,
    auth_token: str | None,
) -> str | None:
    """Resolve the caller's user ID, treating a bad token as anonymous."""
    if not auth_token:
        return None

    try:
        user = await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=auth_token)
        )
    except JWTError:
        return None
    return user.user_id
