"""Vote routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status

from study.application.usecase.auth import GetCurrentUserUseCase
from study.application.usecase.vote import (
    ToggleVoteRequest,
    ToggleVoteResponse,
    ToggleVoteUseCase,
)
from study.domain.error import ConflictError, InvariantViolationError, NotFoundError
from study.interface.api.auth import require_user

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


@router.post("/questions/{question_id}/vote/toggle", response_model=ToggleVoteResponse)
async def toggle_vote(
    question_id: UUID,
    toggle_vote_use_case: FromDishka[ToggleVoteUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> ToggleVoteResponse:
    """Upvote a question, or retract the caller's upvote.

    Requires authentication.

    Args:
        question_id: Question UUID
        toggle_vote_use_case: Toggle vote use case from DI
        get_current_user_use_case: Get current user use case from DI
        auth_token: JWT token from cookie

    Returns:
        New vote state and upvote count

    Raises:
        HTTPException: If not authenticated, question not found, or conflicting
    """
    user = await require_user(get_current_user_use_case, auth_token, "vote")

    try:
        return await toggle_vote_use_case.execute(
            ToggleVoteRequest(question_id=str(question_id), user_id=user.user_id)
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ConflictError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )
    except InvariantViolationError as e:
        logfire.error(
            "Invariant violated toggling vote",
            question_id=str(question_id),
            error=str(e),
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to toggle vote",
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
