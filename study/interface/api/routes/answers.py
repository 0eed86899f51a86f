"""Answer routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel, Field

from study.application.usecase.answer import (
    AcceptAnswerRequest,
    AcceptAnswerUseCase,
    AnswerResponse,
    CreateAnswerRequest,
    CreateAnswerUseCase,
    ListAnswersRequest,
    ListAnswersResponse,
    ListAnswersUseCase,
)
from study.application.usecase.auth import GetCurrentUserUseCase
from study.application.usecase.question import QuestionView
from study.domain.error import (
    ConflictError,
    DomainError,
    InvariantViolationError,
    NotAuthorizedError,
    NotFoundError,
)
from study.interface.api.auth import require_user

router = APIRouter(
    prefix="/questions/{question_id}/answers",
    tags=["answers"],
    route_class=DishkaRoute,
)


class CreateAnswerAPIRequest(BaseModel):
    """API request for answering a question."""

    body: str = Field(max_length=10000)


@router.post("", response_model=AnswerResponse, status_code=status.HTTP_201_CREATED)
async def create_answer(
    question_id: UUID,
    request: CreateAnswerAPIRequest,
    create_answer_use_case: FromDishka[CreateAnswerUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> AnswerResponse:
    """Post an answer to a question.

    Requires authentication. Increments the question's answers_count.

    Args:
        question_id: Question UUID
        request: Answer data
        create_answer_use_case: Create answer use case from DI
        get_current_user_use_case: Get current user use case from DI
        auth_token: JWT token from cookie

    Returns:
        Created answer

    Raises:
        HTTPException: If not authenticated, question not found, or validation fails
    """
    user = await require_user(get_current_user_use_case, auth_token, "answer")

    try:
        return await create_answer_use_case.execute(
            CreateAnswerRequest(
                question_id=str(question_id),
                body=request.body,
                author_id=user.user_id,
                author_email=user.email,
            )
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except InvariantViolationError as e:
        logfire.error("Invariant violated creating answer", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create answer",
        )
    except (DomainError, ValueError) as e:
        logfire.warn("Answer creation validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logfire.error("Unexpected error creating answer", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create answer",
        )


@router.get("", response_model=ListAnswersResponse)
async def list_answers(
    question_id: UUID,
    list_answers_use_case: FromDishka[ListAnswersUseCase],
) -> ListAnswersResponse:
    """List the answers to a question, accepted answer first.

    Args:
        question_id: Question UUID
        list_answers_use_case: List answers use case from DI

    Returns:
        Answers to the question

    Raises:
        HTTPException: If question not found
    """
    try:
        return await list_answers_use_case.execute(
            ListAnswersRequest(question_id=str(question_id))
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except Exception as e:
        logfire.error(
            "Unexpected error listing answers",
            question_id=str(question_id),
            error=str(e),
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list answers",
        )


@router.post("/{answer_id}/accept", response_model=QuestionView)
async def accept_answer(
    question_id: UUID,
    answer_id: UUID,
    accept_answer_use_case: FromDishka[AcceptAnswerUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> QuestionView:
    """Accept an answer.

    Only the question's author may accept. A previously accepted answer
    reverts to pending and the question is marked solved.

    Args:
        question_id: Question UUID
        answer_id: Answer UUID
        accept_answer_use_case: Accept answer use case from DI
        get_current_user_use_case: Get current user use case from DI
        auth_token: JWT token from cookie

    Returns:
        Updated question

    Raises:
        HTTPException: If not authenticated, not the author, not found, or conflicting
    """
    user = await require_user(get_current_user_use_case, auth_token, "accept answers")

    try:
        return await accept_answer_use_case.execute(
            AcceptAnswerRequest(
                question_id=str(question_id),
                answer_id=str(answer_id),
                user_id=user.user_id,
            )
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized answer acceptance", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only the question's author can accept an answer",
        )
    except ConflictError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )
    except InvariantViolationError as e:
        logfire.error(
            "Invariant violated accepting answer",
            question_id=str(question_id),
            answer_id=str(answer_id),
            error=str(e),
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to accept answer",
        )
    except Exception as e:
        logfire.error("Unexpected error accepting answer", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to accept answer",
        )
