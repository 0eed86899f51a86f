"""Question routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel, Field

from study.application.usecase.auth import GetCurrentUserUseCase
from study.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionUseCase,
    GetQuestionRequest,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
    QuestionView,
)
from study.domain.error import DomainError
from study.domain.repository import QuestionSortOrder
from study.domain.value import Level
from study.interface.api.auth import optional_user_id, require_user

router = APIRouter(prefix="/questions", tags=["questions"], route_class=DishkaRoute)


class CreateQuestionAPIRequest(BaseModel):
    """API request for asking a question.

    Counters and the solved flag are not accepted from clients.
    """

    title: str = Field(max_length=300)
    body: str = Field(max_length=10000)
    course_code: str | None = Field(default=None, max_length=40)
    level: Level | None = None


@router.post("", response_model=QuestionView, status_code=status.HTTP_201_CREATED)
async def create_question(
    request: CreateQuestionAPIRequest,
    create_question_use_case: FromDishka[CreateQuestionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> QuestionView:
    """Ask a new question.

    Requires authentication.

    Args:
        request: Question data
        create_question_use_case: Create question use case from DI
        get_current_user_use_case: Get current user use case from DI
        auth_token: JWT token from cookie

    Returns:
        Created question

    Raises:
        HTTPException: If not authenticated or validation fails
    """
    user = await require_user(get_current_user_use_case, auth_token, "ask questions")

    try:
        return await create_question_use_case.execute(
            CreateQuestionRequest(
                title=request.title,
                body=request.body,
                course_code=request.course_code,
                level=request.level,
                author_id=user.user_id,
                author_email=user.email,
            )
        )
    except (DomainError, ValueError) as e:
        logfire.warn("Question creation validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logfire.error("Unexpected error creating question", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create question",
        )


@router.get("", response_model=ListQuestionsResponse)
async def list_questions(
    list_questions_use_case: FromDishka[ListQuestionsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
    course_code: str | None = None,
    level: Level | None = None,
    unsolved_only: bool = False,
    limit: int | None = None,
    offset: int = 0,
    auth_token: str | None = Cookie(default=None),
) -> ListQuestionsResponse:
    """List questions with filtering and pagination.

    Args:
        list_questions_use_case: List questions use case from DI
        get_current_user_use_case: Get current user use case from DI
        sort: newest, upvoted, answered or unanswered
        course_code: Filter by course code (optional)
        level: Filter by level (optional)
        unsolved_only: Only questions without an accepted answer
        limit: Maximum number of questions to return
        offset: Number of questions to skip
        auth_token: JWT token from cookie (optional)

    Returns:
        Page of questions with the caller's vote on each
    """
    viewer_id = await optional_user_id(get_current_user_use_case, auth_token)

    if limit is not None and limit < 1:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Limit must be positive",
        )
    if offset < 0:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Offset must be non-negative",
        )

    try:
        return await list_questions_use_case.execute(
            ListQuestionsRequest(
                sort=sort,
                course_code=course_code,
                level=level,
                unsolved_only=unsolved_only,
                limit=limit,
                offset=offset,
                viewer_id=viewer_id,
            )
        )
    except ValueError as e:
        logfire.warn("List questions validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logfire.error("Unexpected error listing questions", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list questions",
        )


@router.get("/{question_id}", response_model=QuestionView)
async def get_question(
    question_id: UUID,
    get_question_use_case: FromDishka[GetQuestionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> QuestionView:
    """Get a question by ID.

    Args:
        question_id: Question UUID
        get_question_use_case: Get question use case from DI
        get_current_user_use_case: Get current user use case from DI
        auth_token: JWT token from cookie (optional)

    Returns:
        Question view; my_vote_state is null for anonymous callers

    Raises:
        HTTPException: If question not found
    """
    viewer_id = await optional_user_id(get_current_user_use_case, auth_token)

    try:
        question = await get_question_use_case.execute(
            GetQuestionRequest(question_id=str(question_id), viewer_id=viewer_id)
        )
    except Exception as e:
        logfire.error(
            "Unexpected error fetching question",
            question_id=str(question_id),
            error=str(e),
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch question",
        )

    if not question:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Question not found",
        )
    return question
