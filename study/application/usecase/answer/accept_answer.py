"""Accept answer use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from study.application.usecase.base import BaseUseCase
from study.application.usecase.question import QuestionView, build_question_view
from study.domain.service import AnswerService, VoteService
from study.domain.value import AnswerId, QuestionId, UserId


class AcceptAnswerRequest(BaseModel):
    """Accept answer request."""

    question_id: str  # UUID string
    answer_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class AcceptAnswerUseCase(BaseUseCase):
    """Use case for the question author accepting an answer."""

    def __init__(self, answer_service: AnswerService, vote_service: VoteService) -> None:
        """Initialize accept answer use case.

        Args:
            answer_service: Answer domain service
            vote_service: Vote ledger domain service
        """
        self.answer_service = answer_service
        self.vote_service = vote_service

    async def execute(self, request: AcceptAnswerRequest) -> QuestionView:
        """Execute accept answer flow.

        Args:
            request: Accept answer request

        Returns:
            View of the solved question for the acting user

        Raises:
            NotFoundError: If the question or answer does not exist
            NotAuthorizedError: If the user did not ask the question
            ConflictError: If the transition kept losing races
            InvariantViolationError: If acceptance left a broken state
        """
        with logfire.span(
            "accept_answer.execute",
            question_id=request.question_id,
            answer_id=request.answer_id,
            user_id=request.user_id,
        ):
            question = await self.answer_service.accept_answer(
                question_id=QuestionId(UUID(request.question_id)),
                answer_id=AnswerId(UUID(request.answer_id)),
                acting_user_id=UserId(UUID(request.user_id)),
            )
            return await build_question_view(
                question, self.vote_service, request.user_id
            )
