"""Toggle vote use case."""

from uuid import UUID

from pydantic import BaseModel

from study.domain.service import VoteService
from study.domain.value import QuestionId, UserId


class ToggleVoteRequest(BaseModel):
    """Toggle vote request."""

    question_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class ToggleVoteResponse(BaseModel):
    """Toggle vote response."""

    question_id: str
    voted: bool
    upvotes_count: int


class ToggleVoteUseCase:
    """Use case for casting or retracting an upvote on a question."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize toggle vote use case.

        Args:
            vote_service: Vote ledger domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: ToggleVoteRequest) -> ToggleVoteResponse:
        """Execute toggle vote flow.

        Raises:
            NotFoundError: If the question does not exist
            ConflictError: If a concurrent toggle by the same user won
        """
        state = await self.vote_service.toggle_vote(
            QuestionId(UUID(request.question_id)), UserId(UUID(request.user_id))
        )
        return ToggleVoteResponse(
            question_id=request.question_id,
            voted=state.voted,
            upvotes_count=state.upvotes_count,
        )
