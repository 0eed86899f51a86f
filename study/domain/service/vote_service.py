"""Vote ledger domain service."""

from datetime import datetime

import logfire
from sqlalchemy.exc import IntegrityError

from study.domain.error import ConflictError, NotFoundError
from study.domain.model.vote import Vote
from study.domain.repository import UnitOfWork, VoteRepository
from study.domain.value import QuestionCounter, QuestionId, UserId, VoteState

from .base import Service
from .counter_service import CounterService
from .question_service import QuestionService


class VoteService(Service):
    """Domain service for the question vote ledger."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        question_service: QuestionService,
        counter_service: CounterService,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            question_service: Question domain service
            counter_service: Counter projector
            unit_of_work: Groups the ledger write with its counter delta
        """
        self.vote_repository = vote_repository
        self.question_service = question_service
        self.counter_service = counter_service
        self.unit_of_work = unit_of_work

    async def toggle_vote(self, question_id: QuestionId, voter_id: UserId) -> VoteState:
        """Cast or retract a voter's upvote on a question.

        The outcome depends only on whether the voter's ledger row exists:
        an existing row is deleted, a missing row is created. The matching
        counter delta is applied in the same unit of work.

        Args:
            question_id: Question ID
            voter_id: Voter user ID

        Returns:
            The voter's new vote state and the updated upvote count

        Raises:
            NotFoundError: If the question does not exist
            ConflictError: If a concurrent toggle by the same voter inserted first
        """
        with logfire.span(
            "vote_service.toggle_vote",
            question_id=str(question_id),
            voter_id=str(voter_id),
        ):
            question = await self.question_service.get_question_by_id(question_id)
            if not question:
                logfire.warn("Vote on non-existent question", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))

            # Ledger write and counter delta are undone together on any error
            async with self.unit_of_work.atomic():
                state = await self._toggle(question_id, voter_id)

            logfire.info(
                "Vote cast" if state.voted else "Vote retracted",
                question_id=str(question_id),
                voter_id=str(voter_id),
                upvotes_count=state.upvotes_count,
            )
            return state

    async def _toggle(self, question_id: QuestionId, voter_id: UserId) -> VoteState:
        removed = await self.vote_repository.delete(question_id, voter_id)
        if removed:
            count = await self.counter_service.apply_delta(
                question_id, QuestionCounter.UPVOTES, -1
            )
            return VoteState(voted=False, upvotes_count=count)

        vote = Vote(
            question_id=question_id,
            voter_id=voter_id,
            created_at=datetime.now(),
        )
        try:
            await self.vote_repository.create(vote)
        except IntegrityError:
            logfire.warn(
                "Concurrent duplicate vote",
                question_id=str(question_id),
                voter_id=str(voter_id),
            )
            raise ConflictError("Vote was changed by a concurrent request")

        count = await self.counter_service.apply_delta(
            question_id, QuestionCounter.UPVOTES, 1
        )
        return VoteState(voted=True, upvotes_count=count)

    async def has_voted(self, question_id: QuestionId, voter_id: UserId) -> bool:
        """Check whether a voter currently has a vote on a question."""
        vote = await self.vote_repository.find(question_id, voter_id)
        return vote is not None

    async def get_votes_for_questions(
        self, voter_id: UserId, question_ids: list[QuestionId]
    ) -> dict[QuestionId, bool]:
        """Check which questions a voter has voted on.

        Args:
            voter_id: Voter user ID
            question_ids: Question IDs to check

        Returns:
            Dictionary mapping question ID to whether the voter has voted
        """
        if not question_ids:
            return {}

        # Batch query to fetch all votes at once (avoid N+1)
        votes = await self.vote_repository.find_by_voter_and_questions(
            voter_id=voter_id, question_ids=question_ids
        )
        voted_ids = {vote.question_id for vote in votes}
        return {qid: qid in voted_ids for qid in question_ids}
