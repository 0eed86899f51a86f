"""Concurrency tests for the vote ledger, counters and acceptance.

Every repository call yields to the event loop before and after it runs,
so concurrent service calls interleave at each storage step the way
separate requests would.
"""

import asyncio
from uuid import uuid4

import pytest

from study.domain.error import ConflictError
from study.domain.service import AnswerService, CounterService, QuestionService, VoteService
from study.domain.value import QuestionCounter, UserId
from study.persistence.repository.inmemory import (
    InMemoryAnswerRepository,
    InMemoryDatabase,
    InMemoryQuestionRepository,
    InMemoryUnitOfWork,
    InMemoryVoteRepository,
)
from tests.conftest import make_answer, make_question


class Yielding:
    """Proxy that yields to the event loop around every repository call."""

    def __init__(self, delegate) -> None:
        self._delegate = delegate

    def __getattr__(self, name):
        method = getattr(self._delegate, name)

        async def call(*args, **kwargs):
            await asyncio.sleep(0)
            result = await method(*args, **kwargs)
            await asyncio.sleep(0)
            return result

        return call


def request_services(database: InMemoryDatabase) -> tuple[VoteService, AnswerService]:
    """Services wired the way one request gets them."""
    question_repository = Yielding(InMemoryQuestionRepository(database))
    question_service = QuestionService(question_repository)
    counter_service = CounterService(question_repository)
    unit_of_work = InMemoryUnitOfWork(database)
    vote_service = VoteService(
        vote_repository=Yielding(InMemoryVoteRepository(database)),
        question_service=question_service,
        counter_service=counter_service,
        unit_of_work=unit_of_work,
    )
    answer_service = AnswerService(
        answer_repository=Yielding(InMemoryAnswerRepository(database)),
        question_service=question_service,
        counter_service=counter_service,
        unit_of_work=unit_of_work,
    )
    return vote_service, answer_service


async def seed_question(database: InMemoryDatabase, author_id: UserId | None = None):
    return await InMemoryQuestionRepository(database).create(
        make_question(author_id=author_id)
    )


class TestConcurrentVotes:
    """Scenario D and ledger/counter agreement under interleaving."""

    @pytest.mark.asyncio
    async def test_ten_voters_then_ten_retractions(self):
        database = InMemoryDatabase()
        question = await seed_question(database)
        voters = [UserId(uuid4()) for _ in range(10)]

        cast = await asyncio.gather(
            *(
                request_services(database)[0].toggle_vote(question.id, voter)
                for voter in voters
            )
        )

        assert all(state.voted for state in cast)
        assert database.questions[question.id].upvotes_count == 10
        assert len(database.votes) == 10

        retracted = await asyncio.gather(
            *(
                request_services(database)[0].toggle_vote(question.id, voter)
                for voter in voters
            )
        )

        assert not any(state.voted for state in retracted)
        assert database.questions[question.id].upvotes_count == 0
        assert database.votes == {}

    @pytest.mark.asyncio
    async def test_same_voter_racing_keeps_counter_equal_to_ledger(self):
        """Racing toggles by one voter never split the counter from the ledger."""
        database = InMemoryDatabase()
        question = await seed_question(database)
        voter = UserId(uuid4())

        results = await asyncio.gather(
            *(
                request_services(database)[0].toggle_vote(question.id, voter)
                for _ in range(4)
            ),
            return_exceptions=True,
        )

        unexpected = [
            r for r in results if isinstance(r, Exception) and not isinstance(r, ConflictError)
        ]
        assert unexpected == []
        ledger_rows = sum(1 for v in database.votes.values() if v.question_id == question.id)
        assert database.questions[question.id].upvotes_count == ledger_rows
        assert ledger_rows in (0, 1)

    @pytest.mark.asyncio
    async def test_concurrent_deltas_are_not_lost(self):
        database = InMemoryDatabase()
        question = await seed_question(database)

        await asyncio.gather(
            *(
                CounterService(Yielding(InMemoryQuestionRepository(database))).apply_delta(
                    question.id, QuestionCounter.ANSWERS, 1
                )
                for _ in range(50)
            )
        )

        assert database.questions[question.id].answers_count == 50


class TestConcurrentAcceptance:
    """Acceptance exclusivity under interleaving."""

    @pytest.mark.asyncio
    async def test_racing_accepts_leave_exactly_one_accepted(self):
        database = InMemoryDatabase()
        author_id = UserId(uuid4())
        question = await seed_question(database, author_id)
        answer_repository = InMemoryAnswerRepository(database)
        answers = [await answer_repository.create(make_answer(question.id)) for _ in range(5)]

        results = await asyncio.gather(
            *(
                request_services(database)[1].accept_answer(
                    question.id, answer.id, author_id
                )
                for answer in answers
            )
        )

        assert all(result.solved for result in results)
        assert await answer_repository.count_accepted(question.id) == 1
        assert database.questions[question.id].solved is True

    @pytest.mark.asyncio
    async def test_answers_posted_concurrently_are_all_counted(self):
        database = InMemoryDatabase()
        question = await seed_question(database)

        await asyncio.gather(
            *(
                request_services(database)[1].create_answer(
                    question_id=question.id,
                    author_id=UserId(uuid4()),
                    author_email=None,
                    body=f"Answer number {i} with enough text.",
                )
                for i in range(8)
            )
        )

        assert database.questions[question.id].answers_count == 8
        assert len(database.answers) == 8
