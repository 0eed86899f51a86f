"""Unit tests for the in-memory unit of work."""

import asyncio
from uuid import uuid4

import pytest

from study.domain.error import InvariantViolationError
from study.domain.model import Vote
from study.domain.value import QuestionCounter, UserId
from study.persistence.repository.inmemory import (
    InMemoryDatabase,
    InMemoryQuestionRepository,
    InMemoryUnitOfWork,
    InMemoryVoteRepository,
)
from tests.conftest import make_question


@pytest.fixture
def database():
    return InMemoryDatabase()


class TestInMemoryUnitOfWork:
    """Atomic blocks over the in-memory store."""

    @pytest.mark.asyncio
    async def test_completed_block_keeps_writes(self, database):
        questions = InMemoryQuestionRepository(database)
        question = await questions.create(make_question())

        async with InMemoryUnitOfWork(database).atomic():
            await questions.apply_delta(question.id, QuestionCounter.UPVOTES, 1)

        assert database.questions[question.id].upvotes_count == 1

    @pytest.mark.asyncio
    async def test_failed_block_reverts_every_write(self, database):
        questions = InMemoryQuestionRepository(database)
        votes = InMemoryVoteRepository(database)
        question = await questions.create(make_question())
        kept = Vote(question_id=question.id, voter_id=UserId(uuid4()))
        await votes.create(kept)
        added = Vote(question_id=question.id, voter_id=UserId(uuid4()))

        with pytest.raises(InvariantViolationError):
            async with InMemoryUnitOfWork(database).atomic():
                await votes.delete(kept.question_id, kept.voter_id)
                await votes.create(added)
                await questions.apply_delta(question.id, QuestionCounter.ANSWERS, 1)
                await questions.apply_delta(question.id, QuestionCounter.UPVOTES, -1)

        assert set(database.votes) == {(kept.question_id, kept.voter_id)}
        assert database.questions[question.id].answers_count == 0
        assert database.questions[question.id].upvotes_count == 0

    @pytest.mark.asyncio
    async def test_outer_failure_reverts_completed_inner_block(self, database):
        questions = InMemoryQuestionRepository(database)
        question = await questions.create(make_question())
        unit_of_work = InMemoryUnitOfWork(database)

        with pytest.raises(RuntimeError):
            async with unit_of_work.atomic():
                async with unit_of_work.atomic():
                    await questions.apply_delta(question.id, QuestionCounter.UPVOTES, 1)
                raise RuntimeError("outer step failed")

        assert database.questions[question.id].upvotes_count == 0

    @pytest.mark.asyncio
    async def test_rollback_leaves_other_tasks_writes(self, database):
        """Reverting one task's block does not erase interleaved writes."""
        questions = InMemoryQuestionRepository(database)
        question = await questions.create(make_question())
        unit_of_work = InMemoryUnitOfWork(database)

        async def succeed():
            async with unit_of_work.atomic():
                await asyncio.sleep(0)
                await questions.apply_delta(question.id, QuestionCounter.UPVOTES, 1)
                await asyncio.sleep(0)

        async def fail():
            async with unit_of_work.atomic():
                await questions.apply_delta(question.id, QuestionCounter.UPVOTES, 1)
                await asyncio.sleep(0)
                await asyncio.sleep(0)
                raise RuntimeError("late failure")

        results = await asyncio.gather(succeed(), fail(), return_exceptions=True)

        assert results[0] is None
        assert isinstance(results[1], RuntimeError)
        assert database.questions[question.id].upvotes_count == 1

    @pytest.mark.asyncio
    async def test_writes_outside_a_block_are_not_journaled(self, database):
        questions = InMemoryQuestionRepository(database)
        question = await questions.create(make_question())

        with pytest.raises(RuntimeError):
            async with InMemoryUnitOfWork(database).atomic():
                raise RuntimeError("nothing written")

        assert question.id in database.questions
