"""Unit tests for CounterService."""

from uuid import uuid4

import pytest

from study.domain.error import InvariantViolationError, NotFoundError
from study.domain.repository import QuestionRepository
from study.domain.service import CounterService
from study.domain.value import QuestionCounter, QuestionId
from tests.conftest import make_question
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestApplyDelta:
    """Tests for apply_delta."""

    @pytest.mark.asyncio
    async def test_increment_returns_new_value(self, unit_env):
        """+1 should increase the counter and return the new value."""
        counter_service = await unit_env.get(CounterService)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.create(make_question())

        value = await counter_service.apply_delta(
            question.id, QuestionCounter.UPVOTES, 1
        )

        assert value == 1
        stored = await question_repo.find_by_id(question.id)
        assert stored.upvotes_count == 1
        assert stored.answers_count == 0

    @pytest.mark.asyncio
    async def test_decrement_after_increment(self, unit_env):
        """-1 should undo a previous +1."""
        counter_service = await unit_env.get(CounterService)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.create(make_question())

        await counter_service.apply_delta(question.id, QuestionCounter.ANSWERS, 1)
        value = await counter_service.apply_delta(
            question.id, QuestionCounter.ANSWERS, -1
        )

        assert value == 0

    @pytest.mark.asyncio
    async def test_decrement_below_zero_is_rejected(self, unit_env):
        """A delta that would make a counter negative must fail, not clamp."""
        counter_service = await unit_env.get(CounterService)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.create(make_question())

        with pytest.raises(InvariantViolationError):
            await counter_service.apply_delta(
                question.id, QuestionCounter.UPVOTES, -1
            )

        stored = await question_repo.find_by_id(question.id)
        assert stored.upvotes_count == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("delta", [0, 2, -2, 10])
    async def test_delta_must_be_unit(self, unit_env, delta):
        """Only +1 and -1 are accepted."""
        counter_service = await unit_env.get(CounterService)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.create(make_question())

        with pytest.raises(ValueError, match="must be \\+1 or -1"):
            await counter_service.apply_delta(
                question.id, QuestionCounter.UPVOTES, delta
            )

    @pytest.mark.asyncio
    async def test_missing_question_raises_not_found(self, unit_env):
        """Applying a delta to an unknown question raises NotFoundError."""
        counter_service = await unit_env.get(CounterService)

        with pytest.raises(NotFoundError):
            await counter_service.apply_delta(
                QuestionId(uuid4()), QuestionCounter.UPVOTES, 1
            )
