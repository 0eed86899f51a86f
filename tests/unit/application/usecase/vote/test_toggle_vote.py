"""Unit tests for ToggleVoteUseCase."""

from uuid import uuid4

import pytest

from study.application.usecase.vote import ToggleVoteRequest, ToggleVoteUseCase
from study.domain.error import NotFoundError
from study.domain.repository import QuestionRepository
from tests.conftest import make_question
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestToggleVoteUseCase:
    """Tests for ToggleVoteUseCase."""

    @pytest.mark.asyncio
    async def test_toggle_twice(self, unit_env):
        use_case = await unit_env.get(ToggleVoteUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.create(make_question())
        request = ToggleVoteRequest(question_id=str(question.id), user_id=str(uuid4()))

        first = await use_case.execute(request)
        second = await use_case.execute(request)

        assert (first.voted, first.upvotes_count) == (True, 1)
        assert (second.voted, second.upvotes_count) == (False, 0)
        assert first.question_id == str(question.id)

    @pytest.mark.asyncio
    async def test_unknown_question(self, unit_env):
        use_case = await unit_env.get(ToggleVoteUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                ToggleVoteRequest(question_id=str(uuid4()), user_id=str(uuid4()))
            )
