"""Unit tests for QuestionService."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from study.domain.repository import QuestionRepository, QuestionSortOrder
from study.domain.service import QuestionService
from study.domain.value import CourseCode, Level, QuestionId, UserId
from tests.conftest import make_question, minutes_ago
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateQuestion:
    """Tests for create_question."""

    @pytest.mark.asyncio
    async def test_new_question_starts_open_with_zero_counters(self, unit_env):
        """Counters start at zero and solved starts false."""
        question_service = await unit_env.get(QuestionService)
        author_id = UserId(uuid4())

        question = await question_service.create_question(
            author_id=author_id,
            author_email="ada@student.example.edu",
            title="  What is amortized analysis?  ",
            body="Our lecturer mentioned it for dynamic arrays.",
            course_code=" csc 201 ",
            level=Level.L200,
        )

        assert question.title == "What is amortized analysis?"
        assert question.course_code == CourseCode("CSC 201")
        assert question.upvotes_count == 0
        assert question.answers_count == 0
        assert question.solved is False
        assert question.tags == ["CSC 201", "200"]

        stored = await question_service.get_question_by_id(question.id)
        assert stored == question

    @pytest.mark.asyncio
    async def test_blank_course_code_is_dropped(self, unit_env):
        question_service = await unit_env.get(QuestionService)

        question = await question_service.create_question(
            author_id=UserId(uuid4()),
            author_email=None,
            title="Where is the exam venue?",
            body="The timetable does not say which hall.",
            course_code="   ",
        )

        assert question.course_code is None
        assert question.tags == []

    @pytest.mark.asyncio
    async def test_short_title_is_rejected(self, unit_env):
        question_service = await unit_env.get(QuestionService)

        with pytest.raises(ValidationError):
            await question_service.create_question(
                author_id=UserId(uuid4()),
                author_email=None,
                title="Help",
                body="The timetable does not say which hall.",
            )

    @pytest.mark.asyncio
    async def test_get_missing_question_returns_none(self, unit_env):
        question_service = await unit_env.get(QuestionService)

        assert await question_service.get_question_by_id(QuestionId(uuid4())) is None


class TestListQuestions:
    """Tests for list_questions sort orders and filters."""

    @pytest.mark.asyncio
    async def test_sort_orders(self, unit_env):
        """Each sort order ranks by its counter, newest first on ties."""
        question_service = await unit_env.get(QuestionService)
        question_repo = await unit_env.get(QuestionRepository)

        oldest = await question_repo.create(
            make_question(created_at=minutes_ago(30), upvotes_count=5, answers_count=0)
        )
        middle = await question_repo.create(
            make_question(created_at=minutes_ago(20), upvotes_count=1, answers_count=3)
        )
        newest = await question_repo.create(
            make_question(created_at=minutes_ago(10), upvotes_count=1, answers_count=0)
        )

        async def ids(sort: QuestionSortOrder) -> list:
            questions, _ = await question_service.list_questions(sort=sort)
            return [q.id for q in questions]

        assert await ids(QuestionSortOrder.NEWEST) == [newest.id, middle.id, oldest.id]
        assert await ids(QuestionSortOrder.UPVOTED) == [oldest.id, newest.id, middle.id]
        assert await ids(QuestionSortOrder.ANSWERED) == [middle.id, newest.id, oldest.id]
        assert await ids(QuestionSortOrder.UNANSWERED) == [
            newest.id,
            oldest.id,
            middle.id,
        ]

    @pytest.mark.asyncio
    async def test_filters_and_pagination(self, unit_env):
        """Filters narrow both the page and the total."""
        question_service = await unit_env.get(QuestionService)
        question_repo = await unit_env.get(QuestionRepository)

        await question_repo.create(make_question(course_code="MTH 101", level=Level.L100))
        await question_repo.create(make_question(course_code="CSC 201", solved=True))
        for minutes in (3, 2, 1):
            await question_repo.create(
                make_question(course_code="CSC 201", created_at=minutes_ago(minutes))
            )

        page, total = await question_service.list_questions(
            course_code=CourseCode("CSC 201"), unsolved_only=True, limit=2, offset=0
        )
        assert total == 3
        assert len(page) == 2
        assert all(q.course_code == CourseCode("CSC 201") for q in page)
        assert not any(q.solved for q in page)

        by_level, level_total = await question_service.list_questions(level=Level.L100)
        assert level_total == 1
        assert by_level[0].course_code == CourseCode("MTH 101")
