"""In-memory question repository for testing."""

from typing import Optional

from study.domain.error import InvariantViolationError
from study.domain.model.question import Question
from study.domain.repository.question import QuestionRepository, QuestionSortOrder
from study.domain.value import CourseCode, Level, QuestionCounter, QuestionId

from .database import InMemoryDatabase


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self._db = database

    def _filtered(
        self,
        course_code: Optional[CourseCode],
        level: Optional[Level],
        unsolved_only: bool,
    ) -> list[Question]:
        questions = list(self._db.questions.values())
        if course_code is not None:
            questions = [q for q in questions if q.course_code == course_code]
        if level is not None:
            questions = [q for q in questions if q.level == level]
        if unsolved_only:
            questions = [q for q in questions if not q.solved]
        return questions

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        return self._db.questions.get(question_id)

    async def find_all(
        self,
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        course_code: Optional[CourseCode] = None,
        level: Optional[Level] = None,
        unsolved_only: bool = False,
        limit: int = 30,
        offset: int = 0,
    ) -> list[Question]:
        """Find questions with filtering and pagination."""
        questions = self._filtered(course_code, level, unsolved_only)

        # Stable sorts: newest first, then the primary key
        questions.sort(key=lambda q: q.created_at, reverse=True)
        if sort == QuestionSortOrder.UPVOTED:
            questions.sort(key=lambda q: q.upvotes_count, reverse=True)
        elif sort == QuestionSortOrder.ANSWERED:
            questions.sort(key=lambda q: q.answers_count, reverse=True)
        elif sort == QuestionSortOrder.UNANSWERED:
            questions.sort(key=lambda q: q.answers_count)

        return questions[offset : offset + limit]

    async def count(
        self,
        course_code: Optional[CourseCode] = None,
        level: Optional[Level] = None,
        unsolved_only: bool = False,
    ) -> int:
        """Count questions matching the given filters."""
        return len(self._filtered(course_code, level, unsolved_only))

    async def create(self, question: Question) -> Question:
        """Insert a new question."""
        self._db.questions[question.id] = question
        self._db.record(lambda: self._db.questions.pop(question.id, None))
        return question

    async def apply_delta(
        self, question_id: QuestionId, counter: QuestionCounter, delta: int
    ) -> Optional[int]:
        """Add a signed delta to a counter (no await between read and write)."""
        question = self._db.questions.get(question_id)
        if question is None:
            return None

        value = getattr(question, counter.value) + delta
        if value < 0:
            raise InvariantViolationError(
                f"{counter.value} of question {question_id} would become negative"
            )

        self._db.questions[question_id] = question.model_copy(
            update={counter.value: value}
        )
        self._db.record(lambda: self._revert_delta(question_id, counter, delta))
        return value

    def _revert_delta(
        self, question_id: QuestionId, counter: QuestionCounter, delta: int
    ) -> None:
        question = self._db.questions.get(question_id)
        if question is not None:
            self._db.questions[question_id] = question.model_copy(
                update={counter.value: getattr(question, counter.value) - delta}
            )
