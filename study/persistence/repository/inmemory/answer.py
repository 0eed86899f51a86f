"""In-memory answer repository for testing."""

from typing import Optional

from study.domain.error import NotFoundError
from study.domain.model.answer import Answer
from study.domain.repository.answer import AnswerRepository
from study.domain.value import AnswerId, QuestionId

from .database import InMemoryDatabase


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self._db = database

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        return self._db.answers.get(answer_id)

    async def find_by_question(self, question_id: QuestionId) -> list[Answer]:
        """Find all answers to a question, accepted first then oldest first."""
        answers = [a for a in self._db.answers.values() if a.question_id == question_id]
        answers.sort(key=lambda a: a.created_at)
        answers.sort(key=lambda a: a.is_accepted, reverse=True)
        return answers

    async def create(self, answer: Answer) -> Answer:
        """Insert a new answer."""
        self._db.answers[answer.id] = answer
        self._db.record(lambda: self._db.answers.pop(answer.id, None))
        return answer

    async def accept(self, question_id: QuestionId, answer_id: AnswerId) -> int:
        """Run the acceptance transition without yielding to the event loop."""
        question = self._db.questions.get(question_id)
        if question is None:
            raise NotFoundError("Question", str(question_id))

        target = self._db.answers.get(answer_id)
        if target is None or target.question_id != question_id:
            raise NotFoundError("Answer", str(answer_id))

        siblings = [a for a in self._db.answers.values() if a.question_id == question_id]
        flipped = []
        for answer in siblings:
            accepted = answer.id == answer_id
            if answer.is_accepted != accepted:
                self._db.answers[answer.id] = answer.model_copy(
                    update={"is_accepted": accepted}
                )
                flipped.append((answer.id, answer.is_accepted))

        self._db.questions[question_id] = question.model_copy(update={"solved": True})
        self._db.record(
            lambda: self._revert_accept(question_id, question.solved, flipped)
        )
        return await self.count_accepted(question_id)

    def _revert_accept(
        self,
        question_id: QuestionId,
        solved: bool,
        flipped: list[tuple[AnswerId, bool]],
    ) -> None:
        for answer_id, was_accepted in flipped:
            answer = self._db.answers.get(answer_id)
            if answer is not None:
                self._db.answers[answer_id] = answer.model_copy(
                    update={"is_accepted": was_accepted}
                )
        question = self._db.questions.get(question_id)
        if question is not None:
            self._db.questions[question_id] = question.model_copy(
                update={"solved": solved}
            )

    async def count_accepted(self, question_id: QuestionId) -> int:
        """Count accepted answers of a question."""
        return sum(
            1
            for a in self._db.answers.values()
            if a.question_id == question_id and a.is_accepted
        )
