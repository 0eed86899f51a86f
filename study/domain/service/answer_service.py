"""Answer domain service.

Owns answer creation and the acceptance transition. Acceptance is the only
path that changes Answer.is_accepted and Question.solved.
"""

from datetime import datetime
from uuid import uuid4

import logfire

from study.domain.error import (
    ConflictError,
    InvariantViolationError,
    NotAuthorizedError,
    NotFoundError,
)
from study.domain.model.answer import Answer
from study.domain.model.question import Question
from study.domain.repository import AnswerRepository, UnitOfWork
from study.domain.value import AnswerId, QuestionCounter, QuestionId, UserId

from .base import Service
from .counter_service import CounterService
from .question_service import QuestionService


class AnswerService(Service):
    """Domain service for answers and answer acceptance."""

    def __init__(
        self,
        answer_repository: AnswerRepository,
        question_service: QuestionService,
        counter_service: CounterService,
        unit_of_work: UnitOfWork,
        accept_max_attempts: int = 3,
    ) -> None:
        """Initialize answer service.

        Args:
            answer_repository: Answer repository
            question_service: Question domain service
            counter_service: Counter projector
            unit_of_work: Makes each multi-step write all-or-nothing
            accept_max_attempts: Attempts for an acceptance that loses a race
        """
        self.answer_repository = answer_repository
        self.question_service = question_service
        self.counter_service = counter_service
        self.unit_of_work = unit_of_work
        self.accept_max_attempts = accept_max_attempts

    async def create_answer(
        self,
        question_id: QuestionId,
        author_id: UserId,
        author_email: str | None,
        body: str,
    ) -> Answer:
        """Post an answer to a question.

        Args:
            question_id: Question ID
            author_id: Author user ID
            author_email: Author email (denormalized for display)
            body: Answer text

        Returns:
            Created answer (pending)

        Raises:
            NotFoundError: If the question does not exist
            ValueError: If the body is invalid
        """
        with logfire.span(
            "answer_service.create_answer",
            question_id=str(question_id),
            author_id=str(author_id),
        ):
            question = await self.question_service.get_question_by_id(question_id)
            if not question:
                raise NotFoundError("Question", str(question_id))

            answer = Answer(
                id=AnswerId(uuid4()),
                question_id=question_id,
                body=body.strip(),
                author_id=author_id,
                author_email=author_email,
                is_accepted=False,
                created_at=datetime.now(),
            )
            async with self.unit_of_work.atomic():
                saved = await self.answer_repository.create(answer)
                await self.counter_service.apply_delta(
                    question_id, QuestionCounter.ANSWERS, 1
                )

            logfire.info(
                "Answer created",
                answer_id=str(saved.id),
                question_id=str(question_id),
            )
            return saved

    async def get_answers_for_question(self, question_id: QuestionId) -> list[Answer]:
        """Get answers to a question, accepted first then oldest first."""
        with logfire.span(
            "answer_service.get_answers_for_question", question_id=str(question_id)
        ):
            answers = await self.answer_repository.find_by_question(question_id)
            logfire.info(
                "Answers fetched", question_id=str(question_id), count=len(answers)
            )
            return answers

    async def accept_answer(
        self,
        question_id: QuestionId,
        answer_id: AnswerId,
        acting_user_id: UserId,
    ) -> Question:
        """Accept an answer on behalf of the question's author.

        Any previously accepted answer reverts to pending in the same
        transition. Transitions that lose a race against another transition
        on the same question are retried.

        Args:
            question_id: Question ID
            answer_id: Answer to accept
            acting_user_id: Authenticated user performing the action

        Returns:
            The question after the transition

        Raises:
            NotFoundError: If the question or answer does not exist, or the
                answer belongs to another question
            NotAuthorizedError: If the acting user did not ask the question
            ConflictError: If every attempt lost a race
            InvariantViolationError: If the transition did not leave exactly
                one accepted answer
        """
        with logfire.span(
            "answer_service.accept_answer",
            question_id=str(question_id),
            answer_id=str(answer_id),
            acting_user_id=str(acting_user_id),
        ):
            question = await self.question_service.get_question_by_id(question_id)
            if not question:
                raise NotFoundError("Question", str(question_id))

            if question.author_id != acting_user_id:
                logfire.warn(
                    "Unauthorized answer acceptance attempt",
                    question_id=str(question_id),
                    acting_user_id=str(acting_user_id),
                )
                raise NotAuthorizedError(
                    "accept answers on", "question", str(question_id), str(acting_user_id)
                )

            answer = await self.answer_repository.find_by_id(answer_id)
            if not answer or answer.question_id != question_id:
                logfire.warn(
                    "Answer not found on question",
                    question_id=str(question_id),
                    answer_id=str(answer_id),
                )
                raise NotFoundError("Answer", str(answer_id))

            # Raising inside the block reverts a transition that broke exclusivity
            async with self.unit_of_work.atomic():
                accepted = await self._accept_with_retry(question_id, answer_id)
                if accepted != 1:
                    logfire.error(
                        "Acceptance left question with wrong number of accepted answers",
                        question_id=str(question_id),
                        accepted=accepted,
                    )
                    raise InvariantViolationError(
                        f"Question {question_id} has {accepted} accepted answers"
                    )

            updated = await self.question_service.get_question_by_id(question_id)
            if not updated:
                raise NotFoundError("Question", str(question_id))

            logfire.info(
                "Answer accepted",
                question_id=str(question_id),
                answer_id=str(answer_id),
            )
            return updated

    async def _accept_with_retry(
        self, question_id: QuestionId, answer_id: AnswerId
    ) -> int:
        for attempt in range(1, self.accept_max_attempts + 1):
            try:
                return await self.answer_repository.accept(question_id, answer_id)
            except ConflictError as e:
                if attempt == self.accept_max_attempts:
                    logfire.error(
                        "Acceptance transition failed after retries",
                        question_id=str(question_id),
                        attempts=attempt,
                        error=str(e),
                    )
                    raise
                logfire.warn(
                    "Acceptance transition conflict, retrying",
                    question_id=str(question_id),
                    attempt=attempt,
                )
        raise ConflictError(f"Acceptance on question {question_id} did not run")
