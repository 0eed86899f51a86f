"""List answers use case."""

from uuid import UUID

from pydantic import BaseModel

from study.domain.error import NotFoundError
from study.domain.service import AnswerService, QuestionService
from study.domain.value import QuestionId

from .create_answer import AnswerResponse


class ListAnswersRequest(BaseModel):
    """List answers request."""

    question_id: str  # UUID string


class ListAnswersResponse(BaseModel):
    """List answers response (accepted answer first)."""

    question_id: str
    answers: list[AnswerResponse]


class ListAnswersUseCase:
    """Use case for listing the answers to a question."""

    def __init__(
        self, answer_service: AnswerService, question_service: QuestionService
    ) -> None:
        """Initialize list answers use case.

        Args:
            answer_service: Answer domain service
            question_service: Question domain service
        """
        self.answer_service = answer_service
        self.question_service = question_service

    async def execute(self, request: ListAnswersRequest) -> ListAnswersResponse:
        """Execute list answers flow.

        Raises:
            NotFoundError: If the question does not exist
        """
        question_id = QuestionId(UUID(request.question_id))

        question = await self.question_service.get_question_by_id(question_id)
        if not question:
            raise NotFoundError("Question", request.question_id)

        answers = await self.answer_service.get_answers_for_question(question_id)
        return ListAnswersResponse(
            question_id=request.question_id,
            answers=[AnswerResponse.from_answer(a) for a in answers],
        )
