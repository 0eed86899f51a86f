"""Application layer DI providers."""

from dishka import Scope, provide

from study.application.usecase.answer import (
    AcceptAnswerUseCase,
    CreateAnswerUseCase,
    ListAnswersUseCase,
)
from study.application.usecase.auth import GetCurrentUserUseCase
from study.application.usecase.question import (
    CreateQuestionUseCase,
    GetQuestionUseCase,
    ListQuestionsUseCase,
)
from study.application.usecase.vote import ToggleVoteUseCase
from study.config import QASettings
from study.domain.service import (
    AnswerService,
    JWTService,
    QuestionService,
    VoteService,
)
from study.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(self, jwt_service: JWTService) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(jwt_service=jwt_service)

    # Question use cases
    @provide(scope=Scope.REQUEST)
    def get_create_question_use_case(
        self, question_service: QuestionService
    ) -> CreateQuestionUseCase:
        """Provide create question use case."""
        return CreateQuestionUseCase(question_service=question_service)

    @provide(scope=Scope.REQUEST)
    def get_get_question_use_case(
        self, question_service: QuestionService, vote_service: VoteService
    ) -> GetQuestionUseCase:
        """Provide get question use case."""
        return GetQuestionUseCase(
            question_service=question_service, vote_service=vote_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_questions_use_case(
        self,
        question_service: QuestionService,
        vote_service: VoteService,
        qa_settings: QASettings,
    ) -> ListQuestionsUseCase:
        """Provide list questions use case."""
        return ListQuestionsUseCase(
            question_service=question_service,
            vote_service=vote_service,
            qa_settings=qa_settings,
        )

    # Answer use cases
    @provide(scope=Scope.REQUEST)
    def get_create_answer_use_case(
        self, answer_service: AnswerService
    ) -> CreateAnswerUseCase:
        """Provide create answer use case."""
        return CreateAnswerUseCase(answer_service=answer_service)

    @provide(scope=Scope.REQUEST)
    def get_list_answers_use_case(
        self, answer_service: AnswerService, question_service: QuestionService
    ) -> ListAnswersUseCase:
        """Provide list answers use case."""
        return ListAnswersUseCase(
            answer_service=answer_service, question_service=question_service
        )

    @provide(scope=Scope.REQUEST)
    def get_accept_answer_use_case(
        self, answer_service: AnswerService, vote_service: VoteService
    ) -> AcceptAnswerUseCase:
        """Provide accept answer use case."""
        return AcceptAnswerUseCase(
            answer_service=answer_service, vote_service=vote_service
        )

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_toggle_vote_use_case(self, vote_service: VoteService) -> ToggleVoteUseCase:
        """Provide toggle vote use case."""
        return ToggleVoteUseCase(vote_service=vote_service)
