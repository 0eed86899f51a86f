"""Domain layer DI providers."""

from dishka import Scope, provide

from study.config import AuthSettings, QASettings
from study.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    UnitOfWork,
    VoteRepository,
)
from study.domain.service import (
    AnswerService,
    CounterService,
    JWTService,
    QuestionService,
    VoteService,
)
from study.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_question_service(
        self, question_repository: QuestionRepository
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(question_repository=question_repository)

    @provide
    def get_counter_service(
        self, question_repository: QuestionRepository
    ) -> CounterService:
        """Provide counter projector."""
        return CounterService(question_repository=question_repository)

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        question_service: QuestionService,
        counter_service: CounterService,
        unit_of_work: UnitOfWork,
    ) -> VoteService:
        """Provide vote ledger domain service."""
        return VoteService(
            vote_repository=vote_repository,
            question_service=question_service,
            counter_service=counter_service,
            unit_of_work=unit_of_work,
        )

    @provide
    def get_answer_service(
        self,
        answer_repository: AnswerRepository,
        question_service: QuestionService,
        counter_service: CounterService,
        unit_of_work: UnitOfWork,
        qa_settings: QASettings,
    ) -> AnswerService:
        """Provide answer domain service."""
        return AnswerService(
            answer_repository=answer_repository,
            question_service=question_service,
            counter_service=counter_service,
            unit_of_work=unit_of_work,
            accept_max_attempts=qa_settings.accept_max_attempts,
        )
