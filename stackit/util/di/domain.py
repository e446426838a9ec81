"""Domain layer DI providers."""

from dishka import Scope, provide

from stackit.config import AuthSettings, NotificationSettings, RateLimitSettings
from stackit.domain.repository import (
    AnswerRepository,
    CommentRepository,
    NotificationRepository,
    QuestionRepository,
    UserRepository,
    VoteRepository,
)
from stackit.domain.service import (
    AcceptanceService,
    AnswerService,
    CommentService,
    CredentialService,
    CredentialVerifier,
    JWTService,
    NotificationDispatcher,
    NotificationPublisher,
    NotificationService,
    QuestionService,
    RateLimiter,
    RateLimitService,
    SessionTokenVerifier,
    UserService,
    VoteService,
)
from stackit.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide session token domain service (stateless)."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        return UserService(user_repository=user_repository)

    @provide
    def get_question_service(
        self, question_repository: QuestionRepository
    ) -> QuestionService:
        return QuestionService(question_repository=question_repository)

    @provide
    def get_answer_service(self, answer_repository: AnswerRepository) -> AnswerService:
        return AnswerService(answer_repository=answer_repository)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> VoteService:
        return VoteService(
            vote_repository=vote_repository,
            question_repository=question_repository,
            answer_repository=answer_repository,
        )

    @provide
    def get_acceptance_service(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> AcceptanceService:
        return AcceptanceService(
            question_repository=question_repository,
            answer_repository=answer_repository,
        )

    @provide
    def get_notification_service(
        self,
        notification_repository: NotificationRepository,
        settings: NotificationSettings,
    ) -> NotificationService:
        return NotificationService(
            notification_repository=notification_repository, settings=settings
        )

    @provide
    def get_notification_dispatcher(
        self,
        notification_service: NotificationService,
        publisher: NotificationPublisher,
    ) -> NotificationDispatcher:
        """Provide the event dispatcher wired to the real-time channel."""
        return NotificationDispatcher(
            notification_service=notification_service, publisher=publisher
        )

    @provide
    def get_rate_limit_service(
        self, rate_limiter: RateLimiter, settings: RateLimitSettings
    ) -> RateLimitService:
        return RateLimitService(rate_limiter=rate_limiter, settings=settings)

    @provide
    def get_session_token_verifier(
        self, jwt_service: JWTService, user_repository: UserRepository
    ) -> SessionTokenVerifier:
        return SessionTokenVerifier(
            jwt_service=jwt_service, user_repository=user_repository
        )

    @provide
    def get_credential_service(
        self, verifiers: list[CredentialVerifier]
    ) -> CredentialService:
        """Provide the credential chain assembled by the identity component."""
        return CredentialService(verifiers=verifiers)
