"""Application layer DI providers."""

from dishka import Scope, provide

from stackit.application.usecase.answer import (
    CreateAnswerUseCase,
    GetAnswerUseCase,
    ToggleAcceptanceUseCase,
)
from stackit.application.usecase.comment import CreateCommentUseCase, GetCommentsUseCase
from stackit.application.usecase.notification import (
    ClearNotificationsUseCase,
    DeleteNotificationUseCase,
    GetNotificationStatsUseCase,
    GetNotificationUseCase,
    GetUnreadCountUseCase,
    ListNotificationsUseCase,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadUseCase,
    MarkNotificationUnreadUseCase,
)
from stackit.application.usecase.question import (
    CreateQuestionUseCase,
    GetQuestionUseCase,
)
from stackit.application.usecase.user import GetCurrentUserUseCase
from stackit.application.usecase.vote import CastVoteUseCase
from stackit.domain.service import (
    AcceptanceService,
    AnswerService,
    CommentService,
    NotificationDispatcher,
    NotificationService,
    QuestionService,
    RateLimitService,
    UserService,
    VoteService,
)
from stackit.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Question use cases
    @provide
    def get_create_question_use_case(
        self,
        question_service: QuestionService,
        user_service: UserService,
        rate_limit_service: RateLimitService,
    ) -> CreateQuestionUseCase:
        return CreateQuestionUseCase(
            question_service=question_service,
            user_service=user_service,
            rate_limit_service=rate_limit_service,
        )

    @provide
    def get_get_question_use_case(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        vote_service: VoteService,
    ) -> GetQuestionUseCase:
        return GetQuestionUseCase(
            question_service=question_service,
            answer_service=answer_service,
            vote_service=vote_service,
        )

    # Vote use cases
    @provide
    def get_cast_vote_use_case(
        self,
        vote_service: VoteService,
        user_service: UserService,
        dispatcher: NotificationDispatcher,
        rate_limit_service: RateLimitService,
    ) -> CastVoteUseCase:
        return CastVoteUseCase(
            vote_service=vote_service,
            user_service=user_service,
            dispatcher=dispatcher,
            rate_limit_service=rate_limit_service,
        )

    # Answer use cases
    @provide
    def get_create_answer_use_case(
        self,
        answer_service: AnswerService,
        question_service: QuestionService,
        user_service: UserService,
        dispatcher: NotificationDispatcher,
        rate_limit_service: RateLimitService,
    ) -> CreateAnswerUseCase:
        return CreateAnswerUseCase(
            answer_service=answer_service,
            question_service=question_service,
            user_service=user_service,
            dispatcher=dispatcher,
            rate_limit_service=rate_limit_service,
        )

    @provide
    def get_get_answer_use_case(
        self, answer_service: AnswerService, vote_service: VoteService
    ) -> GetAnswerUseCase:
        return GetAnswerUseCase(answer_service=answer_service, vote_service=vote_service)

    @provide
    def get_toggle_acceptance_use_case(
        self,
        acceptance_service: AcceptanceService,
        user_service: UserService,
        dispatcher: NotificationDispatcher,
    ) -> ToggleAcceptanceUseCase:
        return ToggleAcceptanceUseCase(
            acceptance_service=acceptance_service,
            user_service=user_service,
            dispatcher=dispatcher,
        )

    # Comment use cases
    @provide
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        answer_service: AnswerService,
        user_service: UserService,
        dispatcher: NotificationDispatcher,
    ) -> CreateCommentUseCase:
        return CreateCommentUseCase(
            comment_service=comment_service,
            answer_service=answer_service,
            user_service=user_service,
            dispatcher=dispatcher,
        )

    @provide
    def get_get_comments_use_case(
        self, comment_service: CommentService, answer_service: AnswerService
    ) -> GetCommentsUseCase:
        return GetCommentsUseCase(
            comment_service=comment_service, answer_service=answer_service
        )

    # Notification use cases
    @provide
    def get_list_notifications_use_case(
        self, notification_service: NotificationService
    ) -> ListNotificationsUseCase:
        return ListNotificationsUseCase(notification_service=notification_service)

    @provide
    def get_get_notification_use_case(
        self, notification_service: NotificationService
    ) -> GetNotificationUseCase:
        return GetNotificationUseCase(notification_service=notification_service)

    @provide
    def get_mark_notification_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkNotificationReadUseCase:
        return MarkNotificationReadUseCase(notification_service=notification_service)

    @provide
    def get_mark_notification_unread_use_case(
        self, notification_service: NotificationService
    ) -> MarkNotificationUnreadUseCase:
        return MarkNotificationUnreadUseCase(notification_service=notification_service)

    @provide
    def get_mark_all_notifications_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkAllNotificationsReadUseCase:
        return MarkAllNotificationsReadUseCase(notification_service=notification_service)

    @provide
    def get_delete_notification_use_case(
        self, notification_service: NotificationService
    ) -> DeleteNotificationUseCase:
        return DeleteNotificationUseCase(notification_service=notification_service)

    @provide
    def get_clear_notifications_use_case(
        self, notification_service: NotificationService
    ) -> ClearNotificationsUseCase:
        return ClearNotificationsUseCase(notification_service=notification_service)

    @provide
    def get_unread_count_use_case(
        self, notification_service: NotificationService
    ) -> GetUnreadCountUseCase:
        return GetUnreadCountUseCase(notification_service=notification_service)

    @provide
    def get_notification_stats_use_case(
        self, notification_service: NotificationService
    ) -> GetNotificationStatsUseCase:
        return GetNotificationStatsUseCase(notification_service=notification_service)

    # User use cases
    @provide
    def get_current_user_use_case(
        self,
        user_service: UserService,
        notification_service: NotificationService,
    ) -> GetCurrentUserUseCase:
        return GetCurrentUserUseCase(
            user_service=user_service, notification_service=notification_service
        )
