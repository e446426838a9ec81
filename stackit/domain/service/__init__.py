"""Domain services."""

from .acceptance_service import AcceptanceOutcome, AcceptanceService
from .answer_service import AnswerService
from .base import Service
from .comment_service import CommentService, parse_mentions
from .credential_service import (
    CredentialService,
    CredentialVerifier,
    SessionTokenVerifier,
)
from .jwt_service import JWTService
from .notification_dispatcher import (
    NotificationDispatcher,
    NotificationPublisher,
    push_payload,
)
from .notification_service import (
    NotificationPage,
    NotificationService,
    NotificationTypeStats,
)
from .question_service import QuestionService
from .rate_limit_service import (
    RateLimitDecision,
    RateLimitedAction,
    RateLimiter,
    RateLimitService,
)
from .user_service import UserService
from .vote_service import VoteOutcome, VoteService

__all__ = [
    "AcceptanceOutcome",
    "AcceptanceService",
    "AnswerService",
    "CommentService",
    "CredentialService",
    "CredentialVerifier",
    "JWTService",
    "NotificationDispatcher",
    "NotificationPage",
    "NotificationPublisher",
    "NotificationService",
    "NotificationTypeStats",
    "QuestionService",
    "RateLimitDecision",
    "RateLimitedAction",
    "RateLimiter",
    "RateLimitService",
    "Service",
    "SessionTokenVerifier",
    "UserService",
    "VoteOutcome",
    "VoteService",
    "parse_mentions",
]
