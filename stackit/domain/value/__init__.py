"""Domain value objects for StackIt."""

from stackit.domain.value.identifiers import (
    AnswerId,
    CommentId,
    NotificationId,
    QuestionId,
    UserId,
    VoteId,
)
from stackit.domain.value.types import (
    Identity,
    NotificationType,
    Username,
    VotableType,
    VoteDirection,
    VoteType,
)

__all__ = [
    # Identifiers
    "UserId",
    "QuestionId",
    "AnswerId",
    "CommentId",
    "VoteId",
    "NotificationId",
    # Types
    "Identity",
    "NotificationType",
    "Username",
    "VotableType",
    "VoteDirection",
    "VoteType",
]
