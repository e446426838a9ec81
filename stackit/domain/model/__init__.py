"""Domain model entities for StackIt."""

from stackit.domain.model.answer import Answer
from stackit.domain.model.comment import Comment
from stackit.domain.model.notification import Notification
from stackit.domain.model.question import Question
from stackit.domain.model.user import User
from stackit.domain.model.vote import Vote, VoteTally

__all__ = [
    "User",
    "Question",
    "Answer",
    "Comment",
    "Vote",
    "VoteTally",
    "Notification",
]
