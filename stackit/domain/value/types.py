"""Domain value objects for StackIt."""

import re
from enum import Enum

from pydantic import field_validator

from stackit.domain.value.common import RootValueObject, ValueObject

USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_]{3,30}$")


class VoteType(str, Enum):
    """Vote action requested by a user.

    ``remove`` withdraws whatever vote the user currently holds.
    """

    UPVOTE = "upvote"
    DOWNVOTE = "downvote"
    REMOVE = "remove"


class VoteDirection(str, Enum):
    """Direction of a stored vote."""

    UP = "up"
    DOWN = "down"

    @property
    def weight(self) -> int:
        """Contribution of this vote to the entity score."""
        return 1 if self is VoteDirection.UP else -1

    @property
    def vote_type(self) -> VoteType:
        return VoteType.UPVOTE if self is VoteDirection.UP else VoteType.DOWNVOTE


class VotableType(str, Enum):
    """Type of entity that can be voted on."""

    QUESTION = "question"
    ANSWER = "answer"


class NotificationType(str, Enum):
    """Kind of event a notification reports."""

    ANSWER = "answer"
    COMMENT = "comment"
    VOTE = "vote"
    ACCEPT = "accept"
    MENTION = "mention"
    BOUNTY = "bounty"
    SYSTEM = "system"

    @property
    def default_content(self) -> str:
        """Fallback text used when a notification is created without content."""
        return _DEFAULT_CONTENT[self]


_DEFAULT_CONTENT = {
    NotificationType.ANSWER: "Someone answered your question",
    NotificationType.COMMENT: "Someone commented on your question/answer",
    NotificationType.VOTE: "Someone voted on your question/answer",
    NotificationType.ACCEPT: "Your answer was accepted as the best answer",
    NotificationType.MENTION: "Someone mentioned you in a comment",
    NotificationType.BOUNTY: "A bounty was added to your question",
    NotificationType.SYSTEM: "System notification",
}


class Username(RootValueObject[str]):
    """Public username.

    3-30 characters: letters, digits and underscores. This is also the
    token grammar recognised after ``@`` in comment mentions.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not USERNAME_PATTERN.match(v):
            raise ValueError(
                "Username must be 3-30 characters of letters, numbers and underscores"
            )
        return v


class Identity(ValueObject):
    """Authenticated caller resolved from a credential."""

    user_id: str
    username: str
    scheme: str  # Which credential verifier accepted the token
