"""Comment entity.

Comments are flat discussions attached to an answer. Mentions are resolved
to user ids when the comment is created and stored alongside it.
"""

from datetime import datetime

from pydantic import Field

from stackit.domain.model.common import DomainModel, utcnow
from stackit.domain.value import AnswerId, CommentId, QuestionId, UserId


class Comment(DomainModel):
    """Comment on an answer."""

    id: CommentId
    answer_id: AnswerId
    question_id: QuestionId
    author_id: UserId
    author_username: str
    content: str = Field(min_length=1, max_length=2000)
    mentions: list[UserId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow)
