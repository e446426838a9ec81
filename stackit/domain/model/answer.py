"""Answer entity."""

from datetime import datetime

from pydantic import Field

from stackit.domain.model.common import DomainModel, utcnow
from stackit.domain.value import AnswerId, QuestionId, UserId


class Answer(DomainModel):
    """Answer to a question.

    At most one answer per question has ``is_accepted`` set; only the
    acceptance service changes it.
    """

    id: AnswerId
    question_id: QuestionId
    author_id: UserId
    author_username: str
    content: str = Field(min_length=10)
    is_accepted: bool = False
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
