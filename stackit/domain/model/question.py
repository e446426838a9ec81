"""Question aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field, computed_field

from stackit.domain.model.common import DomainModel, utcnow
from stackit.domain.value import AnswerId, QuestionId, UserId


class Question(DomainModel):
    """Question posted by a user.

    The accepted answer reference is the single source of truth for the
    solved state; ``is_solved`` is derived from it and never stored.
    """

    id: QuestionId
    title: str = Field(min_length=10, max_length=200)
    description: str = Field(min_length=20)
    tags: list[str] = Field(default_factory=list)
    author_id: UserId
    author_username: str
    accepted_answer_id: Optional[AnswerId] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_solved(self) -> bool:
        """Whether an answer has been accepted."""
        return self.accepted_answer_id is not None
