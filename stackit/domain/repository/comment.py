"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from stackit.domain.model.comment import Comment
from stackit.domain.value import AnswerId, CommentId


class CommentRepository(ABC):
    """Repository for Comment entity."""

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        pass

    @abstractmethod
    async def find_by_answer(self, answer_id: AnswerId) -> list[Comment]:
        """Find all comments on an answer, oldest first."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        pass
