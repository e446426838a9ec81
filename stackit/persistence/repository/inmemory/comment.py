"""In-memory comment repository for testing."""

from typing import Optional

from stackit.domain.model.comment import Comment
from stackit.domain.repository.comment import CommentRepository
from stackit.domain.value import AnswerId, CommentId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        return self._comments.get(comment_id)

    async def find_by_answer(self, answer_id: AnswerId) -> list[Comment]:
        comments = [c for c in self._comments.values() if c.answer_id == answer_id]
        return sorted(comments, key=lambda c: c.created_at)

    async def save(self, comment: Comment) -> Comment:
        self._comments[comment.id] = comment
        return comment
