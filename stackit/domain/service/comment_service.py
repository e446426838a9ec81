"""Comment domain service and mention parsing."""

import re
from uuid import uuid4

import logfire

from stackit.domain.model import Answer, Comment, User
from stackit.domain.repository import CommentRepository
from stackit.domain.value import AnswerId, CommentId

from .base import Service

MENTION_PATTERN = re.compile(r"@([A-Za-z0-9_]+)")


def parse_mentions(text: str) -> list[str]:
    """Extract distinct ``@username`` tokens from text, in order of first use.

    Tokens are not validated against existing users here.

    >>> parse_mentions("thanks @bob and @carol, cc @bob")
    ['bob', 'carol']
    """
    return list(dict.fromkeys(MENTION_PATTERN.findall(text)))


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        self.comment_repository = comment_repository

    async def create_comment(
        self,
        answer: Answer,
        author: User,
        content: str,
        mentioned: list[User],
    ) -> Comment:
        """Create a comment on an answer.

        Args:
            answer: Answer being commented on
            author: Commenting user
            content: Comment text
            mentioned: Users resolved from the mention tokens in ``content``

        Returns:
            Created comment
        """
        with logfire.span(
            "comment_service.create_comment",
            answer_id=str(answer.id),
            author_id=str(author.id),
        ):
            comment = Comment(
                id=CommentId(uuid4()),
                answer_id=answer.id,
                question_id=answer.question_id,
                author_id=author.id,
                author_username=author.username.root,
                content=content,
                mentions=[u.id for u in mentioned],
            )
            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                answer_id=str(answer.id),
                mentions=len(saved.mentions),
            )
            return saved

    async def get_comments_for_answer(self, answer_id: AnswerId) -> list[Comment]:
        """Comments on an answer, oldest first."""
        with logfire.span("comment_service.get_comments_for_answer", answer_id=str(answer_id)):
            comments = await self.comment_repository.find_by_answer(answer_id)
            return sorted(comments, key=lambda c: c.created_at)
