"""Create comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import (
    AnswerService,
    CommentService,
    NotificationDispatcher,
    UserService,
    parse_mentions,
)
from stackit.domain.value import AnswerId, UserId

from ..base import BaseUseCase


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    answer_id: str  # UUID string
    author_id: str  # User ID from authenticated user
    content: str


class CommentResponse(BaseModel):
    """Comment details."""

    comment_id: str
    answer_id: str
    question_id: str
    author_id: str
    author_username: str
    content: str
    mentions: list[str]  # Resolved user IDs
    created_at: datetime


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on an answer."""

    def __init__(
        self,
        comment_service: CommentService,
        answer_service: AnswerService,
        user_service: UserService,
        dispatcher: NotificationDispatcher,
    ) -> None:
        self.comment_service = comment_service
        self.answer_service = answer_service
        self.user_service = user_service
        self.dispatcher = dispatcher

    async def execute(self, request: CreateCommentRequest) -> CommentResponse:
        """Execute create comment flow.

        Steps:
        1. Verify the answer exists
        2. Resolve ``@username`` mentions to existing users
        3. Create the comment
        4. Notify mentioned users and the answer author

        Raises:
            NotFoundError: If the answer or author does not exist
        """
        author = await self.user_service.get_by_id(UserId(UUID(request.author_id)))
        answer = await self.answer_service.get_answer_by_id(AnswerId(UUID(request.answer_id)))

        mentioned = await self.user_service.resolve_usernames(
            parse_mentions(request.content)
        )
        comment = await self.comment_service.create_comment(
            answer, author, request.content, mentioned
        )

        await self.dispatcher.comment_posted(answer, comment, author, mentioned)

        return CommentResponse(
            comment_id=str(comment.id),
            answer_id=str(comment.answer_id),
            question_id=str(comment.question_id),
            author_id=str(comment.author_id),
            author_username=comment.author_username,
            content=comment.content,
            mentions=[str(m) for m in comment.mentions],
            created_at=comment.created_at,
        )
