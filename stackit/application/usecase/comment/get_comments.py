"""Get comments use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import AnswerService, CommentService
from stackit.domain.value import AnswerId

from ..base import BaseUseCase
from .create_comment import CommentResponse


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    answer_id: str


class GetCommentsResponse(BaseModel):
    """Comments on an answer, oldest first."""

    answer_id: str
    comments: list[CommentResponse]


class GetCommentsUseCase(BaseUseCase):
    """Use case for listing the comments on an answer."""

    def __init__(self, comment_service: CommentService, answer_service: AnswerService) -> None:
        self.comment_service = comment_service
        self.answer_service = answer_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Raises:
            NotFoundError: If the answer does not exist
        """
        answer = await self.answer_service.get_answer_by_id(AnswerId(UUID(request.answer_id)))
        comments = await self.comment_service.get_comments_for_answer(answer.id)
        return GetCommentsResponse(
            answer_id=str(answer.id),
            comments=[
                CommentResponse(
                    comment_id=str(c.id),
                    answer_id=str(c.answer_id),
                    question_id=str(c.question_id),
                    author_id=str(c.author_id),
                    author_username=c.author_username,
                    content=c.content,
                    mentions=[str(m) for m in c.mentions],
                    created_at=c.created_at,
                )
                for c in comments
            ],
        )
