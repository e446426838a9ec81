"""Create answer use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import (
    AnswerService,
    NotificationDispatcher,
    QuestionService,
    RateLimitedAction,
    RateLimitService,
    UserService,
)
from stackit.domain.value import QuestionId, UserId

from ..base import BaseUseCase


class CreateAnswerRequest(BaseModel):
    """Create answer request."""

    question_id: str  # UUID string
    author_id: str  # User ID from authenticated user
    content: str


class AnswerResponse(BaseModel):
    """Answer details."""

    answer_id: str
    question_id: str
    author_id: str
    author_username: str
    content: str
    is_accepted: bool
    vote_score: int = 0
    created_at: datetime
    updated_at: datetime


class CreateAnswerUseCase(BaseUseCase):
    """Use case for answering a question."""

    def __init__(
        self,
        answer_service: AnswerService,
        question_service: QuestionService,
        user_service: UserService,
        dispatcher: NotificationDispatcher,
        rate_limit_service: RateLimitService,
    ) -> None:
        self.answer_service = answer_service
        self.question_service = question_service
        self.user_service = user_service
        self.dispatcher = dispatcher
        self.rate_limit_service = rate_limit_service

    async def execute(self, request: CreateAnswerRequest) -> AnswerResponse:
        """Execute create answer flow.

        Steps:
        1. Count the request against the author's answer budget
        2. Verify the question exists
        3. Create the answer (one per author per question)
        4. Notify the question author

        Raises:
            RateLimitExceededError: If the author answered too often recently
            NotFoundError: If the question does not exist
            ConflictError: If the author already answered this question
        """
        await self.rate_limit_service.check(RateLimitedAction.ANSWER, request.author_id)

        author = await self.user_service.get_by_id(UserId(UUID(request.author_id)))
        question = await self.question_service.get_question_by_id(
            QuestionId(UUID(request.question_id))
        )
        answer = await self.answer_service.create_answer(question, author, request.content)

        await self.dispatcher.answer_posted(question, answer, author)

        return AnswerResponse(
            answer_id=str(answer.id),
            question_id=str(answer.question_id),
            author_id=str(answer.author_id),
            author_username=answer.author_username,
            content=answer.content,
            is_accepted=answer.is_accepted,
            created_at=answer.created_at,
            updated_at=answer.updated_at,
        )
