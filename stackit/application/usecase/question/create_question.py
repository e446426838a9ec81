"""Create question use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from stackit.domain.service import (
    QuestionService,
    RateLimitedAction,
    RateLimitService,
    UserService,
)
from stackit.domain.value import UserId

from ..base import BaseUseCase


class CreateQuestionRequest(BaseModel):
    """Create question request."""

    author_id: str  # User ID from authenticated user
    title: str
    description: str
    tags: list[str] = Field(default_factory=list, max_length=5)


class CreateQuestionResponse(BaseModel):
    """Create question response."""

    question_id: str
    title: str
    description: str
    tags: list[str]
    author_id: str
    author_username: str
    is_solved: bool
    created_at: datetime


class CreateQuestionUseCase(BaseUseCase):
    """Use case for asking a question."""

    def __init__(
        self,
        question_service: QuestionService,
        user_service: UserService,
        rate_limit_service: RateLimitService,
    ) -> None:
        self.question_service = question_service
        self.user_service = user_service
        self.rate_limit_service = rate_limit_service

    async def execute(self, request: CreateQuestionRequest) -> CreateQuestionResponse:
        """Execute create question flow.

        Raises:
            RateLimitExceededError: If the author asked too many questions recently
            NotFoundError: If the author does not exist
        """
        await self.rate_limit_service.check(RateLimitedAction.QUESTION, request.author_id)

        author = await self.user_service.get_by_id(UserId(UUID(request.author_id)))
        question = await self.question_service.create_question(
            author=author,
            title=request.title,
            description=request.description,
            tags=request.tags,
        )

        return CreateQuestionResponse(
            question_id=str(question.id),
            title=question.title,
            description=question.description,
            tags=question.tags,
            author_id=str(question.author_id),
            author_username=question.author_username,
            is_solved=question.is_solved,
            created_at=question.created_at,
        )
