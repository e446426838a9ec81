"""Question domain service."""

from uuid import uuid4

import logfire

from stackit.domain.error import NotFoundError
from stackit.domain.model import Question, User
from stackit.domain.repository import QuestionRepository
from stackit.domain.value import QuestionId

from .base import Service


class QuestionService(Service):
    """Domain service for question operations."""

    def __init__(self, question_repository: QuestionRepository) -> None:
        self.question_repository = question_repository

    async def create_question(
        self, author: User, title: str, description: str, tags: list[str]
    ) -> Question:
        """Create a new question.

        Args:
            author: Asking user
            title: Question title
            description: Question body
            tags: Free-form tag names (lower-cased, de-duplicated)

        Returns:
            Created question
        """
        with logfire.span("question_service.create_question", author_id=str(author.id)):
            normalized = list(dict.fromkeys(t.strip().lower() for t in tags if t.strip()))
            question = Question(
                id=QuestionId(uuid4()),
                title=title.strip(),
                description=description,
                tags=normalized,
                author_id=author.id,
                author_username=author.username.root,
            )
            saved = await self.question_repository.save(question)
            logfire.info(
                "Question created", question_id=str(saved.id), author_id=str(author.id)
            )
            return saved

    async def get_question_by_id(self, question_id: QuestionId) -> Question:
        """Get a question by ID.

        Raises:
            NotFoundError: If the question does not exist
        """
        with logfire.span("question_service.get_question_by_id", question_id=str(question_id)):
            question = await self.question_repository.find_by_id(question_id)
            if not question:
                logfire.warn("Question not found", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))
            return question
