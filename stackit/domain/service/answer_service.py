"""Answer domain service."""

from uuid import uuid4

import logfire

from stackit.domain.error import ConflictError, NotFoundError
from stackit.domain.model import Answer, Question, User
from stackit.domain.repository import AnswerRepository
from stackit.domain.value import AnswerId, QuestionId

from .base import Service


class AnswerService(Service):
    """Domain service for answer operations."""

    def __init__(self, answer_repository: AnswerRepository) -> None:
        self.answer_repository = answer_repository

    async def create_answer(self, question: Question, author: User, content: str) -> Answer:
        """Post an answer to a question.

        A user may answer a given question only once.

        Args:
            question: Question being answered
            author: Answering user
            content: Answer body

        Returns:
            Created answer

        Raises:
            ConflictError: If the author already answered this question
        """
        with logfire.span(
            "answer_service.create_answer",
            question_id=str(question.id),
            author_id=str(author.id),
        ):
            existing = await self.answer_repository.find_by_question_and_author(
                question.id, author.id
            )
            if existing:
                logfire.warn(
                    "Duplicate answer rejected",
                    question_id=str(question.id),
                    author_id=str(author.id),
                )
                raise ConflictError("You have already answered this question")

            answer = Answer(
                id=AnswerId(uuid4()),
                question_id=question.id,
                author_id=author.id,
                author_username=author.username.root,
                content=content,
            )
            saved = await self.answer_repository.save(answer)
            logfire.info(
                "Answer created", answer_id=str(saved.id), question_id=str(question.id)
            )
            return saved

    async def get_answer_by_id(self, answer_id: AnswerId) -> Answer:
        """Get an answer by ID.

        Raises:
            NotFoundError: If the answer does not exist
        """
        with logfire.span("answer_service.get_answer_by_id", answer_id=str(answer_id)):
            answer = await self.answer_repository.find_by_id(answer_id)
            if not answer:
                logfire.warn("Answer not found", answer_id=str(answer_id))
                raise NotFoundError("Answer", str(answer_id))
            return answer

    async def get_answers_for_question(self, question_id: QuestionId) -> list[Answer]:
        with logfire.span(
            "answer_service.get_answers_for_question", question_id=str(question_id)
        ):
            return await self.answer_repository.find_by_question(question_id)
