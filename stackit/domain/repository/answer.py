"""Answer repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from stackit.domain.model.answer import Answer
from stackit.domain.value import AnswerId, QuestionId, UserId


class AnswerRepository(ABC):
    """Repository for Answer entity."""

    @abstractmethod
    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        pass

    @abstractmethod
    async def find_by_question(self, question_id: QuestionId) -> list[Answer]:
        """Find all answers to a question, oldest first."""
        pass

    @abstractmethod
    async def find_by_question_and_author(
        self, question_id: QuestionId, author_id: UserId
    ) -> Optional[Answer]:
        """Find an author's answer to a question, if they posted one."""
        pass

    @abstractmethod
    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create or update).

        Raises:
            ConflictError: If the author already answered the question
        """
        pass

    @abstractmethod
    async def set_accepted(
        self, question_id: QuestionId, answer_id: Optional[AnswerId]
    ) -> None:
        """Make ``answer_id`` the only accepted answer of a question.

        Every other answer of the question is unaccepted before the target
        is accepted, so two accepted answers are never visible at once.
        Passing None unaccepts all answers of the question.

        Args:
            question_id: Question whose answers are updated
            answer_id: Answer to accept, or None
        """
        pass
