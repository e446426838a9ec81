"""Question repository interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from typing import Optional

from stackit.domain.model.question import Question
from stackit.domain.value import AnswerId, QuestionId


class QuestionRepository(ABC):
    """Repository for Question aggregate."""

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Save a question (create or update)."""
        pass

    @abstractmethod
    def lock_for_update(
        self, question_id: QuestionId
    ) -> AbstractAsyncContextManager[Optional[Question]]:
        """Enter the acceptance critical section for a question.

        While the context is held no other caller can enter it for the same
        question, and the yielded question reflects the latest persisted
        state. The PostgreSQL implementation holds a row lock until the
        surrounding transaction ends.

        Args:
            question_id: Question to lock

        Returns:
            Async context manager yielding the question, or None if absent
        """
        pass

    @abstractmethod
    async def set_accepted_answer(
        self, question_id: QuestionId, answer_id: Optional[AnswerId]
    ) -> None:
        """Set or clear the accepted answer reference of a question."""
        pass
