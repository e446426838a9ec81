"""In-memory question repository for testing."""

import asyncio
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncIterator, Optional

from stackit.domain.model.question import Question
from stackit.domain.repository.question import QuestionRepository
from stackit.domain.value import AnswerId, QuestionId


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing.

    ``lock_for_update`` uses one asyncio lock per question, giving the same
    mutual exclusion a row lock gives in PostgreSQL.
    """

    def __init__(self) -> None:
        self._questions: dict[QuestionId, Question] = {}
        self._locks: dict[QuestionId, asyncio.Lock] = {}

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        return self._questions.get(question_id)

    async def save(self, question: Question) -> Question:
        self._questions[question.id] = question
        return question

    @asynccontextmanager
    async def lock_for_update(
        self, question_id: QuestionId
    ) -> AsyncIterator[Optional[Question]]:
        lock = self._locks.setdefault(question_id, asyncio.Lock())
        async with lock:
            yield self._questions.get(question_id)

    async def set_accepted_answer(
        self, question_id: QuestionId, answer_id: Optional[AnswerId]
    ) -> None:
        question = self._questions.get(question_id)
        if question:
            # Yield to the loop so unserialized callers would interleave here
            await asyncio.sleep(0)
            self._questions[question_id] = question.model_copy(
                update={
                    "accepted_answer_id": answer_id,
                    "updated_at": datetime.now(timezone.utc),
                }
            )
