"""In-memory answer repository for testing."""

import asyncio
from typing import Optional

from stackit.domain.error import ConflictError
from stackit.domain.model.answer import Answer
from stackit.domain.repository.answer import AnswerRepository
from stackit.domain.value import AnswerId, QuestionId, UserId


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository for testing."""

    def __init__(self) -> None:
        self._answers: dict[AnswerId, Answer] = {}

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        return self._answers.get(answer_id)

    async def find_by_question(self, question_id: QuestionId) -> list[Answer]:
        answers = [a for a in self._answers.values() if a.question_id == question_id]
        return sorted(answers, key=lambda a: (not a.is_accepted, a.created_at))

    async def find_by_question_and_author(
        self, question_id: QuestionId, author_id: UserId
    ) -> Optional[Answer]:
        for answer in self._answers.values():
            if answer.question_id == question_id and answer.author_id == author_id:
                return answer
        return None

    async def save(self, answer: Answer) -> Answer:
        """Save an answer.

        Raises:
            ConflictError: If the author already answered the question
        """
        existing = await self.find_by_question_and_author(
            answer.question_id, answer.author_id
        )
        if existing and existing.id != answer.id:
            raise ConflictError("You have already answered this question")
        self._answers[answer.id] = answer
        return answer

    async def set_accepted(
        self, question_id: QuestionId, answer_id: Optional[AnswerId]
    ) -> None:
        for aid, answer in list(self._answers.items()):
            if answer.question_id == question_id and answer.is_accepted:
                self._answers[aid] = answer.model_copy(update={"is_accepted": False})
        await asyncio.sleep(0)
        if answer_id is not None:
            answer = self._answers.get(answer_id)
            if answer and answer.question_id == question_id:
                self._answers[answer_id] = answer.model_copy(update={"is_accepted": True})
