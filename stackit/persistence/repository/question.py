"""PostgreSQL implementation of Question repository."""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from sqlalchemy import func, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from stackit.domain.model import Question
from stackit.domain.repository import QuestionRepository
from stackit.domain.value import AnswerId, QuestionId
from stackit.persistence.mappers import question_to_dict, row_to_question
from stackit.persistence.tables import questions_table


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        stmt = select(questions_table).where(questions_table.c.id == question_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_question(dict(row)) if row else None

    async def save(self, question: Question) -> Question:
        question_dict = question_to_dict(question)
        stmt = insert(questions_table).values(**question_dict)
        stmt = stmt.on_conflict_do_update(
            index_elements=[questions_table.c.id],
            set_={
                "title": stmt.excluded.title,
                "description": stmt.excluded.description,
                "tags": stmt.excluded.tags,
                "updated_at": func.now(),
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return question

    @asynccontextmanager
    async def lock_for_update(
        self, question_id: QuestionId
    ) -> AsyncIterator[Optional[Question]]:
        """Row-lock the question until the request transaction ends.

        The lock is released by the commit or rollback of the surrounding
        session, not on leaving the context.
        """
        stmt = (
            select(questions_table)
            .where(questions_table.c.id == question_id)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        yield row_to_question(dict(row)) if row else None

    async def set_accepted_answer(
        self, question_id: QuestionId, answer_id: Optional[AnswerId]
    ) -> None:
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .values(accepted_answer_id=answer_id, updated_at=func.now())
        )
        await self.session.execute(stmt)
        await self.session.flush()
