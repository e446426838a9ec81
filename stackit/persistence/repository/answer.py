"""PostgreSQL implementation of Answer repository."""

from typing import Optional

from sqlalchemy import and_, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from stackit.domain.error import ConflictError
from stackit.domain.model import Answer
from stackit.domain.repository import AnswerRepository
from stackit.domain.value import AnswerId, QuestionId, UserId
from stackit.persistence.mappers import answer_to_dict, row_to_answer
from stackit.persistence.tables import answers_table


class PostgresAnswerRepository(AnswerRepository):
    """PostgreSQL implementation of AnswerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        stmt = select(answers_table).where(answers_table.c.id == answer_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_answer(dict(row)) if row else None

    async def find_by_question(self, question_id: QuestionId) -> list[Answer]:
        """Answers to a question, accepted first then oldest first."""
        stmt = (
            select(answers_table)
            .where(answers_table.c.question_id == question_id)
            .order_by(answers_table.c.is_accepted.desc(), answers_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_answer(dict(row)) for row in result.mappings().all()]

    async def find_by_question_and_author(
        self, question_id: QuestionId, author_id: UserId
    ) -> Optional[Answer]:
        stmt = select(answers_table).where(
            and_(
                answers_table.c.question_id == question_id,
                answers_table.c.author_id == author_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_answer(dict(row)) if row else None

    async def save(self, answer: Answer) -> Answer:
        existing = await self.find_by_id(answer.id)
        if existing:
            stmt = (
                update(answers_table)
                .where(answers_table.c.id == answer.id)
                .values(content=answer.content, updated_at=func.now())
            )
            await self.session.execute(stmt)
            await self.session.flush()
            return answer

        try:
            async with self.session.begin_nested():
                await self.session.execute(
                    answers_table.insert().values(**answer_to_dict(answer))
                )
        except IntegrityError:
            raise ConflictError("You have already answered this question")
        return answer

    async def set_accepted(
        self, question_id: QuestionId, answer_id: Optional[AnswerId]
    ) -> None:
        # Clear first so the partial unique index never sees two accepted rows
        await self.session.execute(
            update(answers_table)
            .where(
                and_(
                    answers_table.c.question_id == question_id,
                    answers_table.c.is_accepted.is_(True),
                )
            )
            .values(is_accepted=False, updated_at=func.now())
        )
        if answer_id is not None:
            await self.session.execute(
                update(answers_table)
                .where(
                    and_(
                        answers_table.c.id == answer_id,
                        answers_table.c.question_id == question_id,
                    )
                )
                .values(is_accepted=True, updated_at=func.now())
            )
        await self.session.flush()
