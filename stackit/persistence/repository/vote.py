"""PostgreSQL implementation of Vote repository."""

from collections import defaultdict
from typing import Optional, Sequence
from uuid import UUID, uuid4

from sqlalchemy import and_, delete, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from stackit.domain.model import VoteTally
from stackit.domain.repository import VoteRepository
from stackit.domain.value import UserId, VotableType, VoteDirection
from stackit.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository.

    The ``unique_vote`` constraint on (user, votable) keeps a voter in at
    most one of the upvoter and downvoter sets.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _matches(self, user_id: UserId, votable_type: VotableType, votable_id: UUID):
        return and_(
            votes_table.c.user_id == user_id,
            votes_table.c.votable_type == votable_type.value,
            votes_table.c.votable_id == votable_id,
        )

    async def apply(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
        direction: Optional[VoteDirection],
    ) -> Optional[VoteDirection]:
        where = self._matches(user_id, votable_type, votable_id)
        result = await self.session.execute(
            select(votes_table.c.vote_type).where(where).with_for_update()
        )
        current = result.scalar_one_or_none()
        previous = VoteDirection(current) if current is not None else None

        if direction is None:
            if previous is not None:
                await self.session.execute(delete(votes_table).where(where))
        elif direction != previous:
            stmt = insert(votes_table).values(
                id=uuid4(),
                user_id=user_id,
                votable_type=votable_type.value,
                votable_id=votable_id,
                vote_type=direction.value,
            )
            stmt = stmt.on_conflict_do_update(
                constraint="unique_vote",
                set_={"vote_type": stmt.excluded.vote_type},
            )
            await self.session.execute(stmt)

        await self.session.flush()
        return previous

    async def tally(self, votable_type: VotableType, votable_id: UUID) -> VoteTally:
        tallies = await self.tallies(votable_type, [votable_id])
        return tallies[votable_id]

    async def tallies(
        self, votable_type: VotableType, votable_ids: Sequence[UUID]
    ) -> dict[UUID, VoteTally]:
        """Tallies for several items of the same type (batch query)."""
        if not votable_ids:
            return {}

        stmt = select(
            votes_table.c.votable_id, votes_table.c.user_id, votes_table.c.vote_type
        ).where(
            and_(
                votes_table.c.votable_type == votable_type.value,
                votes_table.c.votable_id.in_(list(votable_ids)),
            )
        )
        result = await self.session.execute(stmt)

        up: dict[UUID, set[UserId]] = defaultdict(set)
        down: dict[UUID, set[UserId]] = defaultdict(set)
        for row in result.all():
            target = up if row.vote_type == VoteDirection.UP.value else down
            target[row.votable_id].add(UserId(row.user_id))

        return {
            vid: VoteTally(upvoters=frozenset(up[vid]), downvoters=frozenset(down[vid]))
            for vid in votable_ids
        }
