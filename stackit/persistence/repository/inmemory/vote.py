"""In-memory vote repository for testing."""

from typing import Optional, Sequence
from uuid import UUID, uuid4

from stackit.domain.model.vote import Vote, VoteTally
from stackit.domain.repository.vote import VoteRepository
from stackit.domain.value import UserId, VotableType, VoteDirection, VoteId

VoteKey = tuple[UserId, VotableType, UUID]


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    Votes are keyed by (user, votable), mirroring the unique constraint of
    the votes table. ``apply`` has no await point, so it is atomic with
    respect to other coroutines.
    """

    def __init__(self) -> None:
        self._votes: dict[VoteKey, Vote] = {}

    async def apply(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
        direction: Optional[VoteDirection],
    ) -> Optional[VoteDirection]:
        key = (user_id, votable_type, votable_id)
        existing = self._votes.get(key)
        previous = existing.direction if existing else None

        if direction is None:
            self._votes.pop(key, None)
        elif existing:
            self._votes[key] = existing.model_copy(update={"direction": direction})
        else:
            self._votes[key] = Vote(
                id=VoteId(uuid4()),
                user_id=user_id,
                votable_type=votable_type,
                votable_id=votable_id,
                direction=direction,
            )
        return previous

    async def tally(self, votable_type: VotableType, votable_id: UUID) -> VoteTally:
        upvoters = set()
        downvoters = set()
        for (user_id, vtype, vid), vote in self._votes.items():
            if vtype != votable_type or vid != votable_id:
                continue
            if vote.direction == VoteDirection.UP:
                upvoters.add(user_id)
            else:
                downvoters.add(user_id)
        return VoteTally(upvoters=frozenset(upvoters), downvoters=frozenset(downvoters))

    async def tallies(
        self, votable_type: VotableType, votable_ids: Sequence[UUID]
    ) -> dict[UUID, VoteTally]:
        return {vid: await self.tally(votable_type, vid) for vid in votable_ids}
