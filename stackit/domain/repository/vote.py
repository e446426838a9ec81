"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence
from uuid import UUID

from stackit.domain.model.vote import VoteTally
from stackit.domain.value import UserId, VotableType, VoteDirection


class VoteRepository(ABC):
    """Repository for votes on questions and answers.

    Holds at most one vote per (user, votable) pair.
    """

    @abstractmethod
    async def apply(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
        direction: Optional[VoteDirection],
    ) -> Optional[VoteDirection]:
        """Set a user's vote on an item in a single atomic step.

        Implementations must write against the latest persisted row
        (upsert or delete), never overwrite from an earlier read, so
        concurrent votes from different users are never lost.

        Args:
            user_id: The voter
            votable_type: Type of item (question or answer)
            votable_id: ID of the item
            direction: New direction, or None to withdraw the vote

        Returns:
            The direction held before this call, or None if there was no vote
        """
        pass

    @abstractmethod
    async def tally(self, votable_type: VotableType, votable_id: UUID) -> VoteTally:
        """Upvoter and downvoter sets for one item."""
        pass

    @abstractmethod
    async def tallies(
        self, votable_type: VotableType, votable_ids: Sequence[UUID]
    ) -> dict[UUID, VoteTally]:
        """Tallies for several items of the same type (batch query).

        Items without votes map to an empty tally.
        """
        pass
