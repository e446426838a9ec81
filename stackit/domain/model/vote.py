"""Vote entity and tallies.

A vote row records one user's current direction on one question or answer.
The (user, votable) pair is unique, so a voter can never sit in both the
upvoter and downvoter sets at once.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field, computed_field

from stackit.domain.model.common import DomainModel, utcnow
from stackit.domain.value import UserId, VotableType, VoteDirection, VoteId, VoteType


class Vote(DomainModel):
    """A user's vote on a question or answer."""

    id: VoteId
    user_id: UserId
    votable_type: VotableType
    votable_id: UUID  # QuestionId or AnswerId
    direction: VoteDirection
    created_at: datetime = Field(default_factory=utcnow)


class VoteTally(DomainModel):
    """Upvoter and downvoter sets for a single votable entity."""

    upvoters: frozenset[UserId] = frozenset()
    downvoters: frozenset[UserId] = frozenset()

    @computed_field  # type: ignore[prop-decorator]
    @property
    def score(self) -> int:
        return len(self.upvoters) - len(self.downvoters)

    def vote_of(self, user_id: UserId) -> VoteType | None:
        """Current vote held by ``user_id``, if any."""
        if user_id in self.upvoters:
            return VoteType.UPVOTE
        if user_id in self.downvoters:
            return VoteType.DOWNVOTE
        return None
