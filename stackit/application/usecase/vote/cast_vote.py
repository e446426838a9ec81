"""Cast vote use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import (
    NotificationDispatcher,
    RateLimitedAction,
    RateLimitService,
    UserService,
    VoteService,
)
from stackit.domain.value import UserId, VotableType, VoteType

from ..base import BaseUseCase


class CastVoteRequest(BaseModel):
    """Cast vote request.

    ``vote_type`` stays a plain string so an unknown value surfaces as a
    domain validation error rather than a schema error.
    """

    votable_type: VotableType
    votable_id: str  # UUID string
    voter_id: str  # User ID from authenticated user
    vote_type: str


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    votable_type: VotableType
    votable_id: str
    vote_score: int
    user_vote: VoteType | None
    previous_vote: VoteType | None


class CastVoteUseCase(BaseUseCase):
    """Use case for voting on a question or answer."""

    def __init__(
        self,
        vote_service: VoteService,
        user_service: UserService,
        dispatcher: NotificationDispatcher,
        rate_limit_service: RateLimitService,
    ) -> None:
        self.vote_service = vote_service
        self.user_service = user_service
        self.dispatcher = dispatcher
        self.rate_limit_service = rate_limit_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute vote flow.

        Steps:
        1. Validate the vote type and the voted item
        2. Count the request against the voter's vote budget
        3. Apply the vote through the vote ledger
        4. Notify the item author if the voter moved into a new vote

        Raises:
            RateLimitExceededError: If the voter voted too often recently
            ValidationError: If the vote type is not recognised
            NotFoundError: If the voted item does not exist
        """
        await self.vote_service.check_vote(
            request.votable_type, UUID(request.votable_id), request.vote_type
        )
        await self.rate_limit_service.check(RateLimitedAction.VOTE, request.voter_id)

        voter = await self.user_service.get_by_id(UserId(UUID(request.voter_id)))
        outcome = await self.vote_service.apply_vote(
            request.votable_type,
            UUID(request.votable_id),
            voter.id,
            request.vote_type,
        )

        await self.dispatcher.vote_cast(outcome, voter)

        return CastVoteResponse(
            votable_type=outcome.votable_type,
            votable_id=str(outcome.votable_id),
            vote_score=outcome.vote_score,
            user_vote=outcome.user_vote,
            previous_vote=outcome.previous_vote,
        )
