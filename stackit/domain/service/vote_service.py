"""Vote ledger domain service."""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

import logfire

from stackit.domain.error import NotFoundError, ValidationError
from stackit.domain.model import VoteTally
from stackit.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    VoteRepository,
)
from stackit.domain.value import (
    AnswerId,
    QuestionId,
    UserId,
    VotableType,
    VoteDirection,
    VoteType,
)

from .base import Service

_DIRECTIONS = {
    VoteType.UPVOTE: VoteDirection.UP,
    VoteType.DOWNVOTE: VoteDirection.DOWN,
    VoteType.REMOVE: None,
}


def _parse_vote_type(vote_type: VoteType | str) -> VoteType:
    try:
        return VoteType(vote_type)
    except ValueError:
        raise ValidationError(f"Invalid vote type: {vote_type}")


@dataclass
class VoteOutcome:
    """Result of applying a vote.

    ``user_vote`` is the vote the caller holds after the call, ``previous_vote``
    the one held before it. ``author_id`` is the owner of the voted item.
    """

    votable_type: VotableType
    votable_id: UUID
    question_id: QuestionId
    author_id: UserId
    vote_score: int
    user_vote: Optional[VoteType]
    previous_vote: Optional[VoteType]

    @property
    def changed(self) -> bool:
        return self.user_vote != self.previous_vote

    @property
    def is_new_vote(self) -> bool:
        """Whether the call moved the voter into an upvote or downvote."""
        return self.changed and self.user_vote is not None


class VoteService(Service):
    """Domain service for voting on questions and answers.

    Each user holds at most one vote per item. Writes go through
    ``VoteRepository.apply`` so concurrent voters never overwrite each other;
    the returned score is read after the write.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> None:
        self.vote_repository = vote_repository
        self.question_repository = question_repository
        self.answer_repository = answer_repository

    async def apply_vote(
        self,
        votable_type: VotableType,
        votable_id: UUID,
        voter_id: UserId,
        vote_type: VoteType | str,
    ) -> VoteOutcome:
        """Apply an upvote, downvote or removal.

        Args:
            votable_type: Question or answer
            votable_id: ID of the item
            voter_id: Voting user
            vote_type: ``upvote``, ``downvote`` or ``remove``

        Returns:
            Vote outcome with the new score and the caller's vote

        Raises:
            ValidationError: If vote_type is not a recognised vote
            NotFoundError: If the item does not exist
        """
        vote_type = _parse_vote_type(vote_type)

        with logfire.span(
            "vote_service.apply_vote",
            votable_type=votable_type.value,
            votable_id=str(votable_id),
            voter_id=str(voter_id),
            vote_type=vote_type.value,
        ):
            question_id, author_id = await self._resolve_target(votable_type, votable_id)

            previous = await self.vote_repository.apply(
                voter_id, votable_type, votable_id, _DIRECTIONS[vote_type]
            )
            tally = await self.vote_repository.tally(votable_type, votable_id)

            outcome = VoteOutcome(
                votable_type=votable_type,
                votable_id=votable_id,
                question_id=question_id,
                author_id=author_id,
                vote_score=tally.score,
                user_vote=tally.vote_of(voter_id),
                previous_vote=previous.vote_type if previous else None,
            )
            logfire.info(
                "Vote applied",
                votable_id=str(votable_id),
                previous=outcome.previous_vote,
                current=outcome.user_vote,
                score=outcome.vote_score,
            )
            return outcome

    async def check_vote(
        self,
        votable_type: VotableType,
        votable_id: UUID,
        vote_type: VoteType | str,
    ) -> VoteType:
        """Validate a vote without recording it.

        Raises:
            ValidationError: If vote_type is not a recognised vote
            NotFoundError: If the item does not exist
        """
        vote_type = _parse_vote_type(vote_type)
        await self._resolve_target(votable_type, votable_id)
        return vote_type

    async def get_tally(self, votable_type: VotableType, votable_id: UUID) -> VoteTally:
        return await self.vote_repository.tally(votable_type, votable_id)

    async def get_tallies(
        self, votable_type: VotableType, votable_ids: list[UUID]
    ) -> dict[UUID, VoteTally]:
        if not votable_ids:
            return {}
        return await self.vote_repository.tallies(votable_type, votable_ids)

    async def _resolve_target(
        self, votable_type: VotableType, votable_id: UUID
    ) -> tuple[QuestionId, UserId]:
        """Owning question and author of a votable item."""
        if votable_type == VotableType.QUESTION:
            question = await self.question_repository.find_by_id(QuestionId(votable_id))
            if not question:
                raise NotFoundError("Question", str(votable_id))
            return question.id, question.author_id

        answer = await self.answer_repository.find_by_id(AnswerId(votable_id))
        if not answer:
            raise NotFoundError("Answer", str(votable_id))
        return answer.question_id, answer.author_id
