"""Unit tests for VoteService."""

import asyncio
from uuid import uuid4

import pytest

from stackit.domain.error import NotFoundError, ValidationError
from stackit.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    UserRepository,
)
from stackit.domain.service import VoteService
from stackit.domain.value import VotableType, VoteType
from tests.conftest import make_answer, make_question, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _seed_question(env):
    user_repo = await env.get(UserRepository)
    question_repo = await env.get(QuestionRepository)

    author = await user_repo.save(make_user("asker"))
    voter = await user_repo.save(make_user("voter"))
    question = await question_repo.save(make_question(author))
    return author, voter, question


class TestApplyVote:
    """Tests for apply_vote."""

    @pytest.mark.asyncio
    async def test_upvote_adds_voter(self, unit_env):
        """An upvote should raise the score by one."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        author, voter, question = await _seed_question(unit_env)

        # Act
        outcome = await vote_service.apply_vote(
            VotableType.QUESTION, question.id, voter.id, VoteType.UPVOTE
        )

        # Assert
        assert outcome.vote_score == 1
        assert outcome.user_vote == VoteType.UPVOTE
        assert outcome.previous_vote is None
        assert outcome.author_id == author.id
        assert outcome.is_new_vote

    @pytest.mark.asyncio
    async def test_switching_direction_moves_voter(self, unit_env):
        """A downvote after an upvote should leave the voter in one set only."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        _, voter, question = await _seed_question(unit_env)
        await vote_service.apply_vote(
            VotableType.QUESTION, question.id, voter.id, VoteType.UPVOTE
        )

        # Act
        outcome = await vote_service.apply_vote(
            VotableType.QUESTION, question.id, voter.id, VoteType.DOWNVOTE
        )

        # Assert
        tally = await vote_service.get_tally(VotableType.QUESTION, question.id)
        assert voter.id in tally.downvoters
        assert voter.id not in tally.upvoters
        assert outcome.vote_score == -1
        assert outcome.previous_vote == VoteType.UPVOTE
        assert outcome.is_new_vote

    @pytest.mark.asyncio
    async def test_repeated_upvote_is_idempotent(self, unit_env):
        """Repeating the same vote should not change the score."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        _, voter, question = await _seed_question(unit_env)
        await vote_service.apply_vote(
            VotableType.QUESTION, question.id, voter.id, VoteType.UPVOTE
        )

        # Act
        outcome = await vote_service.apply_vote(
            VotableType.QUESTION, question.id, voter.id, "upvote"
        )

        # Assert
        assert outcome.vote_score == 1
        assert outcome.user_vote == VoteType.UPVOTE
        assert not outcome.changed
        assert not outcome.is_new_vote

    @pytest.mark.asyncio
    async def test_remove_clears_vote(self, unit_env):
        """Removing a vote should drop the voter from both sets."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        _, voter, question = await _seed_question(unit_env)
        await vote_service.apply_vote(
            VotableType.QUESTION, question.id, voter.id, VoteType.DOWNVOTE
        )

        # Act
        outcome = await vote_service.apply_vote(
            VotableType.QUESTION, question.id, voter.id, VoteType.REMOVE
        )

        # Assert
        assert outcome.vote_score == 0
        assert outcome.user_vote is None
        assert outcome.previous_vote == VoteType.DOWNVOTE
        assert outcome.changed
        assert not outcome.is_new_vote

    @pytest.mark.asyncio
    async def test_remove_without_vote_is_noop(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        _, voter, question = await _seed_question(unit_env)

        outcome = await vote_service.apply_vote(
            VotableType.QUESTION, question.id, voter.id, VoteType.REMOVE
        )

        assert outcome.vote_score == 0
        assert not outcome.changed

    @pytest.mark.asyncio
    async def test_score_counts_all_voters(self, unit_env):
        """Score should be upvoters minus downvoters."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        user_repo = await unit_env.get(UserRepository)
        _, voter, question = await _seed_question(unit_env)
        second = await user_repo.save(make_user("second"))
        third = await user_repo.save(make_user("third"))

        # Act
        await vote_service.apply_vote(
            VotableType.QUESTION, question.id, voter.id, VoteType.UPVOTE
        )
        await vote_service.apply_vote(
            VotableType.QUESTION, question.id, second.id, VoteType.UPVOTE
        )
        outcome = await vote_service.apply_vote(
            VotableType.QUESTION, question.id, third.id, VoteType.DOWNVOTE
        )

        # Assert
        assert outcome.vote_score == 1

    @pytest.mark.asyncio
    async def test_vote_on_answer_reports_owning_question(self, unit_env):
        # Arrange
        vote_service = await unit_env.get(VoteService)
        user_repo = await unit_env.get(UserRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        _, voter, question = await _seed_question(unit_env)
        answerer = await user_repo.save(make_user("answerer"))
        answer = await answer_repo.save(make_answer(question, answerer))

        # Act
        outcome = await vote_service.apply_vote(
            VotableType.ANSWER, answer.id, voter.id, VoteType.UPVOTE
        )

        # Assert
        assert outcome.question_id == question.id
        assert outcome.author_id == answerer.id

    @pytest.mark.asyncio
    async def test_invalid_vote_type_raises_validation_error(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        _, voter, question = await _seed_question(unit_env)

        with pytest.raises(ValidationError, match="Invalid vote type"):
            await vote_service.apply_vote(
                VotableType.QUESTION, question.id, voter.id, "sideways"
            )

    @pytest.mark.asyncio
    async def test_unknown_item_raises_not_found(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        _, voter, _ = await _seed_question(unit_env)

        with pytest.raises(NotFoundError, match="Answer not found"):
            await vote_service.apply_vote(
                VotableType.ANSWER, uuid4(), voter.id, VoteType.UPVOTE
            )

    @pytest.mark.asyncio
    async def test_author_may_vote_on_own_item(self, unit_env):
        """Self-votes count; only their notification is suppressed."""
        vote_service = await unit_env.get(VoteService)
        author, _, question = await _seed_question(unit_env)

        outcome = await vote_service.apply_vote(
            VotableType.QUESTION, question.id, author.id, VoteType.UPVOTE
        )

        assert outcome.vote_score == 1
        assert outcome.author_id == author.id


class TestConcurrentVotes:
    """Concurrent votes on one item never lose an update."""

    @pytest.mark.asyncio
    async def test_concurrent_voters_are_all_counted(self, unit_env):
        # Arrange
        vote_service = await unit_env.get(VoteService)
        user_repo = await unit_env.get(UserRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        _, _, question = await _seed_question(unit_env)
        answerer = await user_repo.save(make_user("answerer"))
        answer = await answer_repo.save(make_answer(question, answerer))
        voters = [await user_repo.save(make_user(f"voter{i}")) for i in range(20)]

        # Act
        outcomes = await asyncio.gather(
            *(
                vote_service.apply_vote(
                    VotableType.ANSWER, answer.id, voter.id, VoteType.UPVOTE
                )
                for voter in voters
            )
        )

        # Assert
        tally = await vote_service.get_tally(VotableType.ANSWER, answer.id)
        assert tally.score == len(voters)
        assert tally.upvoters == {voter.id for voter in voters}
        assert not tally.downvoters
        assert all(outcome.is_new_vote for outcome in outcomes)

    @pytest.mark.asyncio
    async def test_racing_votes_of_one_voter_leave_one_vote(self, unit_env):
        # Arrange
        vote_service = await unit_env.get(VoteService)
        _, voter, question = await _seed_question(unit_env)

        # Act
        await asyncio.gather(
            vote_service.apply_vote(
                VotableType.QUESTION, question.id, voter.id, VoteType.UPVOTE
            ),
            vote_service.apply_vote(
                VotableType.QUESTION, question.id, voter.id, VoteType.DOWNVOTE
            ),
        )

        # Assert
        tally = await vote_service.get_tally(VotableType.QUESTION, question.id)
        assert (voter.id in tally.upvoters) != (voter.id in tally.downvoters)
        assert tally.score in (1, -1)
