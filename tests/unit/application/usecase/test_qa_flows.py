"""Unit tests for the question, answer, vote and comment use cases.

Each flow runs against the in-memory component set and checks both the
primary effect and the notifications it produces.
"""

from uuid import uuid4

import pytest
import pytest_asyncio

from stackit.application.usecase.answer import (
    CreateAnswerRequest,
    CreateAnswerUseCase,
    ToggleAcceptanceRequest,
    ToggleAcceptanceUseCase,
)
from stackit.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from stackit.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionUseCase,
    GetQuestionRequest,
    GetQuestionUseCase,
)
from stackit.application.usecase.vote import CastVoteRequest, CastVoteUseCase
from stackit.domain.error import (
    ConflictError,
    NotFoundError,
    RateLimitExceededError,
    ValidationError,
)
from stackit.domain.repository import UserRepository
from stackit.domain.service import NotificationService
from stackit.domain.value import NotificationType, VotableType, VoteType
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


@pytest_asyncio.fixture
async def users(unit_env):
    user_repo = await unit_env.get(UserRepository)
    return {
        name: await user_repo.save(make_user(name))
        for name in ("asker", "answerer", "voter", "carol")
    }


async def _ask(env, author) -> str:
    use_case = await env.get(CreateQuestionUseCase)
    response = await use_case.execute(
        CreateQuestionRequest(
            author_id=str(author.id),
            title="Why does my generator stop early?",
            description="It yields twice and then raises StopIteration unexpectedly.",
            tags=["Python", "generators", "python"],
        )
    )
    return response.question_id


async def _answer(env, question_id: str, author) -> str:
    use_case = await env.get(CreateAnswerUseCase)
    response = await use_case.execute(
        CreateAnswerRequest(
            question_id=question_id,
            author_id=str(author.id),
            content="A return statement inside the loop ends the generator.",
        )
    )
    return response.answer_id


async def _inbox(env, user) -> list:
    service = await env.get(NotificationService)
    return (await service.list_for_recipient(user.id)).items


class TestCreateQuestion:
    @pytest.mark.asyncio
    async def test_tags_are_normalized(self, unit_env, users):
        use_case = await unit_env.get(GetQuestionUseCase)
        question_id = await _ask(unit_env, users["asker"])

        question = await use_case.execute(GetQuestionRequest(question_id=question_id))

        assert question.tags == ["python", "generators"]
        assert not question.is_solved


class TestAnswerFlow:
    """Posting answers."""

    @pytest.mark.asyncio
    async def test_answer_notifies_asker(self, unit_env, users):
        # Arrange
        question_id = await _ask(unit_env, users["asker"])

        # Act
        await _answer(unit_env, question_id, users["answerer"])

        # Assert
        inbox = await _inbox(unit_env, users["asker"])
        assert [n.type for n in inbox] == [NotificationType.ANSWER]
        assert inbox[0].username == "answerer"

    @pytest.mark.asyncio
    async def test_second_answer_by_same_author_conflicts(self, unit_env, users):
        question_id = await _ask(unit_env, users["asker"])
        await _answer(unit_env, question_id, users["answerer"])

        with pytest.raises(ConflictError):
            await _answer(unit_env, question_id, users["answerer"])

        assert len(await _inbox(unit_env, users["asker"])) == 1

    @pytest.mark.asyncio
    async def test_answer_to_missing_question(self, unit_env, users):
        with pytest.raises(NotFoundError):
            await _answer(
                unit_env, "00000000-0000-0000-0000-000000000000", users["answerer"]
            )


class TestVoteFlow:
    """Voting and its notifications."""

    @pytest.mark.asyncio
    async def test_vote_transitions_notify_author(self, unit_env, users):
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)
        question_id = await _ask(unit_env, users["asker"])
        answer_id = await _answer(unit_env, question_id, users["answerer"])

        def vote(vote_type: str) -> CastVoteRequest:
            return CastVoteRequest(
                votable_type=VotableType.ANSWER,
                votable_id=answer_id,
                voter_id=str(users["voter"].id),
                vote_type=vote_type,
            )

        # Act
        up = await use_case.execute(vote("upvote"))
        again = await use_case.execute(vote("upvote"))
        down = await use_case.execute(vote("downvote"))
        removed = await use_case.execute(vote("remove"))

        # Assert
        assert [r.vote_score for r in (up, again, down, removed)] == [1, 1, -1, 0]
        assert removed.user_vote is None
        assert down.previous_vote == VoteType.UPVOTE
        inbox = await _inbox(unit_env, users["answerer"])
        assert [n.content for n in inbox] == [
            "voter downvoted your answer",
            "voter upvoted your answer",
        ]

    @pytest.mark.asyncio
    async def test_votes_are_rate_limited(self, unit_env, users):
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)
        question_id = await _ask(unit_env, users["asker"])
        request = CastVoteRequest(
            votable_type=VotableType.QUESTION,
            votable_id=question_id,
            voter_id=str(users["voter"].id),
            vote_type="upvote",
        )
        limit = use_case.rate_limit_service.settings.votes_per_window
        for _ in range(limit):
            await use_case.execute(request)

        # Act & Assert
        with pytest.raises(RateLimitExceededError) as exc_info:
            await use_case.execute(request)
        assert exc_info.value.retry_after > 0

    @pytest.mark.asyncio
    async def test_rejected_votes_do_not_use_budget(self, unit_env, users):
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)
        question_id = await _ask(unit_env, users["asker"])
        voter_id = str(users["voter"].id)
        limit = use_case.rate_limit_service.settings.votes_per_window
        for _ in range(limit):
            with pytest.raises(ValidationError):
                await use_case.execute(
                    CastVoteRequest(
                        votable_type=VotableType.QUESTION,
                        votable_id=question_id,
                        voter_id=voter_id,
                        vote_type="sideways",
                    )
                )
            with pytest.raises(NotFoundError):
                await use_case.execute(
                    CastVoteRequest(
                        votable_type=VotableType.ANSWER,
                        votable_id=str(uuid4()),
                        voter_id=voter_id,
                        vote_type="upvote",
                    )
                )

        # Act
        response = await use_case.execute(
            CastVoteRequest(
                votable_type=VotableType.QUESTION,
                votable_id=question_id,
                voter_id=voter_id,
                vote_type="upvote",
            )
        )

        # Assert
        assert response.vote_score == 1


class TestAcceptanceFlow:
    """Accepting answers."""

    @pytest.mark.asyncio
    async def test_accept_then_unaccept(self, unit_env, users):
        # Arrange
        use_case = await unit_env.get(ToggleAcceptanceUseCase)
        question_id = await _ask(unit_env, users["asker"])
        answer_id = await _answer(unit_env, question_id, users["answerer"])
        request = ToggleAcceptanceRequest(
            answer_id=answer_id, actor_id=str(users["asker"].id)
        )

        # Act
        accepted = await use_case.execute(request)
        unaccepted = await use_case.execute(request)

        # Assert
        assert accepted.is_accepted and accepted.is_solved
        assert not unaccepted.is_accepted and not unaccepted.is_solved
        inbox = await _inbox(unit_env, users["answerer"])
        assert [n.type for n in inbox] == [NotificationType.ACCEPT]

    @pytest.mark.asyncio
    async def test_get_question_reflects_acceptance_and_votes(self, unit_env, users):
        # Arrange
        question_id = await _ask(unit_env, users["asker"])
        answer_id = await _answer(unit_env, question_id, users["answerer"])
        toggle = await unit_env.get(ToggleAcceptanceUseCase)
        await toggle.execute(
            ToggleAcceptanceRequest(answer_id=answer_id, actor_id=str(users["asker"].id))
        )
        cast_vote = await unit_env.get(CastVoteUseCase)
        await cast_vote.execute(
            CastVoteRequest(
                votable_type=VotableType.ANSWER,
                votable_id=answer_id,
                voter_id=str(users["voter"].id),
                vote_type="upvote",
            )
        )
        get_question = await unit_env.get(GetQuestionUseCase)

        # Act
        question = await get_question.execute(
            GetQuestionRequest(question_id=question_id, viewer_id=str(users["voter"].id))
        )

        # Assert
        assert question.is_solved
        assert question.accepted_answer_id == answer_id
        assert question.answers[0].is_accepted
        assert question.answers[0].vote_score == 1
        assert question.answers[0].user_vote == VoteType.UPVOTE


class TestCommentFlow:
    """Comments and mentions."""

    @pytest.mark.asyncio
    async def test_mentions_resolve_and_notify(self, unit_env, users):
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        question_id = await _ask(unit_env, users["asker"])
        answer_id = await _answer(unit_env, question_id, users["answerer"])

        # Act
        comment = await use_case.execute(
            CreateCommentRequest(
                answer_id=answer_id,
                author_id=str(users["voter"].id),
                content="@carol @ghost this matches what @carol saw",
            )
        )

        # Assert
        assert comment.mentions == [str(users["carol"].id)]
        carol_inbox = await _inbox(unit_env, users["carol"])
        answerer_inbox = await _inbox(unit_env, users["answerer"])
        assert [n.type for n in carol_inbox] == [NotificationType.MENTION]
        assert [n.type for n in answerer_inbox] == [NotificationType.COMMENT]
