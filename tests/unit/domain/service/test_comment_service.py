"""Unit tests for mention parsing and comment creation."""

import pytest

from stackit.domain.repository import (
    AnswerRepository,
    CommentRepository,
    QuestionRepository,
    UserRepository,
)
from stackit.domain.service import CommentService, UserService, parse_mentions
from tests.conftest import make_answer, make_question, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestParseMentions:
    """Tests for parse_mentions."""

    def test_extracts_tokens_in_order(self):
        assert parse_mentions("thanks @bob and @carol_2") == ["bob", "carol_2"]

    def test_repeated_token_counted_once(self):
        assert parse_mentions("@bob @bob, cc @bob") == ["bob"]

    def test_token_stops_at_punctuation(self):
        assert parse_mentions("ping @alice! and @dave-smith") == ["alice", "dave"]

    def test_no_mentions(self):
        assert parse_mentions("no one to ping here") == []

    def test_bare_at_sign_is_ignored(self):
        assert parse_mentions("meet @ noon") == []


class TestResolveUsernames:
    """Mention tokens are resolved against existing users."""

    @pytest.mark.asyncio
    async def test_unknown_tokens_are_dropped(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        bob = await user_repo.save(make_user("bob"))
        carol = await user_repo.save(make_user("carol"))

        # Act
        users = await user_service.resolve_usernames(["carol", "ghost", "bob", "carol"])

        # Assert
        assert [u.id for u in users] == [carol.id, bob.id]

    @pytest.mark.asyncio
    async def test_inactive_users_are_dropped(self, unit_env):
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(make_user("gone", is_active=False))

        assert await user_service.resolve_usernames(["gone"]) == []


class TestCreateComment:
    """Tests for create_comment."""

    @pytest.mark.asyncio
    async def test_stores_resolved_mentions(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        comment_repo = await unit_env.get(CommentRepository)

        asker = await user_repo.save(make_user("asker"))
        answerer = await user_repo.save(make_user("answerer"))
        carol = await user_repo.save(make_user("carol"))
        question = await question_repo.save(make_question(asker))
        answer = await answer_repo.save(make_answer(question, answerer))

        # Act
        comment = await comment_service.create_comment(
            answer, asker, "@carol can you confirm?", [carol]
        )

        # Assert
        assert comment.mentions == [carol.id]
        assert comment.question_id == question.id
        assert await comment_repo.find_by_answer(answer.id) == [comment]
