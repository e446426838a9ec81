"""Unit tests for the credential verifier chain."""

from datetime import timedelta

import pytest

from stackit.domain.repository import UserRepository
from stackit.domain.service import CredentialService, CredentialVerifier, JWTService
from tests.conftest import make_user
from tests.di.identity import make_provider_token
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class ExplodingVerifier(CredentialVerifier):
    scheme = "broken"

    async def verify(self, token: str):
        raise RuntimeError("verifier crashed")


class TestSessionTokens:
    """Session JWTs issued by this service."""

    @pytest.mark.asyncio
    async def test_valid_session_token(self, unit_env):
        # Arrange
        credential_service = await unit_env.get(CredentialService)
        jwt_service = await unit_env.get(JWTService)
        user_repo = await unit_env.get(UserRepository)
        alice = await user_repo.save(make_user("alice"))
        token = jwt_service.create_token(str(alice.id), "alice")

        # Act
        identity = await credential_service.authenticate(token)

        # Assert
        assert identity.user_id == str(alice.id)
        assert identity.username == "alice"
        assert identity.scheme == "session"

    @pytest.mark.asyncio
    async def test_token_for_unknown_user_is_rejected(self, unit_env):
        credential_service = await unit_env.get(CredentialService)
        jwt_service = await unit_env.get(JWTService)
        token = jwt_service.create_token(str(make_user("ghost").id), "ghost")

        assert await credential_service.authenticate(token) is None

    @pytest.mark.asyncio
    async def test_token_for_inactive_user_is_rejected(self, unit_env):
        credential_service = await unit_env.get(CredentialService)
        jwt_service = await unit_env.get(JWTService)
        user_repo = await unit_env.get(UserRepository)
        banned = await user_repo.save(make_user("banned", is_active=False))

        token = jwt_service.create_token(str(banned.id), "banned")

        assert await credential_service.authenticate(token) is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", [None, "", "garbage", "a.b.c"])
    async def test_malformed_credentials_are_rejected(self, unit_env, token):
        credential_service = await unit_env.get(CredentialService)

        assert await credential_service.authenticate(token) is None


class TestProviderTokens:
    """ID tokens from the external identity provider."""

    @pytest.mark.asyncio
    async def test_linked_subject_is_accepted(self, unit_env):
        # Arrange
        credential_service = await unit_env.get(CredentialService)
        user_repo = await unit_env.get(UserRepository)
        alice = await user_repo.save(make_user("alice", external_uid="idp|alice"))

        # Act
        identity = await credential_service.authenticate(make_provider_token("idp|alice"))

        # Assert
        assert identity.user_id == str(alice.id)
        assert identity.scheme == "identity_provider"

    @pytest.mark.asyncio
    async def test_unlinked_subject_is_rejected(self, unit_env):
        credential_service = await unit_env.get(CredentialService)

        token = make_provider_token("idp|nobody")

        assert await credential_service.authenticate(token) is None

    @pytest.mark.asyncio
    async def test_wrong_audience_is_rejected(self, unit_env):
        credential_service = await unit_env.get(CredentialService)
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(make_user("alice", external_uid="idp|alice"))

        token = make_provider_token("idp|alice", audience="someone-else")

        assert await credential_service.authenticate(token) is None

    @pytest.mark.asyncio
    async def test_expired_token_is_rejected(self, unit_env):
        credential_service = await unit_env.get(CredentialService)
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(make_user("alice", external_uid="idp|alice"))

        token = make_provider_token("idp|alice", expires_in=timedelta(minutes=-5))

        assert await credential_service.authenticate(token) is None

    @pytest.mark.asyncio
    async def test_unknown_key_id_is_rejected(self, unit_env):
        credential_service = await unit_env.get(CredentialService)
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(make_user("alice", external_uid="idp|alice"))

        token = make_provider_token("idp|alice", kid="rotated-away")

        assert await credential_service.authenticate(token) is None


class TestChain:
    """Chain ordering and failure isolation."""

    @pytest.mark.asyncio
    async def test_crashing_verifier_is_skipped(self, unit_env):
        # Arrange
        jwt_service = await unit_env.get(JWTService)
        user_repo = await unit_env.get(UserRepository)
        session_chain = await unit_env.get(list[CredentialVerifier])
        alice = await user_repo.save(make_user("alice"))
        service = CredentialService([ExplodingVerifier(), *session_chain])

        # Act
        identity = await service.authenticate(
            jwt_service.create_token(str(alice.id), "alice")
        )

        # Assert
        assert identity.user_id == str(alice.id)

    @pytest.mark.asyncio
    async def test_empty_chain_rejects_everything(self):
        service = CredentialService([])

        assert await service.authenticate("anything") is None
