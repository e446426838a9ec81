"""Credential verification infrastructure providers."""

from dishka import Scope, provide

from stackit.adapter.identity import IdentityProviderTokenVerifier, SigningKeyCache
from stackit.config import IdentityProviderSettings
from stackit.domain.repository import UserRepository
from stackit.domain.service import CredentialVerifier, SessionTokenVerifier
from stackit.util.di.base import ProviderBase


class IdentityProvider(ProviderBase):
    """Credential verifier chain component base."""

    __mock_component__ = "identity"


class ProdIdentityProvider(IdentityProvider):
    """Session tokens, plus external provider ID tokens when configured."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_signing_key_cache(
        self, settings: IdentityProviderSettings
    ) -> SigningKeyCache:
        # Never fetched unless a provider is configured
        return SigningKeyCache(jwks_url=settings.jwks_url or "")

    @provide(scope=Scope.REQUEST)
    def get_credential_verifiers(
        self,
        session_verifier: SessionTokenVerifier,
        settings: IdentityProviderSettings,
        key_cache: SigningKeyCache,
        user_repository: UserRepository,
    ) -> list[CredentialVerifier]:
        """Provide the ordered verifier chain; the first success wins."""
        verifiers: list[CredentialVerifier] = [session_verifier]
        if settings.jwks_url:
            verifiers.append(
                IdentityProviderTokenVerifier(settings, key_cache, user_repository)
            )
        return verifiers
