"""Mock identity provider for testing.

Provider ID tokens are signed with a throwaway RSA key generated at import
time; the verifier reads the matching public key from a static key set
instead of fetching it over HTTP.
"""

import json
from datetime import datetime, timedelta, timezone

import jwt
from cryptography.hazmat.primitives.asymmetric import rsa
from dishka import Scope, provide
from jwt.algorithms import RSAAlgorithm

from stackit.adapter.identity import IdentityProviderTokenVerifier, SigningKeyCache
from stackit.config import IdentityProviderSettings
from stackit.domain.repository import UserRepository
from stackit.domain.service import CredentialVerifier, SessionTokenVerifier
from stackit.util.di.infrastructure.identity import IdentityProvider

TEST_KEY_ID = "test-key-1"
TEST_ISSUER = "https://idp.stackit.test"
TEST_AUDIENCE = "stackit-test"

_private_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)


def _public_jwk() -> dict:
    jwk = json.loads(RSAAlgorithm.to_jwk(_private_key.public_key()))
    jwk.update({"kid": TEST_KEY_ID, "alg": "RS256", "use": "sig"})
    return jwk


TEST_IDP_SETTINGS = IdentityProviderSettings(
    jwks_url="https://idp.stackit.test/.well-known/jwks.json",
    issuer=TEST_ISSUER,
    audience=TEST_AUDIENCE,
)


def make_provider_token(
    subject: str,
    *,
    kid: str = TEST_KEY_ID,
    issuer: str = TEST_ISSUER,
    audience: str = TEST_AUDIENCE,
    expires_in: timedelta = timedelta(hours=1),
) -> str:
    """Mint an ID token as the test identity provider would."""
    now = datetime.now(timezone.utc)
    claims = {
        "sub": subject,
        "iss": issuer,
        "aud": audience,
        "iat": now,
        "exp": now + expires_in,
    }
    return jwt.encode(claims, _private_key, algorithm="RS256", headers={"kid": kid})


class StaticSigningKeyCache(SigningKeyCache):
    """Key cache serving the test key set."""

    def __init__(self) -> None:
        super().__init__(jwks_url=TEST_IDP_SETTINGS.jwks_url or "")
        self.fetch_count = 0

    async def _fetch(self) -> jwt.PyJWKSet:
        self.fetch_count += 1
        return jwt.PyJWKSet.from_dict({"keys": [_public_jwk()]})


class MockIdentityProvider(IdentityProvider):
    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_signing_key_cache(self) -> SigningKeyCache:
        return StaticSigningKeyCache()

    @provide(scope=Scope.REQUEST)
    def get_credential_verifiers(
        self,
        session_verifier: SessionTokenVerifier,
        key_cache: SigningKeyCache,
        user_repository: UserRepository,
    ) -> list[CredentialVerifier]:
        return [
            session_verifier,
            IdentityProviderTokenVerifier(
                TEST_IDP_SETTINGS, key_cache, user_repository
            ),
        ]
