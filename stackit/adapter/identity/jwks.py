"""Verification of ID tokens issued by an external identity provider.

The provider publishes its signing keys as a JSON Web Key Set. Keys are
fetched with httpx and cached; a token signed with an unknown key id
triggers one refresh, which covers key rotation.
"""

import asyncio
import logging
import time
from typing import Optional

import httpx
import jwt

from stackit.adapter.error import ProviderError
from stackit.config import IdentityProviderSettings
from stackit.domain.repository import UserRepository
from stackit.domain.service.credential_service import CredentialVerifier
from stackit.domain.value import Identity

logger = logging.getLogger(__name__)


class SigningKeyCache:
    """Caches the provider's key set for ``ttl_seconds``."""

    def __init__(self, jwks_url: str, ttl_seconds: float = 3600.0) -> None:
        self.jwks_url = jwks_url
        self.ttl_seconds = ttl_seconds
        self._keys: Optional[jwt.PyJWKSet] = None
        self._fetched_at = 0.0
        self._lock = asyncio.Lock()

    async def get(self, kid: str) -> jwt.PyJWK:
        """Signing key for ``kid``.

        Raises:
            KeyError: If the provider does not publish the key
            ProviderError: If the key set cannot be fetched
        """
        keys = await self._key_set(refresh=False)
        try:
            return keys[kid]
        except KeyError:
            keys = await self._key_set(refresh=True)
            return keys[kid]

    async def _key_set(self, refresh: bool) -> jwt.PyJWKSet:
        async with self._lock:
            expired = time.monotonic() - self._fetched_at > self.ttl_seconds
            if self._keys is None or expired or refresh:
                self._keys = await self._fetch()
                self._fetched_at = time.monotonic()
            return self._keys

    async def _fetch(self) -> jwt.PyJWKSet:
        try:
            async with httpx.AsyncClient(timeout=10.0) as client:
                response = await client.get(self.jwks_url)
                response.raise_for_status()
                return jwt.PyJWKSet.from_dict(response.json())
        except (httpx.HTTPError, jwt.PyJWTError, ValueError) as e:
            logger.error("Failed to fetch signing keys from %s: %s", self.jwks_url, e)
            raise ProviderError(f"Could not load signing keys: {e}") from e


class IdentityProviderTokenVerifier(CredentialVerifier):
    """Accepts provider ID tokens whose subject is linked to a local user."""

    scheme = "identity_provider"

    def __init__(
        self,
        settings: IdentityProviderSettings,
        key_cache: SigningKeyCache,
        user_repository: UserRepository,
    ) -> None:
        self.settings = settings
        self.key_cache = key_cache
        self.user_repository = user_repository

    async def verify(self, token: str) -> Optional[Identity]:
        try:
            header = jwt.get_unverified_header(token)
        except jwt.PyJWTError:
            return None
        kid = header.get("kid")
        if not kid or header.get("alg") not in self.settings.algorithms:
            return None

        try:
            key = await self.key_cache.get(kid)
        except KeyError:
            logger.info("Token signed with unknown key id %s", kid)
            return None

        try:
            claims = jwt.decode(
                token,
                key.key,
                algorithms=self.settings.algorithms,
                audience=self.settings.audience,
                issuer=self.settings.issuer,
                options={"verify_aud": self.settings.audience is not None},
            )
        except jwt.PyJWTError as e:
            logger.info("Provider token rejected: %s", e)
            return None

        subject = claims.get("sub")
        if not subject:
            return None
        user = await self.user_repository.find_by_external_uid(subject)
        if not user or not user.is_active:
            logger.info("No active user linked to provider subject")
            return None
        return Identity(
            user_id=str(user.id), username=user.username.root, scheme=self.scheme
        )
