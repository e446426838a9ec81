"""Credential verification.

A request credential is offered to each configured verifier in turn; the
first one that recognises it determines the caller's identity.
"""

from typing import Optional
from uuid import UUID

import logfire

from stackit.domain.repository import UserRepository
from stackit.domain.value import Identity, UserId
from stackit.util.jwt import JWTError

from .base import Service
from .jwt_service import JWTService


class CredentialVerifier:
    """Verifies one kind of bearer credential."""

    scheme: str = "unknown"

    async def verify(self, token: str) -> Optional[Identity]:
        """Resolve a token to an identity.

        Args:
            token: Raw credential

        Returns:
            Identity if this verifier accepts the token, None otherwise
        """
        raise NotImplementedError


class SessionTokenVerifier(CredentialVerifier):
    """Accepts session tokens issued by this service."""

    scheme = "session"

    def __init__(self, jwt_service: JWTService, user_repository: UserRepository) -> None:
        self.jwt_service = jwt_service
        self.user_repository = user_repository

    async def verify(self, token: str) -> Optional[Identity]:
        try:
            payload = self.jwt_service.verify_token(token)
            user_id = UserId(UUID(payload.user_id))
        except (JWTError, ValueError):
            return None

        user = await self.user_repository.find_by_id(user_id)
        if not user or not user.is_active:
            return None
        return Identity(
            user_id=str(user.id), username=user.username.root, scheme=self.scheme
        )


class CredentialService(Service):
    """Chains credential verifiers; the first success wins."""

    def __init__(self, verifiers: list[CredentialVerifier]) -> None:
        self.verifiers = verifiers

    async def authenticate(self, token: Optional[str]) -> Optional[Identity]:
        """Resolve a credential to an identity.

        Args:
            token: Raw credential, may be missing

        Returns:
            Identity, or None if no verifier accepts the token
        """
        if not token:
            return None

        with logfire.span("credential_service.authenticate"):
            for verifier in self.verifiers:
                try:
                    identity = await verifier.verify(token)
                except Exception as e:
                    logfire.warn(
                        "Credential verifier failed", scheme=verifier.scheme, error=str(e)
                    )
                    continue
                if identity:
                    logfire.debug(
                        "Credential accepted",
                        scheme=identity.scheme,
                        user_id=identity.user_id,
                    )
                    return identity

            logfire.debug("Credential rejected by all verifiers")
            return None
