"""Request credential extraction and authentication."""

from fastapi import HTTPException, status

from stackit.domain.service import CredentialService
from stackit.domain.value import Identity


def extract_token(
    authorization: str | None = None,
    cookie: str | None = None,
    query: str | None = None,
) -> str | None:
    """Pick the request credential.

    Precedence: explicit query token, ``Authorization: Bearer`` header, then
    the ``auth_token`` cookie.
    """
    if query:
        return query
    if authorization:
        scheme, _, value = authorization.partition(" ")
        if scheme.lower() == "bearer" and value.strip():
            return value.strip()
    return cookie or None


async def require_identity(
    credential_service: CredentialService,
    authorization: str | None,
    auth_token: str | None,
) -> Identity:
    """Resolve the caller or fail with 401."""
    token = extract_token(authorization=authorization, cookie=auth_token)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    identity = await credential_service.authenticate(token)
    if not identity:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return identity


async def optional_identity(
    credential_service: CredentialService,
    authorization: str | None,
    auth_token: str | None,
) -> Identity | None:
    """Resolve the caller if a valid credential was sent."""
    token = extract_token(authorization=authorization, cookie=auth_token)
    return await credential_service.authenticate(token)
