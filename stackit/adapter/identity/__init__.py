"""External identity provider integration."""

from stackit.adapter.identity.jwks import (
    IdentityProviderTokenVerifier,
    SigningKeyCache,
)

__all__ = ["IdentityProviderTokenVerifier", "SigningKeyCache"]
