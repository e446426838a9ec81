"""Infrastructure providers."""

# Import bases
from .identity import IdentityProvider
from .persistence import PersistenceProvider
from .ratelimit import RateLimitProvider
from .realtime import RealtimeProvider

# Import implementations (needed for __subclasses__())
from .identity import ProdIdentityProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401
from .ratelimit import ProdRateLimitProvider  # noqa: F401
from .realtime import ProdRealtimeProvider  # noqa: F401

__all__ = [
    "IdentityProvider",
    "PersistenceProvider",
    "ProdIdentityProvider",
    "ProdPersistenceProvider",
    "ProdRateLimitProvider",
    "ProdRealtimeProvider",
    "RateLimitProvider",
    "RealtimeProvider",
]
