"""Mock providers for testing."""

from .identity import MockIdentityProvider
from .persistence import MockPersistenceProvider
from .ratelimit import MockRateLimitProvider
from .realtime import MockRealtimeProvider, RecordingHub
from .container import build_test_container

__all__ = [
    "MockIdentityProvider",
    "MockPersistenceProvider",
    "MockRateLimitProvider",
    "MockRealtimeProvider",
    "RecordingHub",
    "build_test_container",
]
