"""Real-time delivery to connected clients."""

from stackit.adapter.realtime.deferred import DeferredPublisher
from stackit.adapter.realtime.hub import ConnectionHub, Subscription, room_for

__all__ = ["ConnectionHub", "DeferredPublisher", "Subscription", "room_for"]
