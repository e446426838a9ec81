"""Real-time delivery infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide

from stackit.adapter.realtime import ConnectionHub, DeferredPublisher
from stackit.config import NotificationSettings
from stackit.domain.service import NotificationPublisher
from stackit.util.di.base import ProviderBase


class RealtimeProvider(ProviderBase):
    """Real-time channel component base.

    Services publish through a request-scoped ``DeferredPublisher``; the
    shared hub sees the pushes only once the request's scope closes cleanly.
    """

    __mock_component__ = "realtime"

    @provide(scope=Scope.REQUEST)
    async def get_deferred_publisher(
        self, hub: ConnectionHub
    ) -> AsyncIterator[DeferredPublisher]:
        pushes = DeferredPublisher(hub)
        error = yield pushes
        await pushes.close(error)

    @provide(scope=Scope.REQUEST)
    def get_publisher(self, pushes: DeferredPublisher) -> NotificationPublisher:
        return pushes


class ProdRealtimeProvider(RealtimeProvider):
    """In-process WebSocket hub shared by all requests of this instance."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_connection_hub(self, settings: NotificationSettings) -> ConnectionHub:
        return ConnectionHub(queue_size=settings.websocket_queue_size)
