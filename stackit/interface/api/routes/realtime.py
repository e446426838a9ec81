"""Real-time notification channel.

Each authenticated socket joins its user's room on the connection hub.
Pushes land in a bounded per-socket queue that a sender task drains, so
publishing never waits on a slow client.
"""

import asyncio
import contextlib
from uuid import UUID

import logfire
from dishka import AsyncContainer
from fastapi import APIRouter, Query, WebSocket, WebSocketDisconnect, status

from stackit.adapter.realtime import ConnectionHub, Subscription
from stackit.domain.service import CredentialService, NotificationService
from stackit.domain.value import UserId
from stackit.interface.api.security import extract_token

router = APIRouter(tags=["realtime"])

CONNECTED_EVENT = "connected"


async def _pump(websocket: WebSocket, subscription: Subscription) -> None:
    while True:
        message = await subscription.receive()
        await websocket.send_json(message)


@router.websocket("/ws")
async def notification_socket(
    websocket: WebSocket,
    token: str | None = Query(default=None),
) -> None:
    """Push notifications to the connected user.

    The credential comes from the ``token`` query parameter, a bearer
    ``Authorization`` header, or the ``auth_token`` cookie. Sockets without
    a valid credential are closed with 1008.

    On connect the server sends
    ``{"event": "connected", "data": {"userId", "unreadCount"}}``; clients
    reconcile anything missed while offline through ``GET /notifications``.
    """
    container: AsyncContainer = websocket.app.state.dishka_container
    credential = extract_token(
        authorization=websocket.headers.get("authorization"),
        cookie=websocket.cookies.get("auth_token"),
        query=token,
    )

    unread_count = 0
    async with container() as request_container:
        credential_service = await request_container.get(CredentialService)
        identity = await credential_service.authenticate(credential)
        if identity:
            notification_service = await request_container.get(NotificationService)
            unread_count = await notification_service.unread_count(
                UserId(UUID(identity.user_id))
            )

    await websocket.accept()
    if not identity:
        logfire.warn("Rejected websocket without valid credential")
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    user_id = UserId(UUID(identity.user_id))
    hub = await container.get(ConnectionHub)
    subscription = hub.subscribe(user_id)
    subscription.offer(
        {
            "event": CONNECTED_EVENT,
            "data": {"userId": identity.user_id, "unreadCount": unread_count},
        }
    )
    sender = asyncio.create_task(_pump(websocket, subscription))
    logfire.info("Websocket connected", user_id=identity.user_id)

    try:
        while True:
            message = await websocket.receive_text()
            if message == "ping":
                subscription.offer({"event": "pong", "data": {}})
    except WebSocketDisconnect:
        pass
    finally:
        hub.unsubscribe(subscription)
        sender.cancel()
        with contextlib.suppress(asyncio.CancelledError, RuntimeError, WebSocketDisconnect):
            await sender
        logfire.info("Websocket disconnected", user_id=identity.user_id)
