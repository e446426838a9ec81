"""Unit tests for the in-process connection hub."""

import asyncio
from uuid import uuid4

import pytest

from stackit.adapter.realtime import ConnectionHub, room_for
from stackit.domain.value import UserId


@pytest.fixture
def alice() -> UserId:
    return UserId(uuid4())


def test_room_name(alice):
    assert room_for(alice) == f"user_{alice}"


class TestPublish:
    """Tests for publish."""

    @pytest.mark.asyncio
    async def test_every_connection_of_user_receives_event(self, alice):
        # Arrange
        hub = ConnectionHub()
        tab_one = hub.subscribe(alice)
        tab_two = hub.subscribe(alice)
        other = hub.subscribe(UserId(uuid4()))

        # Act
        delivered = await hub.publish(alice, "notification", {"type": "vote"})

        # Assert
        assert delivered == 2
        expected = {"event": "notification", "data": {"type": "vote"}}
        assert await tab_one.receive() == expected
        assert await tab_two.receive() == expected
        assert other.queue.empty()

    @pytest.mark.asyncio
    async def test_offline_user_is_skipped(self, alice):
        hub = ConnectionHub()

        assert await hub.publish(alice, "notification", {}) == 0

    @pytest.mark.asyncio
    async def test_full_queue_drops_without_blocking(self, alice):
        """A slow connection loses messages instead of stalling the publisher."""
        # Arrange
        hub = ConnectionHub(queue_size=2)
        slow = hub.subscribe(alice)

        # Act
        results = [
            await asyncio.wait_for(hub.publish(alice, "notification", {"n": i}), 1)
            for i in range(4)
        ]

        # Assert
        assert results == [1, 1, 0, 0]
        assert slow.dropped == 2
        assert (await slow.receive())["data"] == {"n": 0}

    @pytest.mark.asyncio
    async def test_unsubscribed_connection_gets_nothing(self, alice):
        hub = ConnectionHub()
        subscription = hub.subscribe(alice)
        hub.unsubscribe(subscription)

        delivered = await hub.publish(alice, "notification", {})

        assert delivered == 0
        assert hub.connection_count(alice) == 0


def test_connection_count(alice):
    hub = ConnectionHub()
    hub.subscribe(alice)
    hub.subscribe(alice)
    hub.subscribe(UserId(uuid4()))

    assert hub.connection_count(alice) == 2
    assert hub.connection_count() == 3
