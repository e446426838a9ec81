"""Unit tests for ending the request's database session."""

from uuid import uuid4

import pytest

from stackit.adapter.realtime import ConnectionHub, DeferredPublisher
from stackit.domain.value import UserId
from stackit.persistence.database import end_session


class FakeSession:
    """Records how the unit of work ended."""

    def __init__(self, fail_commit: bool = False) -> None:
        self.fail_commit = fail_commit
        self.committed = False
        self.rolled_back = False

    async def commit(self) -> None:
        if self.fail_commit:
            raise ConnectionError("connection lost during commit")
        self.committed = True

    async def rollback(self) -> None:
        self.rolled_back = True


@pytest.fixture
def recipient() -> UserId:
    return UserId(uuid4())


@pytest.fixture
def hub() -> ConnectionHub:
    return ConnectionHub()


async def _queue_push(pushes: DeferredPublisher, recipient: UserId) -> None:
    await pushes.publish(recipient, "notification", {"type": "answer"})


@pytest.mark.asyncio
async def test_commit_then_push(hub, recipient):
    # Arrange
    subscription = hub.subscribe(recipient)
    session = FakeSession()
    pushes = DeferredPublisher(hub)
    await _queue_push(pushes, recipient)

    # Act
    await end_session(session, pushes)
    pushed_before_close = not subscription.queue.empty()
    await pushes.close()

    # Assert
    assert session.committed
    assert not pushed_before_close
    assert subscription.queue.get_nowait()["data"] == {"type": "answer"}


@pytest.mark.asyncio
async def test_failed_commit_pushes_nothing(hub, recipient):
    # Arrange
    subscription = hub.subscribe(recipient)
    session = FakeSession(fail_commit=True)
    pushes = DeferredPublisher(hub)
    await _queue_push(pushes, recipient)

    # Act
    with pytest.raises(ConnectionError):
        await end_session(session, pushes)
    await pushes.close()

    # Assert
    assert session.rolled_back
    assert subscription.queue.empty()


@pytest.mark.asyncio
async def test_failed_request_rolls_back_and_pushes_nothing(hub, recipient):
    subscription = hub.subscribe(recipient)
    session = FakeSession()
    pushes = DeferredPublisher(hub)
    await _queue_push(pushes, recipient)

    await end_session(session, pushes, RuntimeError("handler crashed"))
    await pushes.close(RuntimeError("handler crashed"))

    assert session.rolled_back
    assert not session.committed
    assert subscription.queue.empty()
