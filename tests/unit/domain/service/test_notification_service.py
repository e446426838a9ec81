"""Unit tests for NotificationService."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from stackit.domain.error import NotAuthorizedError, NotFoundError
from stackit.domain.service import NotificationService
from stackit.domain.value import NotificationId, NotificationType, UserId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

T0 = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def alice() -> UserId:
    return UserId(uuid4())


@pytest.fixture
def bob() -> UserId:
    return UserId(uuid4())


class TestCreate:
    """Tests for create."""

    @pytest.mark.asyncio
    async def test_missing_content_uses_type_template(self, unit_env, alice, bob):
        service = await unit_env.get(NotificationService)

        notification = await service.create(
            NotificationType.SYSTEM, recipient_id=alice, sender_id=bob, now=T0
        )

        assert notification.content == "System notification"
        assert not notification.is_read

    @pytest.mark.asyncio
    async def test_expires_after_ttl(self, unit_env, alice, bob):
        service = await unit_env.get(NotificationService)

        notification = await service.create(
            NotificationType.ANSWER, recipient_id=alice, sender_id=bob, now=T0
        )

        assert notification.expires_at == T0 + timedelta(days=30)


class TestExpiry:
    """Expired notifications are invisible to every read."""

    @pytest.mark.asyncio
    async def test_notification_invisible_after_31_days(self, unit_env, alice, bob):
        # Arrange
        service = await unit_env.get(NotificationService)
        notification = await service.create(
            NotificationType.ANSWER, recipient_id=alice, sender_id=bob, now=T0
        )
        later = T0 + timedelta(days=31)

        # Act
        page = await service.list_for_recipient(alice, now=later)

        # Assert
        assert page.items == []
        assert page.total == 0
        assert await service.unread_count(alice, now=later) == 0
        assert await service.stats(alice, now=later) == []
        with pytest.raises(NotFoundError):
            await service.get(notification.id, alice, now=later)

    @pytest.mark.asyncio
    async def test_still_visible_before_expiry(self, unit_env, alice, bob):
        service = await unit_env.get(NotificationService)
        await service.create(
            NotificationType.ANSWER, recipient_id=alice, sender_id=bob, now=T0
        )

        page = await service.list_for_recipient(alice, now=T0 + timedelta(days=29))

        assert page.total == 1

    @pytest.mark.asyncio
    async def test_purge_removes_only_expired(self, unit_env, alice, bob):
        # Arrange
        service = await unit_env.get(NotificationService)
        await service.create(
            NotificationType.ANSWER, recipient_id=alice, sender_id=bob, now=T0
        )
        fresh = await service.create(
            NotificationType.VOTE,
            recipient_id=alice,
            sender_id=bob,
            now=T0 + timedelta(days=20),
        )

        # Act
        purged = await service.purge_expired(now=T0 + timedelta(days=31))

        # Assert
        assert purged == 1
        page = await service.list_for_recipient(alice, now=T0 + timedelta(days=31))
        assert [n.id for n in page.items] == [fresh.id]


class TestListForRecipient:
    """Tests for list_for_recipient."""

    @pytest.mark.asyncio
    async def test_newest_first_with_pagination(self, unit_env, alice, bob):
        # Arrange
        service = await unit_env.get(NotificationService)
        created = [
            await service.create(
                NotificationType.VOTE,
                recipient_id=alice,
                sender_id=bob,
                now=T0 + timedelta(minutes=i),
            )
            for i in range(5)
        ]
        now = T0 + timedelta(hours=1)

        # Act
        first = await service.list_for_recipient(alice, page=1, page_size=2, now=now)
        last = await service.list_for_recipient(alice, page=3, page_size=2, now=now)

        # Assert
        assert [n.id for n in first.items] == [created[4].id, created[3].id]
        assert first.total == 5
        assert first.pages == 3
        assert first.has_next
        assert [n.id for n in last.items] == [created[0].id]
        assert not last.has_next

    @pytest.mark.asyncio
    async def test_only_own_notifications(self, unit_env, alice, bob):
        service = await unit_env.get(NotificationService)
        await service.create(NotificationType.VOTE, recipient_id=bob, sender_id=alice)

        page = await service.list_for_recipient(alice)

        assert page.total == 0

    @pytest.mark.asyncio
    async def test_unread_only_filter(self, unit_env, alice, bob):
        # Arrange
        service = await unit_env.get(NotificationService)
        read = await service.create(
            NotificationType.VOTE, recipient_id=alice, sender_id=bob
        )
        await service.create(NotificationType.ANSWER, recipient_id=alice, sender_id=bob)
        await service.mark_read(read.id, alice)

        # Act
        page = await service.list_for_recipient(alice, unread_only=True)

        # Assert
        assert page.total == 1
        assert page.unread_count == 1
        assert page.items[0].type == NotificationType.ANSWER

    @pytest.mark.asyncio
    async def test_page_size_is_clamped(self, unit_env, alice):
        service = await unit_env.get(NotificationService)

        page = await service.list_for_recipient(alice, page_size=10_000)

        assert page.page_size == service.settings.max_page_size


class TestOwnership:
    """Per-notification operations are restricted to the recipient."""

    @pytest.mark.asyncio
    async def test_other_user_cannot_read(self, unit_env, alice, bob):
        service = await unit_env.get(NotificationService)
        notification = await service.create(
            NotificationType.VOTE, recipient_id=alice, sender_id=bob
        )

        with pytest.raises(NotAuthorizedError):
            await service.get(notification.id, bob)
        with pytest.raises(NotAuthorizedError):
            await service.mark_read(notification.id, bob)
        with pytest.raises(NotAuthorizedError):
            await service.delete(notification.id, bob)

    @pytest.mark.asyncio
    async def test_missing_notification_raises_not_found(self, unit_env, alice):
        service = await unit_env.get(NotificationService)

        with pytest.raises(NotFoundError):
            await service.mark_unread(NotificationId(uuid4()), alice)


class TestReadState:
    """Tests for read and unread transitions."""

    @pytest.mark.asyncio
    async def test_mark_read_then_unread(self, unit_env, alice, bob):
        # Arrange
        service = await unit_env.get(NotificationService)
        notification = await service.create(
            NotificationType.VOTE, recipient_id=alice, sender_id=bob
        )

        # Act & Assert
        assert (await service.mark_read(notification.id, alice)).is_read
        assert await service.unread_count(alice) == 0
        assert not (await service.mark_unread(notification.id, alice)).is_read
        assert await service.unread_count(alice) == 1

    @pytest.mark.asyncio
    async def test_mark_all_read_counts_changes(self, unit_env, alice, bob):
        service = await unit_env.get(NotificationService)
        for _ in range(3):
            await service.create(NotificationType.VOTE, recipient_id=alice, sender_id=bob)
        await service.create(NotificationType.VOTE, recipient_id=bob, sender_id=alice)

        updated = await service.mark_all_read(alice)

        assert updated == 3
        assert await service.unread_count(alice) == 0
        assert await service.unread_count(bob) == 1


class TestStatsAndDeletion:
    """Tests for stats, delete and clear."""

    @pytest.mark.asyncio
    async def test_stats_group_by_type(self, unit_env, alice, bob):
        # Arrange
        service = await unit_env.get(NotificationService)
        first_vote = await service.create(
            NotificationType.VOTE, recipient_id=alice, sender_id=bob
        )
        await service.create(NotificationType.VOTE, recipient_id=alice, sender_id=bob)
        await service.create(NotificationType.ANSWER, recipient_id=alice, sender_id=bob)
        await service.mark_read(first_vote.id, alice)

        # Act
        stats = await service.stats(alice)

        # Assert
        by_type = {s.type: (s.total, s.unread) for s in stats}
        assert by_type == {
            NotificationType.VOTE: (2, 1),
            NotificationType.ANSWER: (1, 1),
        }
        assert stats[0].type == NotificationType.VOTE

    @pytest.mark.asyncio
    async def test_delete_removes_notification(self, unit_env, alice, bob):
        service = await unit_env.get(NotificationService)
        notification = await service.create(
            NotificationType.VOTE, recipient_id=alice, sender_id=bob
        )

        await service.delete(notification.id, alice)

        with pytest.raises(NotFoundError):
            await service.get(notification.id, alice)

    @pytest.mark.asyncio
    async def test_clear_only_touches_caller(self, unit_env, alice, bob):
        service = await unit_env.get(NotificationService)
        await service.create(NotificationType.VOTE, recipient_id=alice, sender_id=bob)
        await service.create(NotificationType.VOTE, recipient_id=alice, sender_id=bob)
        await service.create(NotificationType.VOTE, recipient_id=bob, sender_id=alice)

        deleted = await service.clear(alice)

        assert deleted == 2
        assert (await service.list_for_recipient(bob)).total == 1
