"""PostgreSQL implementation of Notification repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import and_, case, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from stackit.domain.model import Notification
from stackit.domain.repository import NotificationRepository
from stackit.domain.value import NotificationId, NotificationType, UserId
from stackit.persistence.mappers import notification_to_dict, row_to_notification
from stackit.persistence.tables import notifications_table

nt = notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository.

    Expired rows stay in the table until purged but are excluded from every
    query through the ``expires_at > now`` filter.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _live(self, recipient_id: UserId, now: datetime, unread_only: bool = False):
        clauses = [nt.c.recipient_id == recipient_id, nt.c.expires_at > now]
        if unread_only:
            clauses.append(nt.c.is_read.is_(False))
        return and_(*clauses)

    async def save(self, notification: Notification) -> Notification:
        """Insert a notification inside a savepoint.

        A failed insert rolls back only the savepoint, leaving the caller's
        transaction usable.
        """
        async with self.session.begin_nested():
            await self.session.execute(
                insert(nt).values(**notification_to_dict(notification))
            )
        return notification

    async def find_by_id(
        self, notification_id: NotificationId, now: datetime
    ) -> Optional[Notification]:
        stmt = select(nt).where(and_(nt.c.id == notification_id, nt.c.expires_at > now))
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_notification(dict(row)) if row else None

    async def find_by_recipient(
        self,
        recipient_id: UserId,
        now: datetime,
        limit: int,
        offset: int,
        unread_only: bool = False,
    ) -> list[Notification]:
        stmt = (
            select(nt)
            .where(self._live(recipient_id, now, unread_only))
            .order_by(nt.c.created_at.desc(), nt.c.id.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_notification(dict(row)) for row in result.mappings().all()]

    async def count_by_recipient(
        self, recipient_id: UserId, now: datetime, unread_only: bool = False
    ) -> int:
        stmt = select(func.count()).select_from(nt).where(
            self._live(recipient_id, now, unread_only)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def count_by_type(
        self, recipient_id: UserId, now: datetime
    ) -> dict[NotificationType, tuple[int, int]]:
        stmt = (
            select(
                nt.c.type,
                func.count().label("total"),
                func.sum(case((nt.c.is_read.is_(False), 1), else_=0)).label("unread"),
            )
            .where(self._live(recipient_id, now))
            .group_by(nt.c.type)
        )
        result = await self.session.execute(stmt)
        return {
            NotificationType(row.type): (row.total, int(row.unread or 0))
            for row in result.all()
        }

    async def set_read(self, notification_id: NotificationId, is_read: bool) -> None:
        await self.session.execute(
            update(nt).where(nt.c.id == notification_id).values(is_read=is_read)
        )
        await self.session.flush()

    async def mark_all_read(self, recipient_id: UserId, now: datetime) -> int:
        result = await self.session.execute(
            update(nt)
            .where(self._live(recipient_id, now, unread_only=True))
            .values(is_read=True)
        )
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def delete(self, notification_id: NotificationId) -> None:
        await self.session.execute(delete(nt).where(nt.c.id == notification_id))
        await self.session.flush()

    async def delete_by_recipient(self, recipient_id: UserId) -> int:
        result = await self.session.execute(
            delete(nt).where(nt.c.recipient_id == recipient_id)
        )
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def delete_expired(self, now: datetime) -> int:
        result = await self.session.execute(delete(nt).where(nt.c.expires_at <= now))
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
