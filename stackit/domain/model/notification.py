"""Notification entity.

Notifications are created by the event dispatcher only, never directly by
users. They belong to their recipient and expire a fixed time after
creation; expired notifications are invisible to every read.
"""

from datetime import datetime, timedelta
from typing import Any, Optional

from pydantic import Field, model_validator

from stackit.domain.model.common import DomainModel, utcnow
from stackit.domain.value import (
    AnswerId,
    CommentId,
    NotificationId,
    NotificationType,
    QuestionId,
    UserId,
)

DEFAULT_TTL = timedelta(days=30)


class Notification(DomainModel):
    """Per-recipient notification record."""

    id: NotificationId
    type: NotificationType
    recipient_id: UserId
    sender_id: UserId
    question_id: Optional[QuestionId] = None
    answer_id: Optional[AnswerId] = None
    comment_id: Optional[CommentId] = None
    content: str = Field(min_length=1, max_length=500)
    username: Optional[str] = None  # Sender's username at creation time
    metadata: dict[str, Any] = Field(default_factory=dict)
    is_read: bool = False
    created_at: datetime = Field(default_factory=utcnow)
    expires_at: Optional[datetime] = None

    @model_validator(mode="before")
    @classmethod
    def fill_defaults(cls, data: Any) -> Any:
        """Fill content from the type template and expiry from creation time."""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if not data.get("content") and data.get("type") is not None:
            data["content"] = NotificationType(data["type"]).default_content
        if data.get("expires_at") is None:
            created_at = data.get("created_at") or utcnow()
            data["created_at"] = created_at
            data["expires_at"] = created_at + DEFAULT_TTL
        return data

    def is_expired(self, now: datetime) -> bool:
        """Whether the notification is past its expiry at ``now``."""
        assert self.expires_at is not None
        return self.expires_at <= now
