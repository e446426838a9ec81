"""Domain event dispatcher for notifications.

Turns completed domain actions into notification records and real-time
pushes. Delivery is best effort: a failed write or push is logged and never
propagates to the action that triggered it.
"""

from typing import Any, Optional

import logfire

from stackit.domain.model import Answer, Comment, Notification, Question, User
from stackit.domain.value import NotificationType, UserId, VotableType

from .acceptance_service import AcceptanceOutcome
from .base import Service
from .notification_service import NotificationService
from .vote_service import VoteOutcome

NOTIFICATION_EVENT = "notification"


class NotificationPublisher:
    """Real-time channel to connected users."""

    async def publish(self, user_id: UserId, event: str, data: dict[str, Any]) -> int:
        """Push an event to every open connection of a user.

        Must not wait on slow or absent receivers.

        Args:
            user_id: Recipient
            event: Event name
            data: JSON-serializable event payload

        Returns:
            Number of connections the event was queued for
        """
        raise NotImplementedError


def push_payload(notification: Notification) -> dict[str, Any]:
    """Wire payload of a notification event.

    Optional references are omitted rather than sent as null.
    """
    payload: dict[str, Any] = {
        "notificationId": str(notification.id),
        "type": notification.type.value,
        "content": notification.content,
        "sender": str(notification.sender_id),
        "username": notification.username,
        "isRead": notification.is_read,
        "createdAt": notification.created_at.isoformat(),
    }
    if notification.question_id:
        payload["questionId"] = str(notification.question_id)
    if notification.answer_id:
        payload["answerId"] = str(notification.answer_id)
    if notification.comment_id:
        payload["commentId"] = str(notification.comment_id)
    if notification.metadata:
        payload["metadata"] = notification.metadata
    return payload


class NotificationDispatcher(Service):
    """Maps domain events to notifications for the affected users.

    Rules:
        - Nobody is notified of their own action.
        - A user gets at most one notification per event.
        - A notification is persisted before it is pushed. In a request the
          publisher is deferred, so the push waits for the commit as well.
    """

    def __init__(
        self,
        notification_service: NotificationService,
        publisher: NotificationPublisher,
    ) -> None:
        self.notification_service = notification_service
        self.publisher = publisher

    async def answer_posted(
        self, question: Question, answer: Answer, author: User
    ) -> list[Notification]:
        """Notify the question author of a new answer."""
        with logfire.span("notification_dispatcher.answer_posted", answer_id=str(answer.id)):
            notification = await self._deliver(
                NotificationType.ANSWER,
                recipient_id=question.author_id,
                sender=author,
                question_id=question.id,
                answer_id=answer.id,
                content=f"{author.username.root} answered your question",
            )
            return [notification] if notification else []

    async def vote_cast(self, outcome: VoteOutcome, voter: User) -> list[Notification]:
        """Notify the item author when the voter moves into an up or down vote.

        Removing a vote, or repeating the vote already held, is silent.
        """
        with logfire.span(
            "notification_dispatcher.vote_cast", votable_id=str(outcome.votable_id)
        ):
            if not outcome.is_new_vote:
                return []
            assert outcome.user_vote is not None

            item = outcome.votable_type.value
            notification = await self._deliver(
                NotificationType.VOTE,
                recipient_id=outcome.author_id,
                sender=voter,
                question_id=outcome.question_id,
                answer_id=(
                    outcome.votable_id
                    if outcome.votable_type == VotableType.ANSWER
                    else None
                ),
                content=f"{voter.username.root} {outcome.user_vote.value}d your {item}",
                metadata={"voteType": outcome.user_vote.value, "itemType": item},
            )
            return [notification] if notification else []

    async def acceptance_changed(
        self, outcome: AcceptanceOutcome, actor: User
    ) -> list[Notification]:
        """Notify the answer author when their answer becomes accepted."""
        with logfire.span(
            "notification_dispatcher.acceptance_changed", answer_id=str(outcome.answer.id)
        ):
            if not outcome.is_accepted:
                return []
            notification = await self._deliver(
                NotificationType.ACCEPT,
                recipient_id=outcome.answer.author_id,
                sender=actor,
                question_id=outcome.question.id,
                answer_id=outcome.answer.id,
                content="Your answer was accepted as the best answer",
            )
            return [notification] if notification else []

    async def comment_posted(
        self,
        answer: Answer,
        comment: Comment,
        author: User,
        mentioned: list[User],
    ) -> list[Notification]:
        """Notify mentioned users and the answer author of a new comment.

        A mentioned answer author receives only the mention.
        """
        with logfire.span(
            "notification_dispatcher.comment_posted", comment_id=str(comment.id)
        ):
            delivered: list[Notification] = []
            notified: set[UserId] = set()

            for user in mentioned:
                if user.id in notified:
                    continue
                notified.add(user.id)
                notification = await self._deliver(
                    NotificationType.MENTION,
                    recipient_id=user.id,
                    sender=author,
                    question_id=answer.question_id,
                    answer_id=answer.id,
                    comment_id=comment.id,
                    content=f"{author.username.root} mentioned you in a comment",
                )
                if notification:
                    delivered.append(notification)

            if answer.author_id not in notified:
                notification = await self._deliver(
                    NotificationType.COMMENT,
                    recipient_id=answer.author_id,
                    sender=author,
                    question_id=answer.question_id,
                    answer_id=answer.id,
                    comment_id=comment.id,
                    content=f"{author.username.root} commented on your answer",
                )
                if notification:
                    delivered.append(notification)

            return delivered

    async def _deliver(
        self,
        type: NotificationType,
        recipient_id: UserId,
        sender: User,
        content: str,
        metadata: Optional[dict[str, Any]] = None,
        **refs: Any,
    ) -> Optional[Notification]:
        """Persist then push one notification.

        Returns:
            The stored notification, or None if suppressed or not stored
        """
        if recipient_id == sender.id:
            return None

        try:
            notification = await self.notification_service.create(
                type,
                recipient_id=recipient_id,
                sender_id=sender.id,
                content=content,
                username=sender.username.root,
                metadata=metadata,
                **refs,
            )
        except Exception as e:
            logfire.error(
                "Notification write failed",
                type=type.value,
                recipient_id=str(recipient_id),
                error=str(e),
            )
            return None

        try:
            await self.publisher.publish(
                recipient_id, NOTIFICATION_EVENT, push_payload(notification)
            )
        except Exception as e:
            logfire.warn(
                "Real-time push failed",
                notification_id=str(notification.id),
                recipient_id=str(recipient_id),
                error=str(e),
            )
        return notification
