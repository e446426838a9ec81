"""Mappers for converting between database rows and domain models.

Since the domain models are immutable Pydantic models, rows are mapped by
hand instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from stackit.domain.model import Answer, Comment, Notification, Question, User, Vote
from stackit.domain.value import (
    AnswerId,
    CommentId,
    NotificationId,
    NotificationType,
    QuestionId,
    UserId,
    Username,
    VotableType,
    VoteDirection,
    VoteId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> UUID | None:
    return _uuid(value) if value is not None else None


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        email=row.get("email"),
        avatar_url=row.get("avatar_url"),
        reputation=row["reputation"],
        external_uid=row.get("external_uid"),
        is_active=row["is_active"],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    data = user.model_dump()
    data["username"] = user.username.root
    return data


def row_to_question(row: Dict[str, Any]) -> Question:
    """Convert database row to Question domain model."""
    return Question(
        id=QuestionId(_uuid(row["id"])),
        title=row["title"],
        description=row["description"],
        tags=list(row.get("tags") or []),
        author_id=UserId(_uuid(row["author_id"])),
        author_username=row["author_username"],
        accepted_answer_id=_optional_uuid(row.get("accepted_answer_id")),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    """Convert Question domain model to database dict.

    ``is_solved`` is derived and not stored.
    """
    return question.model_dump(exclude={"is_solved"})


def row_to_answer(row: Dict[str, Any]) -> Answer:
    """Convert database row to Answer domain model."""
    return Answer(
        id=AnswerId(_uuid(row["id"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        author_username=row["author_username"],
        content=row["content"],
        is_accepted=row["is_accepted"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def answer_to_dict(answer: Answer) -> Dict[str, Any]:
    return answer.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(_uuid(row["id"])),
        answer_id=AnswerId(_uuid(row["answer_id"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        author_username=row["author_username"],
        content=row["content"],
        mentions=[UserId(_uuid(m)) for m in row.get("mentions") or []],
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    return comment.model_dump()


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        votable_type=VotableType(row["votable_type"]),
        votable_id=_uuid(row["votable_id"]),
        direction=VoteDirection(row["vote_type"]),
        created_at=row["created_at"],
    )


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model."""
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        type=NotificationType(row["type"]),
        recipient_id=UserId(_uuid(row["recipient_id"])),
        sender_id=UserId(_uuid(row["sender_id"])),
        question_id=_optional_uuid(row.get("question_id")),
        answer_id=_optional_uuid(row.get("answer_id")),
        comment_id=_optional_uuid(row.get("comment_id")),
        content=row["content"],
        username=row.get("username"),
        metadata=row.get("metadata") or {},
        is_read=row["is_read"],
        created_at=row["created_at"],
        expires_at=row["expires_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict."""
    data = notification.model_dump()
    data["type"] = notification.type.value
    return data
