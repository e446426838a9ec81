"""Test configuration and shared builders."""

from uuid import uuid4

from stackit.domain.model import Answer, Question, User
from stackit.domain.value import AnswerId, QuestionId, UserId, Username


def make_user(username: str, **overrides) -> User:
    """Build a user with a fresh id."""
    return User(id=UserId(uuid4()), username=Username(username), **overrides)


def make_question(author: User, **overrides) -> Question:
    """Build a question by ``author`` with valid default text."""
    fields = {
        "title": "How do I cancel an asyncio task?",
        "description": "The task keeps running after calling cancel() on it.",
        "tags": ["python"],
    }
    fields.update(overrides)
    return Question(
        id=QuestionId(uuid4()),
        author_id=author.id,
        author_username=author.username.root,
        **fields,
    )


def make_answer(question: Question, author: User, **overrides) -> Answer:
    """Build an answer by ``author`` to ``question``."""
    fields = {"content": "Await the task and catch CancelledError."}
    fields.update(overrides)
    return Answer(
        id=AnswerId(uuid4()),
        question_id=question.id,
        author_id=author.id,
        author_username=author.username.root,
        **fields,
    )
