"""Question use cases."""

from .create_question import (
    CreateQuestionRequest,
    CreateQuestionResponse,
    CreateQuestionUseCase,
)
from .get_question import (
    AnswerItem,
    GetQuestionRequest,
    GetQuestionResponse,
    GetQuestionUseCase,
)

__all__ = [
    "AnswerItem",
    "CreateQuestionRequest",
    "CreateQuestionResponse",
    "CreateQuestionUseCase",
    "GetQuestionRequest",
    "GetQuestionResponse",
    "GetQuestionUseCase",
]
