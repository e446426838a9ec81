"""Answer use cases."""

from .create_answer import AnswerResponse, CreateAnswerRequest, CreateAnswerUseCase
from .get_answer import GetAnswerRequest, GetAnswerUseCase
from .toggle_acceptance import (
    ToggleAcceptanceRequest,
    ToggleAcceptanceResponse,
    ToggleAcceptanceUseCase,
)

__all__ = [
    "AnswerResponse",
    "CreateAnswerRequest",
    "CreateAnswerUseCase",
    "GetAnswerRequest",
    "GetAnswerUseCase",
    "ToggleAcceptanceRequest",
    "ToggleAcceptanceResponse",
    "ToggleAcceptanceUseCase",
]
