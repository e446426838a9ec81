"""Get answer use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import AnswerService, VoteService
from stackit.domain.value import AnswerId, VotableType

from ..base import BaseUseCase
from .create_answer import AnswerResponse


class GetAnswerRequest(BaseModel):
    """Get answer request."""

    answer_id: str


class GetAnswerUseCase(BaseUseCase):
    """Use case for fetching a single answer with its score."""

    def __init__(self, answer_service: AnswerService, vote_service: VoteService) -> None:
        self.answer_service = answer_service
        self.vote_service = vote_service

    async def execute(self, request: GetAnswerRequest) -> AnswerResponse:
        answer = await self.answer_service.get_answer_by_id(AnswerId(UUID(request.answer_id)))
        tally = await self.vote_service.get_tally(VotableType.ANSWER, answer.id)
        return AnswerResponse(
            answer_id=str(answer.id),
            question_id=str(answer.question_id),
            author_id=str(answer.author_id),
            author_username=answer.author_username,
            content=answer.content,
            is_accepted=answer.is_accepted,
            vote_score=tally.score,
            created_at=answer.created_at,
            updated_at=answer.updated_at,
        )
