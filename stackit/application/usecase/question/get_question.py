"""Get question use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import AnswerService, QuestionService, VoteService
from stackit.domain.value import QuestionId, UserId, VotableType, VoteType

from ..base import BaseUseCase


class GetQuestionRequest(BaseModel):
    """Get question request."""

    question_id: str
    viewer_id: str | None = None  # Authenticated viewer, if any


class AnswerItem(BaseModel):
    """Answer as listed under its question."""

    answer_id: str
    author_id: str
    author_username: str
    content: str
    is_accepted: bool
    vote_score: int
    user_vote: VoteType | None
    created_at: datetime


class GetQuestionResponse(BaseModel):
    """Question with its answers and the viewer's votes."""

    question_id: str
    title: str
    description: str
    tags: list[str]
    author_id: str
    author_username: str
    accepted_answer_id: str | None
    is_solved: bool
    vote_score: int
    user_vote: VoteType | None
    answers: list[AnswerItem]
    created_at: datetime
    updated_at: datetime


class GetQuestionUseCase(BaseUseCase):
    """Use case for viewing a question."""

    def __init__(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        vote_service: VoteService,
    ) -> None:
        self.question_service = question_service
        self.answer_service = answer_service
        self.vote_service = vote_service

    async def execute(self, request: GetQuestionRequest) -> GetQuestionResponse:
        """Execute get question flow.

        Raises:
            NotFoundError: If the question does not exist
        """
        question = await self.question_service.get_question_by_id(
            QuestionId(UUID(request.question_id))
        )
        answers = await self.answer_service.get_answers_for_question(question.id)

        viewer = UserId(UUID(request.viewer_id)) if request.viewer_id else None
        question_tally = await self.vote_service.get_tally(
            VotableType.QUESTION, question.id
        )
        answer_tallies = await self.vote_service.get_tallies(
            VotableType.ANSWER, [a.id for a in answers]
        )

        return GetQuestionResponse(
            question_id=str(question.id),
            title=question.title,
            description=question.description,
            tags=question.tags,
            author_id=str(question.author_id),
            author_username=question.author_username,
            accepted_answer_id=(
                str(question.accepted_answer_id) if question.accepted_answer_id else None
            ),
            is_solved=question.is_solved,
            vote_score=question_tally.score,
            user_vote=question_tally.vote_of(viewer) if viewer else None,
            answers=[
                AnswerItem(
                    answer_id=str(answer.id),
                    author_id=str(answer.author_id),
                    author_username=answer.author_username,
                    content=answer.content,
                    is_accepted=answer.is_accepted,
                    vote_score=answer_tallies[answer.id].score,
                    user_vote=answer_tallies[answer.id].vote_of(viewer) if viewer else None,
                    created_at=answer.created_at,
                )
                for answer in answers
            ],
            created_at=question.created_at,
            updated_at=question.updated_at,
        )
