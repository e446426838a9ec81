"""Toggle answer acceptance use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import AcceptanceService, NotificationDispatcher, UserService
from stackit.domain.value import AnswerId, QuestionId, UserId

from ..base import BaseUseCase


class ToggleAcceptanceRequest(BaseModel):
    """Toggle acceptance request."""

    answer_id: str
    actor_id: str  # User ID from authenticated user
    question_id: str | None = None  # Expected owning question, if known


class ToggleAcceptanceResponse(BaseModel):
    """Toggle acceptance response."""

    answer_id: str
    question_id: str
    is_accepted: bool
    is_solved: bool
    previously_accepted_id: str | None


class ToggleAcceptanceUseCase(BaseUseCase):
    """Use case for accepting or unaccepting an answer."""

    def __init__(
        self,
        acceptance_service: AcceptanceService,
        user_service: UserService,
        dispatcher: NotificationDispatcher,
    ) -> None:
        self.acceptance_service = acceptance_service
        self.user_service = user_service
        self.dispatcher = dispatcher

    async def execute(self, request: ToggleAcceptanceRequest) -> ToggleAcceptanceResponse:
        """Execute acceptance toggle.

        Raises:
            NotFoundError: If the answer does not exist or belongs to another question
            NotAuthorizedError: If the actor is not the question author
        """
        actor = await self.user_service.get_by_id(UserId(UUID(request.actor_id)))
        outcome = await self.acceptance_service.toggle_acceptance(
            AnswerId(UUID(request.answer_id)),
            actor.id,
            QuestionId(UUID(request.question_id)) if request.question_id else None,
        )

        await self.dispatcher.acceptance_changed(outcome, actor)

        return ToggleAcceptanceResponse(
            answer_id=str(outcome.answer.id),
            question_id=str(outcome.question.id),
            is_accepted=outcome.is_accepted,
            is_solved=outcome.question.is_solved,
            previously_accepted_id=(
                str(outcome.previously_accepted_id)
                if outcome.previously_accepted_id
                else None
            ),
        )
