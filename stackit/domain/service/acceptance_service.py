"""Answer acceptance domain service."""

from dataclasses import dataclass
from typing import Optional

import logfire

from stackit.domain.error import NotAuthorizedError, NotFoundError
from stackit.domain.model import Answer, Question
from stackit.domain.repository import AnswerRepository, QuestionRepository
from stackit.domain.value import AnswerId, QuestionId, UserId

from .base import Service


@dataclass
class AcceptanceOutcome:
    """Result of toggling acceptance on an answer."""

    question: Question
    answer: Answer
    is_accepted: bool
    # Answer that lost its accepted state to this one, if any
    previously_accepted_id: Optional[AnswerId] = None


class AcceptanceService(Service):
    """Domain service for accepting answers.

    A question has at most one accepted answer and its accepted answer
    reference always agrees with the answers' flags. Both are changed inside
    the question's critical section, so concurrent toggles on the same
    question are serialized.
    """

    def __init__(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> None:
        self.question_repository = question_repository
        self.answer_repository = answer_repository

    async def toggle_acceptance(
        self,
        answer_id: AnswerId,
        actor_id: UserId,
        question_id: Optional[QuestionId] = None,
    ) -> AcceptanceOutcome:
        """Accept an answer, or unaccept it if it is already accepted.

        Args:
            answer_id: Answer to toggle
            actor_id: Acting user; must be the question author
            question_id: Question the answer is expected to belong to

        Returns:
            Acceptance outcome

        Raises:
            NotFoundError: If the answer or question does not exist, or the
                answer does not belong to ``question_id``
            NotAuthorizedError: If the actor is not the question author
        """
        with logfire.span(
            "acceptance_service.toggle_acceptance",
            answer_id=str(answer_id),
            actor_id=str(actor_id),
        ):
            answer = await self.answer_repository.find_by_id(answer_id)
            if not answer or (question_id is not None and answer.question_id != question_id):
                logfire.warn("Answer not found for acceptance", answer_id=str(answer_id))
                raise NotFoundError("Answer", str(answer_id))

            async with self.question_repository.lock_for_update(answer.question_id) as question:
                if question is None:
                    raise NotFoundError("Question", str(answer.question_id))
                if question.author_id != actor_id:
                    logfire.warn(
                        "Acceptance denied",
                        question_id=str(question.id),
                        actor_id=str(actor_id),
                    )
                    raise NotAuthorizedError(
                        "accept answers on", "question", str(question.id), str(actor_id)
                    )

                previous = question.accepted_answer_id
                if previous == answer.id:
                    await self.answer_repository.set_accepted(question.id, None)
                    await self.question_repository.set_accepted_answer(question.id, None)
                    accepted = False
                    replaced = None
                else:
                    await self.answer_repository.set_accepted(question.id, answer.id)
                    await self.question_repository.set_accepted_answer(question.id, answer.id)
                    accepted = True
                    replaced = previous

            outcome = AcceptanceOutcome(
                question=question.model_copy(
                    update={"accepted_answer_id": answer.id if accepted else None}
                ),
                answer=answer.model_copy(update={"is_accepted": accepted}),
                is_accepted=accepted,
                previously_accepted_id=replaced,
            )
            logfire.info(
                "Answer accepted" if accepted else "Answer unaccepted",
                answer_id=str(answer.id),
                question_id=str(question.id),
                previously_accepted_id=str(replaced) if replaced else None,
            )
            return outcome
