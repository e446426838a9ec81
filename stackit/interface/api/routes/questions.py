"""Question routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, status
from pydantic import BaseModel, ConfigDict, Field

from stackit.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionResponse,
    CreateQuestionUseCase,
    GetQuestionRequest,
    GetQuestionResponse,
    GetQuestionUseCase,
)
from stackit.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)
from stackit.domain.error import DomainError
from stackit.domain.service import CredentialService
from stackit.domain.value import VotableType
from stackit.interface.api.security import optional_identity, require_identity
from stackit.interface.error import to_http_exception

router = APIRouter(prefix="/questions", tags=["questions"], route_class=DishkaRoute)


class CreateQuestionAPIRequest(BaseModel):
    """API request for creating a question."""

    title: str = Field(min_length=10, max_length=200)
    description: str = Field(min_length=20)
    tags: list[str] = Field(default_factory=list, max_length=5)


class VoteAPIRequest(BaseModel):
    """API request for casting a vote.

    ``voteType`` is ``upvote``, ``downvote`` or ``remove``. Repeating the vote
    already held has no effect; ``remove`` clears it.
    """

    model_config = ConfigDict(populate_by_name=True)

    vote_type: str = Field(alias="voteType")


@router.post(
    "", response_model=CreateQuestionResponse, status_code=status.HTTP_201_CREATED
)
async def create_question(
    request: CreateQuestionAPIRequest,
    create_question_use_case: FromDishka[CreateQuestionUseCase],
    credential_service: FromDishka[CredentialService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> CreateQuestionResponse:
    """Ask a new question.

    Example:
        POST /questions
        Authorization: Bearer ...

        Request:
        {
            "title": "How do I cancel an asyncio task cleanly?",
            "description": "The task keeps running after I call cancel() ...",
            "tags": ["python", "asyncio"]
        }
    """
    identity = await require_identity(credential_service, authorization, auth_token)

    try:
        return await create_question_use_case.execute(
            CreateQuestionRequest(
                author_id=identity.user_id,
                title=request.title,
                description=request.description,
                tags=request.tags,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/{question_id}", response_model=GetQuestionResponse)
async def get_question(
    question_id: UUID,
    get_question_use_case: FromDishka[GetQuestionUseCase],
    credential_service: FromDishka[CredentialService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> GetQuestionResponse:
    """Get a question with its answers.

    Anonymous callers are allowed; authenticated callers also see their own
    vote on the question and on each answer.
    """
    identity = await optional_identity(credential_service, authorization, auth_token)

    try:
        return await get_question_use_case.execute(
            GetQuestionRequest(
                question_id=str(question_id),
                viewer_id=identity.user_id if identity else None,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.post("/{question_id}/vote", response_model=CastVoteResponse)
async def vote_on_question(
    question_id: UUID,
    request: VoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    credential_service: FromDishka[CredentialService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Vote on a question."""
    identity = await require_identity(credential_service, authorization, auth_token)

    try:
        return await cast_vote_use_case.execute(
            CastVoteRequest(
                votable_type=VotableType.QUESTION,
                votable_id=str(question_id),
                voter_id=identity.user_id,
                vote_type=request.vote_type,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
