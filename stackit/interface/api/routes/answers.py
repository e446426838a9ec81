"""Answer routes: answers, answer votes, acceptance and comments."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, status
from pydantic import BaseModel, ConfigDict, Field

from stackit.application.usecase.answer import (
    AnswerResponse,
    CreateAnswerRequest,
    CreateAnswerUseCase,
    GetAnswerRequest,
    GetAnswerUseCase,
    ToggleAcceptanceRequest,
    ToggleAcceptanceResponse,
    ToggleAcceptanceUseCase,
)
from stackit.application.usecase.comment import (
    CommentResponse,
    CreateCommentRequest,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from stackit.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)
from stackit.domain.error import DomainError
from stackit.domain.service import CredentialService
from stackit.domain.value import VotableType
from stackit.interface.api.routes.questions import VoteAPIRequest
from stackit.interface.api.security import require_identity
from stackit.interface.error import to_http_exception

router = APIRouter(prefix="/answers", tags=["answers"], route_class=DishkaRoute)


class CreateAnswerAPIRequest(BaseModel):
    """API request for answering a question."""

    model_config = ConfigDict(populate_by_name=True)

    question_id: UUID = Field(alias="questionId")
    content: str = Field(min_length=10)


class AcceptAnswerAPIRequest(BaseModel):
    """Optional body for the accept toggle."""

    model_config = ConfigDict(populate_by_name=True)

    question_id: UUID | None = Field(default=None, alias="questionId")


class CreateCommentAPIRequest(BaseModel):
    """API request for commenting on an answer."""

    content: str = Field(min_length=1, max_length=2000)


@router.post("", response_model=AnswerResponse, status_code=status.HTTP_201_CREATED)
async def create_answer(
    request: CreateAnswerAPIRequest,
    create_answer_use_case: FromDishka[CreateAnswerUseCase],
    credential_service: FromDishka[CredentialService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> AnswerResponse:
    """Answer a question.

    Each user may answer a question once; a second answer is rejected with
    409. The question author is notified.
    """
    identity = await require_identity(credential_service, authorization, auth_token)

    try:
        return await create_answer_use_case.execute(
            CreateAnswerRequest(
                question_id=str(request.question_id),
                author_id=identity.user_id,
                content=request.content,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/{answer_id}", response_model=AnswerResponse)
async def get_answer(
    answer_id: UUID,
    get_answer_use_case: FromDishka[GetAnswerUseCase],
) -> AnswerResponse:
    try:
        return await get_answer_use_case.execute(
            GetAnswerRequest(answer_id=str(answer_id))
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.post("/{answer_id}/vote", response_model=CastVoteResponse)
async def vote_on_answer(
    answer_id: UUID,
    request: VoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    credential_service: FromDishka[CredentialService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Vote on an answer."""
    identity = await require_identity(credential_service, authorization, auth_token)

    try:
        return await cast_vote_use_case.execute(
            CastVoteRequest(
                votable_type=VotableType.ANSWER,
                votable_id=str(answer_id),
                voter_id=identity.user_id,
                vote_type=request.vote_type,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.put("/{answer_id}/accept", response_model=ToggleAcceptanceResponse)
async def toggle_acceptance(
    answer_id: UUID,
    toggle_acceptance_use_case: FromDishka[ToggleAcceptanceUseCase],
    credential_service: FromDishka[CredentialService],
    request: AcceptAnswerAPIRequest | None = None,
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> ToggleAcceptanceResponse:
    """Accept an answer, or unaccept it if it is already accepted.

    Only the question author may do this. Accepting an answer replaces any
    previously accepted answer on the same question.
    """
    identity = await require_identity(credential_service, authorization, auth_token)

    question_id = request.question_id if request else None
    try:
        return await toggle_acceptance_use_case.execute(
            ToggleAcceptanceRequest(
                answer_id=str(answer_id),
                actor_id=identity.user_id,
                question_id=str(question_id) if question_id else None,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.post(
    "/{answer_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    answer_id: UUID,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    credential_service: FromDishka[CredentialService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> CommentResponse:
    """Comment on an answer.

    ``@username`` tokens in the content notify the named users.

    Example:
        POST /answers/{answer_id}/comments

        Request:
        {
            "content": "@alice this also works on 3.12"
        }
    """
    identity = await require_identity(credential_service, authorization, auth_token)

    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                answer_id=str(answer_id),
                author_id=identity.user_id,
                content=request.content,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/{answer_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    answer_id: UUID,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    try:
        return await get_comments_use_case.execute(
            GetCommentsRequest(answer_id=str(answer_id))
        )
    except DomainError as e:
        raise to_http_exception(e)
