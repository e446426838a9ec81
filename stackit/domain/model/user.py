"""User aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from stackit.domain.model.common import DomainModel, utcnow
from stackit.domain.value import UserId, Username


class User(DomainModel):
    """Community member.

    ``external_uid`` links the account to a subject issued by the external
    identity provider, when the user signs in through one.
    """

    id: UserId
    username: Username
    email: Optional[str] = None
    avatar_url: Optional[str] = None
    reputation: int = Field(default=0, ge=0)
    external_uid: Optional[str] = None
    is_active: bool = True
    created_at: datetime = Field(default_factory=utcnow)
