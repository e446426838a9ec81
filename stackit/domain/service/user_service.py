"""User domain service."""

from typing import Iterable

import logfire

from stackit.domain.error import NotFoundError
from stackit.domain.model import User
from stackit.domain.repository import UserRepository
from stackit.domain.value import UserId

from .base import Service


class UserService(Service):
    """Domain service for user lookups."""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_by_username(self, username: str) -> User | None:
        with logfire.span("user_service.get_by_username", username=username):
            return await self.user_repository.find_by_username(username)

    async def resolve_usernames(self, usernames: Iterable[str]) -> list[User]:
        """Resolve usernames to existing, active users.

        Unknown usernames are silently dropped. The result keeps the order of
        ``usernames`` and holds each user once.

        Args:
            usernames: Candidate usernames (e.g. mention tokens)

        Returns:
            Matching users
        """
        wanted = list(dict.fromkeys(usernames))
        if not wanted:
            return []

        with logfire.span("user_service.resolve_usernames", count=len(wanted)):
            found = await self.user_repository.find_by_usernames(wanted)
            by_name = {u.username.root: u for u in found if u.is_active}
            users = [by_name[name] for name in wanted if name in by_name]
            logfire.info(
                "Usernames resolved", requested=len(wanted), resolved=len(users)
            )
            return users
