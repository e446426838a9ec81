"""In-memory user repository for testing."""

from typing import Optional, Sequence

from stackit.domain.model.user import User
from stackit.domain.repository.user import UserRepository
from stackit.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return self._users.get(user_id)

    async def find_by_username(self, username: str) -> Optional[User]:
        for user in self._users.values():
            if user.username.root == username:
                return user
        return None

    async def find_by_usernames(self, usernames: Sequence[str]) -> list[User]:
        wanted = set(usernames)
        return [u for u in self._users.values() if u.username.root in wanted]

    async def find_by_external_uid(self, external_uid: str) -> Optional[User]:
        for user in self._users.values():
            if user.external_uid == external_uid:
                return user
        return None

    async def save(self, user: User) -> User:
        self._users[user.id] = user
        return user
