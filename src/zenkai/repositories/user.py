"""Repository for User entity."""

from src.zenkai.models import User
from src.zenkai.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User entity."""

    model = User

    async def add_if_missing(self, user_id: str) -> bool:
        """Stage the user row for a caller id unless it is already visible.

        Returns True if a row was added. Another transaction may still insert
        the same id first; the unique key on ``users.id`` rejects the loser
        at commit.
        """
        if await self.get_by_id(user_id) is not None:
            return False
        self.add(User(id=user_id, external_id=user_id))
        return True
