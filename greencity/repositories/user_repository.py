"""사용자 레포지토리.

User Repository — existence checks for rows that reference a user.
"""

from greencity.models.user import User
from greencity.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):

    def __init__(self) -> None:
        super().__init__(User)


user_repository: UserRepository = UserRepository()
