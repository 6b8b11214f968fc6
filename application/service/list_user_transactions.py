from typing import Optional
from domain.entities import User
from domain.interfaces import UserRepository, LoggingPort


class ListUserTransactionsService:
    def __init__(self, user_repo: UserRepository, logging_port: Optional[LoggingPort] = None):
        self.user_repo = user_repo
        self.logging_port = logging_port

    async def execute(self, request_id: Optional[str] = None) -> list[User]:
        """Return every user with their raw, ungrouped transactions."""
        users = await self.user_repo.list_users()
        if self.logging_port:
            context = {"request_id": request_id} if request_id else {}
            self.logging_port.bind(**context).info(
                "users_listed", user_count=len(users)
            )
        return users
