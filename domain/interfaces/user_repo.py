from typing_extensions import Protocol
from typing import Optional
from domain.entities import Transaction, User


class UserRepository(Protocol):
    async def get_user_transactions(self, user_id: str) -> Optional[list[Transaction]]: ...
    async def list_users(self) -> list[User]: ...
