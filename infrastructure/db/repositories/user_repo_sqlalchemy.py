from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import selectinload
from domain.entities import Transaction, User
from domain.exceptions import StorageError
from domain.interfaces import UserRepository
from infrastructure.db.models import UserModel
from infrastructure.metrics.metrics import storage_fetch_failures_total


class UserRepoSqlalchemy(UserRepository):
    """SQLAlchemy implementation of UserRepository."""
    
    def __init__(self, db: AsyncSession):
        self.db = db
    
    async def get_user_transactions(self, user_id: str) -> Optional[list[Transaction]]:
        """
        Get a user's transactions in stored order.

        Returns None when no user has this id; an empty list when the
        user exists but has no transactions.
        """
        stmt = (
            select(UserModel)
            .where(UserModel.id == user_id)
            .options(selectinload(UserModel.transactions_rel))
        )
        try:
            result = await self.db.execute(stmt)
            user_model = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            storage_fetch_failures_total.inc()
            raise StorageError(f"Failed to read transactions for user {user_id}: {e}") from e
        if user_model is None:
            return None
        return user_model.to_domain().transactions
    
    async def list_users(self) -> list[User]:
        """Get every user with their raw transactions."""
        stmt = (
            select(UserModel)
            .order_by(UserModel.last_name, UserModel.first_name, UserModel.id)
            .options(selectinload(UserModel.transactions_rel))
        )
        try:
            result = await self.db.execute(stmt)
            user_models = result.scalars().all()
        except SQLAlchemyError as e:
            storage_fetch_failures_total.inc()
            raise StorageError(f"Failed to list users: {e}") from e
        return [m.to_domain() for m in user_models]

    async def save_user(self, user: User) -> User:
        """Insert a user with its transactions (used by the seed script)."""
        self.db.add(UserModel.from_domain(user))
        await self.db.commit()
        return user
