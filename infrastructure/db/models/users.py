from decimal import Decimal
from typing import TYPE_CHECKING
from sqlalchemy import Column, String, Numeric
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, relationship
from domain.entities.user import User
from infrastructure.db.models.base import Base

if TYPE_CHECKING:
    from infrastructure.db.models.transactions import TransactionModel

class UserModel(Base):
    __tablename__ = "bank_user"
    
    id: Mapped[str] = Column(UUID(as_uuid=False), primary_key=True)
    first_name: Mapped[str] = Column(String, nullable=False)
    last_name: Mapped[str] = Column(String, nullable=False)
    email: Mapped[str] = Column(String, nullable=False)
    balance: Mapped[Decimal] = Column(Numeric(14, 2), nullable=False, default=0)
    
    # Stored order is the position column, never the date
    transactions_rel: Mapped[list["TransactionModel"]] = relationship(
        "TransactionModel",
        back_populates="user_rel",
        cascade="all, delete-orphan",
        order_by="TransactionModel.position",
        lazy="selectin"
    )
    
    def to_domain(self) -> User:
        """Convert database model to domain entity."""
        return User(
            id=str(self.id),
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            balance=self.balance,
            transactions=[t.to_domain() for t in (self.transactions_rel or [])],
        )
    
    @classmethod
    def from_domain(cls, user: User) -> "UserModel":
        """
        Convert domain User entity to database model.

        Transactions are attached as children in their list order.
        """
        from infrastructure.db.models.transactions import TransactionModel

        user_model = cls(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            balance=user.balance,
        )
        user_model.transactions_rel = [
            TransactionModel.from_domain(t, user_id=user.id, position=i)
            for i, t in enumerate(user.transactions)
        ]
        return user_model
