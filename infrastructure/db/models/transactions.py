from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlalchemy import Column, String, Integer, Numeric, DateTime, ForeignKey, Text as TextColumn
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, relationship
from domain.entities import Instant, Text, Transaction
from infrastructure.db.models.base import Base

class TransactionModel(Base):
    __tablename__ = "bank_transaction"
    
    id: Mapped[int] = Column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = Column(UUID(as_uuid=False), ForeignKey("bank_user.id"), nullable=False, index=True)
    position: Mapped[int] = Column(Integer, nullable=False)
    type: Mapped[str] = Column(String, nullable=False)
    amount: Mapped[Decimal] = Column(Numeric(14, 2), nullable=False)
    # Legacy rows carry the date as text, newer ones as a native timestamp
    date_text: Mapped[Optional[str]] = Column(TextColumn, nullable=True)
    occurred_at: Mapped[Optional[datetime]] = Column(DateTime(timezone=True), nullable=True)
    
    # Relationship back to user (many-to-one)
    user_rel: Mapped["UserModel"] = relationship(
        "UserModel",
        back_populates="transactions_rel"
    )
    
    def to_domain(self) -> Transaction:
        """Convert database model to domain entity, keeping the stored date form."""
        if self.occurred_at is not None:
            date = Instant(self.occurred_at)
        else:
            # a row without any date fails normalization downstream
            date = Text(self.date_text or "")
        return Transaction(type=self.type, amount=self.amount, date=date)
    
    @classmethod
    def from_domain(cls, transaction: Transaction, user_id: str, position: int) -> "TransactionModel":
        """Convert domain Transaction entity to database model."""
        date = transaction.date
        return cls(
            user_id=user_id,
            position=position,
            type=transaction.type,
            amount=transaction.amount,
            date_text=date.value if isinstance(date, Text) else None,
            occurred_at=date.value if isinstance(date, Instant) else None,
        )
