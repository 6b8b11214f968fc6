from datetime import datetime
from decimal import Decimal
from typing import Union
from pydantic import BaseModel, ConfigDict, Field

from domain.entities import MonthGroup, Transaction, User


class TransactionResponse(BaseModel):
    type: str
    amount: Decimal
    # raw (ungrouped) listings keep text dates exactly as stored
    date: Union[datetime, str]

    model_config = ConfigDict(
        json_encoders={
            datetime: lambda v: v.isoformat(),
            Decimal: float,
        }
    )

    @classmethod
    def from_domain(cls, transaction: Transaction) -> "TransactionResponse":
        return cls(type=transaction.type, amount=transaction.amount, date=transaction.date.value)


class MonthGroupResponse(BaseModel):
    year: int
    month: int
    transactions: list[TransactionResponse]

    @classmethod
    def from_domain(cls, group: MonthGroup) -> "MonthGroupResponse":
        return cls(
            year=group.year,
            month=group.month,
            transactions=[TransactionResponse.from_domain(t) for t in group.transactions],
        )


class UserTransactionsResponse(BaseModel):
    user_id: str = Field(alias="userId")
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    email: str
    balance: Decimal
    transactions: list[TransactionResponse]

    model_config = ConfigDict(
        populate_by_name=True,
        json_encoders={Decimal: float}
    )

    @classmethod
    def from_domain(cls, user: User) -> "UserTransactionsResponse":
        return cls(
            user_id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            balance=user.balance,
            transactions=[TransactionResponse.from_domain(t) for t in user.transactions],
        )
