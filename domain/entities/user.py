from dataclasses import dataclass, field
from decimal import Decimal

from .transaction import Transaction


@dataclass
class User:
    id: str
    first_name: str
    last_name: str
    email: str
    balance: Decimal
    transactions: list[Transaction] = field(default_factory=list)
