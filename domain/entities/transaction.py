from dataclasses import dataclass
from decimal import Decimal

from .date_value import DateValue


@dataclass(frozen=True)
class Transaction:
    type: str
    amount: Decimal
    date: DateValue
