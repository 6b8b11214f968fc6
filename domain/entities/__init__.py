# import
from .date_value import DateValue, Instant, Text
from .transaction import Transaction
from .user import User
from .month_group import MonthGroup

__all__ = ["DateValue", "Instant", "Text", "Transaction", "User", "MonthGroup"]
