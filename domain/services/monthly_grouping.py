from datetime import date, datetime, timezone
from typing import Optional

from domain.entities import Instant, MonthGroup, Transaction
from .normalization import Normalization

# Month boundaries are always computed in UTC.
REFERENCE_TIMEZONE = timezone.utc


class MonthlyGrouping:
    @staticmethod
    def month_key(transaction: Transaction) -> tuple[int, int]:
        """Return the (year, month) of a normalized transaction in UTC."""
        if not isinstance(transaction.date, Instant):
            raise ValueError(f"transaction date has not been normalized: {transaction.date!r}")
        value = transaction.date.value
        if isinstance(value, datetime):
            if value.tzinfo is None:
                # naive timestamps from storage are UTC
                value = value.replace(tzinfo=REFERENCE_TIMEZONE)
            else:
                value = value.astimezone(REFERENCE_TIMEZONE)
        elif not isinstance(value, date):
            raise ValueError(f"unsupported instant value: {value!r}")
        return (value.year, value.month)

    @staticmethod
    def group_by_month(transactions: list[Transaction]) -> list[MonthGroup]:
        """
        Partition normalized transactions by calendar month.

        Transactions keep their input order inside each group; groups are
        ordered most recent first.
        """
        groups: dict[tuple[int, int], MonthGroup] = {}
        for t in transactions:
            year, month = MonthlyGrouping.month_key(t)
            group = groups.get((year, month))
            if group is None:
                group = MonthGroup(year=year, month=month)
                groups[(year, month)] = group
            group.transactions.append(t)
        return [groups[key] for key in sorted(groups, reverse=True)]

    @staticmethod
    def summarize(transactions: list[Transaction], user_id: Optional[str] = None) -> list[MonthGroup]:
        normalized = Normalization.normalize_transactions(transactions, user_id=user_id)
        return MonthlyGrouping.group_by_month(normalized)
