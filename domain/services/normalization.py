from datetime import datetime, timezone
from typing import Optional

from domain.entities import Instant, Text, Transaction
from domain.exceptions import MalformedRecordError


class Normalization:
    @staticmethod
    def parse_iso_datetime(value: str) -> datetime:
        """
        Parse an ISO-8601 date or date-time into an aware UTC datetime.

        Accepts the ISO-8601 forms of Python 3.11+ fromisoformat (extended
        or basic format, any fraction length, Z or numeric offsets). Values
        without an offset are taken as UTC. Raises ValueError when the
        text is not a calendar date/time.
        """
        text = value.strip()
        if not text:
            raise ValueError("empty date")
        parsed = datetime.fromisoformat(text)
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone(timezone.utc)

    @staticmethod
    def normalize_record(
        transaction: Transaction,
        index: Optional[int] = None,
        user_id: Optional[str] = None,
    ) -> Transaction:
        """
        Resolve the transaction's date to an Instant.

        Transactions already holding an Instant are returned as-is, so
        normalizing twice yields the same object.
        """
        date = transaction.date
        if isinstance(date, Instant):
            return transaction
        if isinstance(date, Text):
            try:
                parsed = Normalization.parse_iso_datetime(date.value)
            except (TypeError, ValueError) as e:
                raise MalformedRecordError(
                    transaction=transaction,
                    raw_date=date.value,
                    index=index,
                    user_id=user_id,
                    reason=f"unparseable date: {e}",
                ) from e
            return Transaction(type=transaction.type, amount=transaction.amount, date=Instant(parsed))
        raise MalformedRecordError(
            transaction=transaction,
            raw_date=date,
            index=index,
            user_id=user_id,
            reason=f"unsupported date type {type(date).__name__}",
        )

    @staticmethod
    def normalize_transactions(transactions: list[Transaction], user_id: Optional[str] = None) -> list[Transaction]:
        # First malformed record aborts the whole sequence
        return [
            Normalization.normalize_record(t, index=i, user_id=user_id)
            for i, t in enumerate(transactions)
        ]
