import time
from typing import Optional
from domain.entities import MonthGroup
from domain.exceptions import (
    InvalidIdentifierError,
    MalformedRecordError,
    ProcessingError,
    StorageError,
    UserNotFoundError,
)
from domain.interfaces import UserRepository, MetricsPort, LoggingPort
from domain.services import MonthlyGrouping, parse_user_id


class _NoOpLogger:
    def debug(self, event: str, **kwargs): pass
    def info(self, event: str, **kwargs): pass
    def warning(self, event: str, **kwargs): pass
    def error(self, event: str, exc_info: bool = False, **kwargs): pass


class MonthlyTransactionsService:
    def __init__(
        self,
        user_repo: UserRepository,
        metrics_port: Optional[MetricsPort] = None,
        logging_port: Optional[LoggingPort] = None
    ):
        """
        Initialize the monthly transactions service.
        
        Args:
            user_repo: Repository for reading user transactions (required)
            metrics_port: Metrics port for emitting metrics (optional)
            logging_port: Logging port for structured logging (optional)
        """
        self.user_repo = user_repo
        self.metrics_port = metrics_port
        self.logging_port = logging_port

    def _record_outcome(self, outcome: str) -> None:
        if self.metrics_port:
            self.metrics_port.increment_summary_total(outcome=outcome)

    async def execute(self, user_id: str, request_id: Optional[str] = None) -> list[MonthGroup]:
        """
        Build the monthly summary of a user's transactions.

        Args:
            user_id: Raw user reference supplied by the caller
            request_id: ID of the request for tracing (optional)

        Returns:
            Month groups, most recent first. Empty when the user has no transactions.

        Raises:
            InvalidIdentifierError: user_id is not well-formed (storage is not queried)
            UserNotFoundError: no user matches user_id
            StorageError: the repository failed
            MalformedRecordError: a stored transaction date cannot be parsed
            ProcessingError: any other failure while normalizing or grouping
        """
        start_time = time.time()

        if self.logging_port:
            context = {"user_id": user_id, "step": "monthly_summary"}
            # without an explicit id the request_id bound by the middleware is merged in
            if request_id:
                context["request_id"] = request_id
            log = self.logging_port.bind(**context)
        else:
            log = _NoOpLogger()

        log.info("monthly_summary_started")

        try:
            canonical_id = parse_user_id(user_id)
        except InvalidIdentifierError:
            log.warning("invalid_user_id")
            self._record_outcome("invalid_id")
            raise

        # Step 1: fetch
        fetch_start = time.time()
        try:
            transactions = await self.user_repo.get_user_transactions(canonical_id)
        except StorageError as e:
            log.error("transactions_fetch_failed", step="storage_fetch", error=str(e), exc_info=True)
            self._record_outcome("storage_error")
            raise
        fetch_duration = (time.time() - fetch_start) * 1000

        if transactions is None:
            log.info("user_not_found", step="storage_fetch", duration_ms=round(fetch_duration, 2))
            self._record_outcome("not_found")
            raise UserNotFoundError(canonical_id)

        log.info(
            "transactions_fetched",
            step="storage_fetch",
            duration_ms=round(fetch_duration, 2),
            transaction_count=len(transactions)
        )

        # Step 2: normalize and group
        try:
            groups = MonthlyGrouping.summarize(transactions, user_id=canonical_id)
        except MalformedRecordError as e:
            log.warning(
                "malformed_transaction",
                step="normalization",
                index=e.index,
                raw_date=str(e.raw_date),
                reason=e.reason
            )
            if self.metrics_port:
                self.metrics_port.increment_malformed_records()
            self._record_outcome("malformed")
            raise
        except Exception as e:
            total_duration = (time.time() - start_time) * 1000
            log.error(
                "monthly_summary_failed",
                step="grouping",
                duration_ms=round(total_duration, 2),
                error=str(e),
                exc_info=True
            )
            self._record_outcome("error")
            raise ProcessingError(f"Failed to summarize transactions: {e}", cause=e) from e

        self._record_outcome("ok")
        if self.metrics_port:
            self.metrics_port.observe_group_count(len(groups))

        total_duration = (time.time() - start_time) * 1000
        log.info(
            "monthly_summary_completed",
            step="monthly_summary",
            duration_ms=round(total_duration, 2),
            group_count=len(groups)
        )
        return groups
