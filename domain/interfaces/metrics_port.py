from typing_extensions import Protocol


class MetricsPort(Protocol):
    """Protocol for metrics operations."""
    
    def increment_summary_total(self, outcome: str) -> None:
        """
        Increment the transactions_summary_total counter.
        
        Args:
            outcome: One of "ok", "invalid_id", "not_found", "malformed",
                "storage_error" or "error"
        """
        ...
    
    def increment_malformed_records(self) -> None:
        """Increment the malformed_records_total counter."""
        ...

    def observe_group_count(self, count: int) -> None:
        """
        Record how many month groups a summary returned.
        
        Args:
            count: Number of groups in the response
        """
        ...
