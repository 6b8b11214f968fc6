"""
Metrics adapter that implements MetricsPort protocol.

This adapter wraps the Prometheus metrics to provide a clean interface
for the application layer.
"""
from domain.interfaces import MetricsPort
from infrastructure.metrics.metrics import (
    transactions_summary_total,
    malformed_records_total,
    transactions_summary_groups,
)

class MetricsAdapter(MetricsPort):
    """Adapter that implements MetricsPort on top of prometheus_client."""

    def increment_summary_total(self, outcome: str) -> None:
        transactions_summary_total.labels(outcome=outcome).inc()

    def increment_malformed_records(self) -> None:
        malformed_records_total.inc()

    def observe_group_count(self, count: int) -> None:
        """
        Record the number of month groups returned.
        
        Args:
            count: Groups in the response (0 for users without transactions)
        """
        transactions_summary_groups.observe(count)
