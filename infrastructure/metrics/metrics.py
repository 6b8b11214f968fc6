# infrastructure/metrics/metrics.py
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

transactions_summary_total = Counter(
    "transactions_summary_total",
    "Monthly transaction summaries served",
    ["outcome"]  # ok|invalid_id|not_found|malformed|storage_error|error
)

malformed_records_total = Counter(
    "malformed_records_total",
    "Stored transactions whose date could not be parsed"
)

storage_fetch_failures_total = Counter(
    "storage_fetch_failures_total",
    "Storage read failures"
)

transactions_summary_groups = Histogram(
    "transactions_summary_groups",
    "Month groups per summary response",
    buckets=[0, 1, 3, 6, 12, 24, 60]
)

def metrics_endpoint():
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
