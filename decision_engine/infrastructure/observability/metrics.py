"""Prometheus metrics for monitoring approval rates and approved amounts"""

from typing import Optional
from prometheus_client import Counter, Histogram

# Decision metrics
decision_counter = Counter(
    "loan_decision_total",
    "Total loan decisions made",
    ["outcome"],  # approved | invalid | declined | error
)

approved_amount_histogram = Histogram(
    "loan_approved_amount",
    "Approved loan amounts in EUR",
    buckets=[2000, 3000, 4000, 5000, 6000, 8000, 10000],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_decision(outcome: str, approved_amount: Optional[int] = None) -> None:
    """Record decision metrics for monitoring approval rates and amount distribution"""
    decision_counter.labels(outcome=outcome).inc()

    if approved_amount is not None:
        approved_amount_histogram.observe(approved_amount)
