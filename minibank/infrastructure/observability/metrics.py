"""Prometheus metrics for monitoring transfers, account churn, and request latency"""

from prometheus_client import Counter, Histogram, Gauge

# Transfer metrics
transfer_counter = Counter(
    "minibank_transfers_total",
    "Total transfers attempted",
    ["outcome"],  # success | invalid_amount | source_not_found | target_not_found | insufficient_funds
)

transfer_amount_histogram = Histogram(
    "minibank_transfer_amount",
    "Amounts moved by successful transfers",
    buckets=[10, 50, 100, 500, 1_000, 5_000, 10_000, 50_000],
)

# Account metrics
account_operations_counter = Counter(
    "minibank_account_operations_total",
    "Account create/delete operations",
    ["operation", "outcome"],  # add | delete ; ok | duplicate | missing
)

accounts_gauge = Gauge(
    "minibank_accounts",
    "Accounts currently held in the registry",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_transfer(outcome: str, amount: float) -> None:
    """Record transfer outcome and, on success, the amount moved"""
    transfer_counter.labels(outcome=outcome).inc()
    if outcome == "success":
        transfer_amount_histogram.observe(amount)


def record_account_operation(operation: str, outcome: str, registry_size: int) -> None:
    """Count an account write and refresh the registry size gauge"""
    account_operations_counter.labels(operation=operation, outcome=outcome).inc()
    accounts_gauge.set(registry_size)
