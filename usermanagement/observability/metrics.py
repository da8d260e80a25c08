"""Prometheus metrics for the user catalogue and its audit trail."""

from prometheus_client import Counter, Gauge

# Store metrics
STORE_OPERATIONS = Counter(
    "usermanagement_store_operations_total",
    "Total number of entity store operations",
    labelnames=["kind", "operation"],
)

# Audit metrics
AUDIT_ENTRIES = Counter(
    "usermanagement_audit_entries_total",
    "Total number of audit entries appended",
    labelnames=["action"],
)

# Directory metrics
USER_COUNT = Gauge(
    "usermanagement_users",
    "Number of users currently in the store",
)


def setup_metrics() -> None:
    """Initialize metrics configuration.

    Currently a no-op as prometheus_client registers metrics on
    definition.
    """
    pass
