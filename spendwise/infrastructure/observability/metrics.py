"""Prometheus metrics for purchase activity and budget health"""

from prometheus_client import Counter, Histogram

# Purchase metrics
purchase_event_counter = Counter(
    "spendwise_purchase_events_total",
    "Purchase lifecycle events",
    ["action"],  # created | updated | deleted | restored | purged
)

# Summary metrics
summary_counter = Counter(
    "spendwise_summary_total",
    "Budget summaries served",
    ["status"],  # on_track | over
)

warning_icons_histogram = Histogram(
    "spendwise_warning_icons",
    "Overspend warning icons per weekly summary",
    buckets=[0, 1, 2, 5, 10, 20, 50],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_purchase_event(action: str) -> None:
    purchase_event_counter.labels(action=action).inc()


def record_summary(status: str, warning_icons: int) -> None:
    """Record weekly budget status for monitoring overspend rates"""
    summary_counter.labels(status=status).inc()
    warning_icons_histogram.observe(warning_icons)
