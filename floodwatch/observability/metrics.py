"""
Metrics definitions for floodwatch.

This module defines Prometheus metrics for monitoring
catalog ingestion, queries and refresh cycles.
"""

from prometheus_client import Counter, Histogram, Gauge

# 카운터 메트릭
records_ingested = Counter(
    "records_ingested_total",
    "Number of records accepted into a catalog",
    ["kind"]
)

records_rejected = Counter(
    "records_rejected_total",
    "Number of records rejected at ingestion",
    ["kind"]
)

refreshes = Counter(
    "refreshes_total",
    "Completed catalog refresh cycles"
)

refresh_failures = Counter(
    "refresh_failures_total",
    "Refresh cycles that failed before the swap"
)

routing_requests = Counter(
    "routing_requests_total",
    "Path requests sent to the routing collaborator",
    ["outcome"]
)

# 히스토그램 메트릭
search_seconds = Histogram(
    "search_duration_seconds",
    "Time spent filtering a catalog",
    ["kind"],
    buckets=[0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5]
)

# 게이지 메트릭
catalog_size = Gauge(
    "catalog_size",
    "Current number of records held in a catalog",
    ["kind"]
)

gazetteer_regions = Gauge(
    "gazetteer_regions",
    "Number of regions loaded into the gazetteer"
)
