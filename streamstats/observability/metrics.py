"""Prometheus metrics for streamstats runs.

Metrics live on a private registry; nothing is served over the network.
The driver logs the exposition text at DEBUG once a run finishes.
"""
from __future__ import annotations

from prometheus_client import (
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

# Prometheus metric names as constants
VALUES_INGESTED_NAME = "streamstats_values_ingested"
INVALID_INPUT_NAME = "streamstats_invalid_input"
RUN_DURATION_NAME = "streamstats_run_duration_seconds"

# -----------------------------------------------------------------------------
# Metric objects
# -----------------------------------------------------------------------------
# Separate from prometheus_client.REGISTRY so tests and embedding callers
# do not pick up process/platform collectors.
REGISTRY = CollectorRegistry()

# VALUES_INGESTED: Counter for values forwarded to the accumulators.
# Exposed as streamstats_values_ingested_total.
VALUES_INGESTED = Counter(
    name=VALUES_INGESTED_NAME,
    documentation="Values forwarded to every accumulator",
    registry=REGISTRY,
)

# INVALID_INPUT: Counter for malformed tokens that aborted a run.
INVALID_INPUT = Counter(
    name=INVALID_INPUT_NAME,
    documentation="Malformed numeric tokens rejected",
    registry=REGISTRY,
)

# RUN_DURATION: Histogram of wall time from first read to report, labeled by outcome
# ("ok" or "invalid_input").
RUN_DURATION = Histogram(
    name=RUN_DURATION_NAME,
    documentation="Run duration in seconds",
    labelnames=["outcome"],
    registry=REGISTRY,
)


def render_metrics() -> str:
    """Return all streamstats metrics in Prometheus text format."""
    return generate_latest(REGISTRY).decode("utf-8")
