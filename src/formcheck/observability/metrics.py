"""
Prometheus metrics collection for formcheck

This module provides metrics instrumentation for monitoring how often
checks run, which failure reasons occur, and how form processing performs.
"""
import os
from typing import Optional

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)


# Global registry for metrics
REGISTRY = CollectorRegistry()


# =======================
# CHECK METRICS
# =======================

checks_total = Counter(
    name="formcheck_checks_total",
    documentation="Total number of atomic text checks executed",
    labelnames=["check", "status"],  # status: passed, failed
    registry=REGISTRY,
)

validation_failures_total = Counter(
    name="formcheck_validation_failures_total",
    documentation="Total number of field issues reported by form processing",
    labelnames=["reason"],
    registry=REGISTRY,
)

# =======================
# PROCESSING METRICS
# =======================

process_runs_total = Counter(
    name="formcheck_process_runs_total",
    documentation="Total number of form processing runs",
    labelnames=["status"],  # status: valid, invalid
    registry=REGISTRY,
)

process_duration_seconds = Histogram(
    name="formcheck_process_duration_seconds",
    documentation="Time spent processing a form in seconds",
    buckets=[0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5],
    registry=REGISTRY,
)


# =======================
# HELPER FUNCTIONS
# =======================

def generate_metrics() -> bytes:
    """
    Generate Prometheus metrics in text format

    Returns:
        Metrics in Prometheus text format
    """
    return generate_latest(REGISTRY)


def get_content_type() -> str:
    return CONTENT_TYPE_LATEST


def start_metrics_server(port: Optional[int] = None) -> None:
    """
    Start HTTP server for Prometheus metrics

    Args:
        port: Port to listen on (defaults to env var METRICS_PORT or 8000)
    """
    # Lazy import: the HTTP exporter is only needed when serving metrics
    from prometheus_client import start_http_server

    metrics_port = port or int(os.getenv("METRICS_PORT", "8000"))
    start_http_server(metrics_port, registry=REGISTRY)


def increment_counter(counter: Counter, value: float = 1.0, **labels) -> None:
    """
    Increment a counter metric

    Args:
        counter: Prometheus Counter metric
        value: Amount to increment (default: 1.0)
        **labels: Label values for the metric
    """
    if labels:
        counter.labels(**labels).inc(value)
    else:
        counter.inc(value)


def record_check(check: str, passed: bool) -> None:
    """Record the outcome of one atomic check."""
    increment_counter(checks_total, check=check, status="passed" if passed else "failed")


def record_process_run(
    is_valid: bool,
    reasons: list[str],
    duration_seconds: float,
) -> None:
    """
    Record one form processing run.

    Args:
        is_valid: Whether the form was valid
        reasons: Failure reason values across all invalid fields
        duration_seconds: Processing duration in seconds
    """
    increment_counter(process_runs_total, status="valid" if is_valid else "invalid")
    for reason in reasons:
        increment_counter(validation_failures_total, reason=reason)
    process_duration_seconds.observe(duration_seconds)


def get_sample_value(name: str, labels: Optional[dict[str, str]] = None) -> float:
    """
    Read the current value of a sample from the formcheck registry.

    Args:
        name: Sample name (e.g. "formcheck_checks_total")
        labels: Label values identifying the sample

    Returns:
        Current value, or 0.0 if the sample has not been recorded yet
    """
    value = REGISTRY.get_sample_value(name, labels or {})
    return value if value is not None else 0.0
