"""Prometheus Metrics for Secret Sharing Operations.

Provides metrics for monitoring split/combine/recover operations:
- Operation counts by status
- Error rates by type
- Latencies and secret sizes
- Zero-coefficient resamples during polynomial generation

Recording can be switched off with SHAMIR256_METRICS_ENABLED=false.
"""

import time
from contextlib import contextmanager

from prometheus_client import Counter, Histogram

from shamir256.config import get_settings


# ==================== Operation Counters ====================

SHARING_OPERATIONS_TOTAL = Counter(
    "shamir_operations_total",
    "Total number of secret sharing operations",
    ["operation", "status"],
)

SHARING_ERRORS_TOTAL = Counter(
    "shamir_errors_total",
    "Total number of secret sharing operation errors",
    ["operation", "error_type"],
)

COEFFICIENT_RESAMPLES_TOTAL = Counter(
    "shamir_coefficient_resamples_total",
    "Polynomial draws rejected because the highest coefficient was zero",
)


# ==================== Histograms ====================

SHARING_LATENCY_BUCKETS = (
    0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0, 10.0
)

SHARING_OPERATION_LATENCY = Histogram(
    "shamir_operation_latency_seconds",
    "Latency of secret sharing operations in seconds",
    ["operation"],
    buckets=SHARING_LATENCY_BUCKETS,
)

SECRET_SIZE_BYTES = Histogram(
    "shamir_secret_size_bytes",
    "Size of secrets processed, in bytes",
    ["operation"],
    buckets=(0, 16, 32, 64, 256, 1024, 4096, 65536, 1048576, 16777216),
)


# ==================== Helper Classes ====================

class MetricsRecorder:
    """Helper for recording secret sharing metrics."""

    def __init__(self, enabled: bool | None = None):
        self._enabled = enabled

    @property
    def enabled(self) -> bool:
        if self._enabled is not None:
            return self._enabled
        return get_settings().metrics_enabled

    @contextmanager
    def track_operation(self, operation: str, data_size: int | None = None):
        """Context manager to track an operation's metrics.

        Usage:
            with metrics.track_operation("split", len(secret)):
                shares = engine.split(5, 3, secret)
        """
        if not self.enabled:
            yield
            return

        start_time = time.perf_counter()
        status = "success"

        try:
            yield
        except Exception as e:
            status = "error"
            SHARING_ERRORS_TOTAL.labels(
                operation=operation,
                error_type=type(e).__name__,
            ).inc()
            raise
        finally:
            duration = time.perf_counter() - start_time
            SHARING_OPERATIONS_TOTAL.labels(operation=operation, status=status).inc()
            SHARING_OPERATION_LATENCY.labels(operation=operation).observe(duration)

            if data_size is not None:
                SECRET_SIZE_BYTES.labels(operation=operation).observe(data_size)

    def record_resample(self):
        """Record a rejected polynomial draw."""
        if self.enabled:
            COEFFICIENT_RESAMPLES_TOTAL.inc()


# Global metrics recorder
metrics = MetricsRecorder()
