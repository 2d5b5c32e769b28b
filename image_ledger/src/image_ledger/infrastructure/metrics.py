"""Prometheus metrics for the image ledger."""

from __future__ import annotations

from prometheus_client import (
    Counter,
    Gauge,
    Histogram,
    Info,
    start_http_server,
    REGISTRY,
    CollectorRegistry,
)


class MetricsRegistry:
    """Registry of all image ledger metrics."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Initialize metrics registry."""
        self._registry = registry or REGISTRY

        # Invocation metrics
        self.invocations_total = Counter(
            "image_ledger_invocations_total",
            "Total number of dispatched invocations",
            ["operation", "status"],  # status: success, error
            registry=self._registry,
        )

        self.invocation_latency_seconds = Histogram(
            "image_ledger_invocation_latency_seconds",
            "Invocation latency in seconds",
            ["operation"],
            buckets=(0.0005, 0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0),
            registry=self._registry,
        )

        # Record metrics
        self.records_written_total = Counter(
            "image_ledger_records_written_total",
            "Total image records written to the ledger",
            ["operation"],
            registry=self._registry,
        )

        # Range scan metrics
        self.scan_entries_total = Counter(
            "image_ledger_scan_entries_total",
            "Total entries returned by range scans",
            registry=self._registry,
        )

        self.scan_decode_fallbacks_total = Counter(
            "image_ledger_scan_decode_fallbacks_total",
            "Scanned values returned raw because they did not decode",
            registry=self._registry,
        )

        self.open_iterators = Gauge(
            "image_ledger_open_iterators",
            "Number of range iterators currently open",
            registry=self._registry,
        )

        # Server info
        self.info = Info(
            "image_ledger",
            "Image ledger information",
            registry=self._registry,
        )


# Global metrics registry
_metrics: MetricsRegistry | None = None


def setup_metrics(port: int = 8001, registry: CollectorRegistry | None = None) -> MetricsRegistry:
    """
    Set up Prometheus metrics server.

    Args:
        port: Port for the metrics HTTP server
        registry: Optional custom registry

    Returns:
        The metrics registry
    """
    global _metrics
    _metrics = MetricsRegistry(registry)

    from image_ledger import __version__
    _metrics.info.info({
        "version": __version__,
    })

    # Start HTTP server for Prometheus scraping
    start_http_server(port, registry=registry or REGISTRY)

    return _metrics


def get_metrics() -> MetricsRegistry:
    """Get the global metrics registry."""
    global _metrics
    if _metrics is None:
        _metrics = MetricsRegistry()
    return _metrics
