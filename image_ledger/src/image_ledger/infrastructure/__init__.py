"""Infrastructure layer - cross-cutting concerns."""

from image_ledger.infrastructure.config import Config, get_config
from image_ledger.infrastructure.logging import setup_logging, get_logger
from image_ledger.infrastructure.metrics import setup_metrics, get_metrics, MetricsRegistry
from image_ledger.infrastructure.tracing import setup_tracing, get_tracer, trace_span

__all__ = [
    "Config",
    "get_config",
    "setup_logging",
    "get_logger",
    "setup_metrics",
    "get_metrics",
    "MetricsRegistry",
    "setup_tracing",
    "get_tracer",
    "trace_span",
]
