"""Dependency wiring for the development gateway."""

from __future__ import annotations

from dataclasses import dataclass

from prometheus_client import CollectorRegistry

from image_ledger.adapters.outbound import InMemoryStateAccessor, InvocationStub
from image_ledger.application.chaincode import ImageChaincode
from image_ledger.application.dispatcher import build_dispatcher
from image_ledger.domain.services import OP_INIT_LEDGER
from image_ledger.infrastructure.config import Config, get_config
from image_ledger.infrastructure.logging import get_logger, setup_logging
from image_ledger.infrastructure.metrics import MetricsRegistry, get_metrics, setup_metrics
from image_ledger.infrastructure.tracing import setup_tracing

logger = get_logger(__name__)


@dataclass
class Container:
    """Components shared by every request the gateway serves."""

    config: Config
    ledger: InMemoryStateAccessor
    metrics: MetricsRegistry
    chaincode: ImageChaincode

    def stub(self, function: str, params: list[str] | None = None) -> InvocationStub:
        """Create the stub for one invocation against the shared ledger."""
        return InvocationStub(self.ledger, function, params or [])


def build_container(
    config: Config | None = None,
    registry: CollectorRegistry | None = None,
    configure_observability: bool = False,
) -> Container:
    """Create the container and, if configured, seed the ledger.

    Args:
        config: Configuration; the cached environment config if None.
        registry: Prometheus registry for an isolated MetricsRegistry
            (tests). Uses the global registry when None.
        configure_observability: Set up logging, tracing and the metrics
            exporter from config. The gateway entry point passes True.

    Returns:
        The wired container.
    """
    config = config or get_config()

    if configure_observability:
        setup_logging(config.observability.log_level, config.observability.log_format)
        setup_tracing(
            service_name=config.observability.otel_service_name,
            otlp_endpoint=config.observability.otel_endpoint,
            console_export=config.observability.trace_console,
        )

    if registry is not None:
        metrics = MetricsRegistry(registry=registry)
    elif configure_observability and config.server.metrics_enabled:
        metrics = setup_metrics(port=config.server.metrics_port)
    else:
        metrics = get_metrics()

    container = Container(
        config=config,
        ledger=InMemoryStateAccessor(),
        metrics=metrics,
        chaincode=ImageChaincode(build_dispatcher(metrics=metrics)),
    )

    container.chaincode.init(container.stub(""))
    if config.ledger.seed_on_start:
        response = container.chaincode.invoke(container.stub(OP_INIT_LEDGER))
        if not response.ok:
            raise RuntimeError(f"Ledger seeding failed: {response.message}")

    logger.info(
        "container_initialized",
        seed_on_start=config.ledger.seed_on_start,
        operations=sorted(container.chaincode.dispatcher.operations),
    )
    return container
