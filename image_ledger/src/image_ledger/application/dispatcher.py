"""Operation Dispatcher - routes named operations to record handlers.

The dispatcher owns an immutable operation-name to handler mapping built
once at construction. Dispatching resolves exactly one handler, invokes
it with an explicit InvocationContext and wraps the outcome in a
Response envelope:

    name --resolve--> handler --(context, args)--> payload | ChaincodeError
                                                       |
                                         Response.success / Response.error

An unknown name fails before any handler runs, so no accessor call is
made. A failing invocation never changes dispatcher state.
"""

from __future__ import annotations

import time
from types import MappingProxyType
from typing import Mapping, Sequence

from opentelemetry.trace import Status as SpanStatus
from opentelemetry.trace import StatusCode

from image_ledger.domain.errors import ChaincodeError, UnknownOperationError
from image_ledger.domain.services import ImageHandlers
from image_ledger.infrastructure.logging import get_logger
from image_ledger.infrastructure.metrics import MetricsRegistry
from image_ledger.infrastructure.tracing import trace_span
from image_ledger.ports.inbound.contract import Handler, InvocationContext, Response
from image_ledger.ports.outbound.state_accessor import StateAccessor

logger = get_logger(__name__)

UNKNOWN_OPERATION_LABEL = "unknown"


class OperationDispatcher:
    """Resolves operation names to handlers and builds response envelopes.

    Attributes:
        operations: The registered operation names.
    """

    def __init__(
        self,
        handlers: Mapping[str, Handler],
        metrics: MetricsRegistry | None = None,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            handlers: Operation name to handler mapping. Copied and frozen.
            metrics: Optional metrics registry.

        Raises:
            ValueError: If no handlers are given.
        """
        if not handlers:
            raise ValueError("Dispatcher requires at least one handler")
        self._handlers: Mapping[str, Handler] = MappingProxyType(dict(handlers))
        self._metrics = metrics

    @property
    def operations(self) -> frozenset[str]:
        return frozenset(self._handlers)

    @property
    def handlers(self) -> Mapping[str, Handler]:
        """Read-only view of the handler mapping."""
        return self._handlers

    def resolve(self, operation: str) -> Handler:
        """Return the handler registered under operation.

        Raises:
            UnknownOperationError: If nothing is registered under that name.
        """
        try:
            return self._handlers[operation]
        except KeyError:
            raise UnknownOperationError(operation) from None

    def dispatch(
        self,
        state: StateAccessor,
        operation: str,
        args: Sequence[str],
    ) -> Response:
        """Run one invocation.

        Args:
            state: Ledger accessor for this invocation.
            operation: Operation name.
            args: Ordered string arguments.

        Returns:
            Response.success with the handler payload, or Response.error
            with the failure message.
        """
        started = time.perf_counter()
        label = operation if operation in self._handlers else UNKNOWN_OPERATION_LABEL
        log = logger.bind(operation=operation, arg_count=len(args))

        with trace_span(
            "image_ledger.dispatch",
            {"image_ledger.operation": operation, "image_ledger.arg_count": len(args)},
        ) as span:
            try:
                handler = self.resolve(operation)
                payload = handler(InvocationContext(state=state, operation=operation), list(args))
            except ChaincodeError as e:
                log.warning("invocation_rejected", error=str(e), error_kind=type(e).__name__)
                span.set_status(SpanStatus(StatusCode.ERROR, str(e)))
                response = Response.error(str(e))
            except Exception as e:
                log.exception("invocation_failed")
                span.record_exception(e)
                span.set_status(SpanStatus(StatusCode.ERROR, type(e).__name__))
                response = Response.error(f"{type(e).__name__}: {e}")
            else:
                log.debug("invocation_succeeded", payload_bytes=len(payload))
                response = Response.success(payload)

            span.set_attribute("image_ledger.status", int(response.status))

        if self._metrics is not None:
            outcome = "success" if response.ok else "error"
            self._metrics.invocations_total.labels(operation=label, status=outcome).inc()
            self._metrics.invocation_latency_seconds.labels(operation=label).observe(
                time.perf_counter() - started
            )

        return response


def build_dispatcher(metrics: MetricsRegistry | None = None) -> OperationDispatcher:
    """Create the dispatcher with the image record handlers registered."""
    return OperationDispatcher(ImageHandlers(metrics=metrics).handlers(), metrics=metrics)
