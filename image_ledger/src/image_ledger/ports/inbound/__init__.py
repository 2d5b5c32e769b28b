"""Inbound ports - the invocation contract exposed to the host runtime."""

from image_ledger.ports.inbound.contract import (
    Handler,
    InvocationContext,
    Response,
    Status,
)

__all__ = [
    "Handler",
    "InvocationContext",
    "Response",
    "Status",
]
