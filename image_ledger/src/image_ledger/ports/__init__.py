"""Ports layer - interface definitions following Hexagonal Architecture.

Ports are abstract interfaces (protocols) that define contracts:
- Inbound ports: The invocation envelope offered to the host (Response, Handler)
- Outbound ports: Dependencies on the host ledger (StateAccessor, ChaincodeStub)

Adapters implement these ports with concrete functionality.
"""

from image_ledger.ports.inbound import (
    Handler,
    InvocationContext,
    Response,
    Status,
)
from image_ledger.ports.outbound import (
    ChaincodeStub,
    StateAccessor,
    StateEntry,
    StateIterator,
)

__all__ = [
    # Inbound ports
    "Handler",
    "InvocationContext",
    "Response",
    "Status",
    # Outbound ports
    "ChaincodeStub",
    "StateAccessor",
    "StateEntry",
    "StateIterator",
]
