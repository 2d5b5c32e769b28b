"""Adapters layer - concrete implementations of port interfaces.

Adapters provide the actual implementations:
- Inbound adapters: Handle incoming requests (REST development gateway)
- Outbound adapters: Implement the host ledger contract (in-memory state)
"""

from image_ledger.adapters.outbound import (
    InMemoryStateAccessor,
    InvocationStub,
)

__all__ = [
    # Outbound adapters
    "InMemoryStateAccessor",
    "InvocationStub",
]
