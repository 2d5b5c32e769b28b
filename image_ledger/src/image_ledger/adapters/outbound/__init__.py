"""Outbound adapters - implementations of outbound ports.

These adapters implement the host ledger contract in memory for
development, the gateway and tests.
"""

from image_ledger.adapters.outbound.memory_state import (
    AccessorStats,
    InMemoryRangeIterator,
    InMemoryStateAccessor,
    InvocationStub,
)

__all__ = [
    "AccessorStats",
    "InMemoryRangeIterator",
    "InMemoryStateAccessor",
    "InvocationStub",
]
