"""Outbound ports - interfaces for external dependencies.

Outbound ports define contracts for the host ledger runtime that the
image ledger depends on: key-value state access and the invocation stub.
"""

from image_ledger.ports.outbound.chaincode_stub import ChaincodeStub
from image_ledger.ports.outbound.state_accessor import (
    StateAccessor,
    StateEntry,
    StateIterator,
)

__all__ = [
    "ChaincodeStub",
    "StateAccessor",
    "StateEntry",
    "StateIterator",
]
