"""Chaincode Stub port.

The stub is the per-invocation handle the host passes to the contract:
a State Accessor that also carries the requested function name and its
string parameters.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol

from image_ledger.ports.outbound.state_accessor import StateAccessor


class ChaincodeStub(StateAccessor, Protocol):
    """Protocol for the host-provided invocation stub."""

    @abstractmethod
    def get_function_and_parameters(self) -> tuple[str, list[str]]:
        """Return the invoked function name and its ordered arguments."""
        ...
