"""Invocation contract offered to the host runtime.

Every invocation returns exactly one Response: either a success carrying
a byte payload (possibly empty) or an error carrying a message. Handlers
share one signature and receive an explicit InvocationContext instead of
reaching for shared instance state.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Sequence

from image_ledger.ports.outbound.state_accessor import StateAccessor


class Status(IntEnum):
    """Response status codes (same values as the Fabric shim)."""

    OK = 200
    ERROR = 500


@dataclass(frozen=True, slots=True)
class Response:
    """Success or failure envelope returned for every invocation.

    Use Response.success() and Response.error() rather than the
    constructor so a response is never both.
    """

    status: Status
    message: str = ""
    payload: bytes = b""

    @classmethod
    def success(cls, payload: bytes | None = None) -> Response:
        return cls(status=Status.OK, payload=payload or b"")

    @classmethod
    def error(cls, message: str) -> Response:
        return cls(status=Status.ERROR, message=message)

    @property
    def ok(self) -> bool:
        return self.status == Status.OK


@dataclass(frozen=True, slots=True)
class InvocationContext:
    """Per-invocation context handed to every handler.

    Attributes:
        state: Ledger accessor for this invocation.
        operation: The operation name being executed.
    """

    state: StateAccessor
    operation: str


Handler = Callable[[InvocationContext, Sequence[str]], bytes]
"""Handler signature: (context, args) -> payload. Failures raise ChaincodeError."""
