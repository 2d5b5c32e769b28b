"""Error kinds raised by record handlers and the dispatcher.

Every error carries a human-readable message. The dispatcher converts
any ChaincodeError into a failure envelope with that message verbatim,
so messages are part of the contract seen by invoking clients.
"""

from __future__ import annotations


class ChaincodeError(Exception):
    """Base class for failures surfaced to the invoking client."""

    pass


class ArityError(ChaincodeError):
    """Raised when an operation receives the wrong number of arguments."""

    def __init__(self, expected: int, received: int) -> None:
        self.expected = expected
        self.received = received
        super().__init__(f"Incorrect number of arguments. Expecting {expected}")


class NotFoundError(ChaincodeError):
    """Raised when a key is absent or holds an empty value."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"{key} does not exist")


class DecodeError(ChaincodeError):
    """Raised when stored bytes are not a valid image record."""

    pass


class UnknownOperationError(ChaincodeError):
    """Raised when the dispatcher has no handler for an operation name."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Received unknown function {operation} invocation")


class InvalidArgumentError(ChaincodeError):
    """Raised when an argument cannot be stored as UTF-8 text."""

    def __init__(self, position: int) -> None:
        self.position = position
        super().__init__(f"Argument {position} is not valid UTF-8 text")
