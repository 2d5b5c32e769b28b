"""State Accessor port for ledger key-value access.

This outbound port defines the contract the image ledger consumes from
the host ledger runtime. The host provides durability, ordering and
conflict detection; the core only reads, writes and range-scans keys
within a single invocation.

The accessor is responsible for:
- Point reads and writes by key
- Ordered range scans over a half-open key interval
"""

from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class StateEntry:
    """A (key, value) pair yielded by a range scan."""

    key: str
    value: bytes


class StateIterator(Protocol):
    """Protocol for an open range scan.

    Iterators hold host-side resources. Callers must call close()
    exactly once on every exit path, typically via contextlib.closing.
    """

    @abstractmethod
    def has_next(self) -> bool:
        """Return True if another entry is available."""
        ...

    @abstractmethod
    def next(self) -> StateEntry:
        """Return the next entry in ascending key order.

        Raises:
            StopIteration: If the scan is exhausted.
            RuntimeError: If the iterator has been closed.
        """
        ...

    @abstractmethod
    def close(self) -> None:
        """Release the iterator.

        Raises:
            RuntimeError: If the iterator was already closed.
        """
        ...


class StateAccessor(Protocol):
    """Protocol for ledger state access.

    Thread Safety:
        One accessor serves one invocation. Implementations shared
        between invocations must serialize writes themselves.
    """

    @abstractmethod
    def get_state(self, key: str) -> bytes:
        """Read the value stored at key.

        Args:
            key: The ledger key.

        Returns:
            The stored bytes, or ``b""`` if the key is absent.
        """
        ...

    @abstractmethod
    def put_state(self, key: str, value: bytes) -> None:
        """Write value at key, replacing any existing value.

        Args:
            key: The ledger key (must be non-empty).
            value: The bytes to store.

        Raises:
            ValueError: If the key is empty.
        """
        ...

    @abstractmethod
    def get_state_by_range(self, start_key: str, end_key: str) -> StateIterator:
        """Open an ordered scan over keys in [start_key, end_key).

        Args:
            start_key: Inclusive lower bound.
            end_key: Exclusive upper bound.

        Returns:
            An iterator yielding entries in ascending key order.
        """
        ...
