"""In-memory State Accessor implementation.

This adapter implements the StateAccessor and ChaincodeStub ports over a
sorted in-memory key space. It stands in for the host ledger during
development, in the gateway and in tests.

Key concepts:
- Keys are kept in a sorted list alongside a dict of values, so range
  scans walk keys in ascending lexicographic order.
- A range iterator works on a snapshot taken when it is opened; writes
  made during the scan are not visible to it.
- Iterator bookkeeping (opened / closed counts) makes leaks observable.

Thread Safety:
    All operations on the key space are guarded by a single lock.
"""

from __future__ import annotations

import bisect
import threading
from dataclasses import dataclass
from typing import Iterator, Sequence

from image_ledger.ports.outbound.state_accessor import StateEntry


@dataclass
class AccessorStats:
    """Statistics for accessor monitoring."""

    keys: int
    reads: int
    writes: int
    iterators_opened: int
    iterators_closed: int

    @property
    def iterators_open(self) -> int:
        return self.iterators_opened - self.iterators_closed


class InMemoryRangeIterator:
    """Iterator over a snapshot of entries in one key range."""

    def __init__(self, entries: list[StateEntry], owner: InMemoryStateAccessor) -> None:
        self._entries = entries
        self._position = 0
        self._owner = owner
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def has_next(self) -> bool:
        return not self._closed and self._position < len(self._entries)

    def next(self) -> StateEntry:
        if self._closed:
            raise RuntimeError("Iterator is closed")
        if self._position >= len(self._entries):
            raise StopIteration
        entry = self._entries[self._position]
        self._position += 1
        return entry

    def close(self) -> None:
        if self._closed:
            raise RuntimeError("Iterator already closed")
        self._closed = True
        self._owner._iterator_closed()

    def __iter__(self) -> Iterator[StateEntry]:
        while self.has_next():
            yield self.next()


class InMemoryStateAccessor:
    """Sorted in-memory key-value ledger.

    Attributes:
        calls: Names of accessor methods invoked, in order. Only filled
            when record_calls is set; the list is never trimmed.
    """

    def __init__(self, record_calls: bool = False) -> None:
        self._lock = threading.RLock()
        self._values: dict[str, bytes] = {}
        self._keys: list[str] = []
        self.calls: list[str] = []
        self._record_calls = record_calls

        self._reads = 0
        self._writes = 0
        self._iterators_opened = 0
        self._iterators_closed = 0

    def get_state(self, key: str) -> bytes:
        with self._lock:
            self._record("get_state")
            self._reads += 1
            return self._values.get(key, b"")

    def put_state(self, key: str, value: bytes) -> None:
        if not key:
            raise ValueError("key must not be empty")
        with self._lock:
            self._record("put_state")
            self._writes += 1
            if key not in self._values:
                bisect.insort(self._keys, key)
            self._values[key] = bytes(value)

    def get_state_by_range(self, start_key: str, end_key: str) -> InMemoryRangeIterator:
        """Open an iterator over keys in [start_key, end_key)."""
        with self._lock:
            self._record("get_state_by_range")
            low = bisect.bisect_left(self._keys, start_key)
            high = bisect.bisect_left(self._keys, end_key)
            snapshot = [StateEntry(k, self._values[k]) for k in self._keys[low:high]]
            self._iterators_opened += 1
        return InMemoryRangeIterator(snapshot, owner=self)

    def _record(self, call: str) -> None:
        if self._record_calls:
            self.calls.append(call)

    def _iterator_closed(self) -> None:
        with self._lock:
            self._iterators_closed += 1

    def keys(self) -> list[str]:
        """Return all keys in ascending order."""
        with self._lock:
            return list(self._keys)

    def get_stats(self) -> AccessorStats:
        with self._lock:
            return AccessorStats(
                keys=len(self._keys),
                reads=self._reads,
                writes=self._writes,
                iterators_opened=self._iterators_opened,
                iterators_closed=self._iterators_closed,
            )


class InvocationStub:
    """ChaincodeStub binding one invocation's function and args to a ledger.

    State calls are delegated to the wrapped accessor, so several stubs
    can share one ledger across invocations.
    """

    def __init__(
        self,
        ledger: InMemoryStateAccessor,
        function: str,
        params: Sequence[str] = (),
    ) -> None:
        self._ledger = ledger
        self._function = function
        self._params = list(params)

    @property
    def ledger(self) -> InMemoryStateAccessor:
        return self._ledger

    def get_function_and_parameters(self) -> tuple[str, list[str]]:
        return self._function, list(self._params)

    def get_state(self, key: str) -> bytes:
        return self._ledger.get_state(key)

    def put_state(self, key: str, value: bytes) -> None:
        self._ledger.put_state(key, value)

    def get_state_by_range(self, start_key: str, end_key: str) -> InMemoryRangeIterator:
        return self._ledger.get_state_by_range(start_key, end_key)
