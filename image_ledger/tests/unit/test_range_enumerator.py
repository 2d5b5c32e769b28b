"""Unit tests for RangeEnumerator."""

from __future__ import annotations

import pytest
from prometheus_client import CollectorRegistry

from image_ledger.adapters.outbound import InMemoryStateAccessor
from image_ledger.adapters.outbound.memory_state import InMemoryRangeIterator
from image_ledger.domain.entities import ImageRecord
from image_ledger.domain.services import RangeEnumerator
from image_ledger.domain.value_objects import DecodedRecord, KeyRange, RawValue, RecordKey
from image_ledger.infrastructure.metrics import MetricsRegistry
from image_ledger.ports.outbound import StateEntry


def _put_record(ledger: InMemoryStateAccessor, key: str, owner: str = "o") -> ImageRecord:
    record = ImageRecord.new(key, f"name-{key}", "1 MB", owner)
    ledger.put_state(key, record.to_bytes())
    return record


class FailingIterator:
    """Wraps an iterator and raises after a number of entries."""

    def __init__(self, inner: InMemoryRangeIterator, fail_after: int) -> None:
        self._inner = inner
        self._remaining = fail_after
        self.close_calls = 0

    def has_next(self) -> bool:
        return True

    def next(self) -> StateEntry:
        if self._remaining == 0:
            raise IOError("peer connection lost")
        self._remaining -= 1
        return self._inner.next()

    def close(self) -> None:
        self.close_calls += 1
        self._inner.close()


class FailingLedger(InMemoryStateAccessor):
    """Ledger whose range scans fail part way through."""

    def __init__(self, fail_after: int) -> None:
        super().__init__()
        self._fail_after = fail_after
        self.iterators: list[FailingIterator] = []

    def get_state_by_range(self, start_key: str, end_key: str) -> FailingIterator:  # type: ignore[override]
        iterator = FailingIterator(super().get_state_by_range(start_key, end_key), self._fail_after)
        self.iterators.append(iterator)
        return iterator


class TestRangeEnumerator:
    """Tests for RangeEnumerator.scan."""

    def test_empty_ledger(self, ledger: InMemoryStateAccessor) -> None:
        assert RangeEnumerator().scan(ledger) == []

    def test_completeness_and_order(self, ledger: InMemoryStateAccessor) -> None:
        """N sequential records come back as N entries in key order."""
        for index in range(12):
            _put_record(ledger, f"IMG{index}")

        entries = RangeEnumerator().scan(ledger)

        assert len(entries) == 12
        assert [e.key for e in entries] == sorted(f"IMG{i}" for i in range(12))
        assert all(e.is_decoded for e in entries)

    def test_keys_outside_range_excluded(self, ledger: InMemoryStateAccessor) -> None:
        _put_record(ledger, "IMG0")
        _put_record(ledger, "IMG999")
        _put_record(ledger, "CAR0")

        entries = RangeEnumerator().scan(ledger)

        assert [e.key for e in entries] == ["IMG0"]

    def test_malformed_value_kept_raw(self, ledger: InMemoryStateAccessor) -> None:
        _put_record(ledger, "IMG0")
        ledger.put_state("IMG1", b"not a record")
        _put_record(ledger, "IMG2")

        entries = RangeEnumerator().scan(ledger)

        assert [e.key for e in entries] == ["IMG0", "IMG1", "IMG2"]
        assert isinstance(entries[0].value, DecodedRecord)
        assert entries[1].value == RawValue("not a record")
        assert isinstance(entries[2].value, DecodedRecord)

    def test_empty_value_skipped(self, ledger: InMemoryStateAccessor) -> None:
        _put_record(ledger, "IMG0")
        ledger.put_state("IMG1", b"")

        entries = RangeEnumerator().scan(ledger)

        assert [e.key for e in entries] == ["IMG0"]

    def test_custom_range(self, ledger: InMemoryStateAccessor) -> None:
        _put_record(ledger, "IMG0")
        _put_record(ledger, "IMG5")

        entries = RangeEnumerator().scan(ledger, KeyRange(RecordKey("IMG4"), RecordKey("IMG6")))

        assert [e.key for e in entries] == ["IMG5"]

    def test_iterator_closed_after_scan(self, ledger: InMemoryStateAccessor) -> None:
        _put_record(ledger, "IMG0")
        ledger.put_state("IMG1", b"{bad")

        RangeEnumerator().scan(ledger)

        stats = ledger.get_stats()
        assert stats.iterators_opened == 1
        assert stats.iterators_closed == 1

    def test_iterator_closed_when_accessor_fails(self) -> None:
        ledger = FailingLedger(fail_after=1)
        _put_record(ledger, "IMG0")
        _put_record(ledger, "IMG1")

        with pytest.raises(IOError, match="peer connection lost"):
            RangeEnumerator().scan(ledger)

        assert ledger.iterators[0].close_calls == 1
        assert ledger.get_stats().iterators_open == 0


class TestRangeEnumeratorMetrics:
    """Tests for scan metrics."""

    def test_counters(
        self,
        ledger: InMemoryStateAccessor,
        collector_registry: CollectorRegistry,
        metrics_registry: MetricsRegistry,
    ) -> None:
        _put_record(ledger, "IMG0")
        ledger.put_state("IMG1", b"raw")

        RangeEnumerator(metrics=metrics_registry).scan(ledger)

        assert collector_registry.get_sample_value("image_ledger_scan_entries_total") == 2
        assert collector_registry.get_sample_value("image_ledger_scan_decode_fallbacks_total") == 1
        assert collector_registry.get_sample_value("image_ledger_open_iterators") == 0

    def test_gauge_released_on_failure(
        self,
        collector_registry: CollectorRegistry,
        metrics_registry: MetricsRegistry,
    ) -> None:
        ledger = FailingLedger(fail_after=0)
        _put_record(ledger, "IMG0")

        with pytest.raises(IOError):
            RangeEnumerator(metrics=metrics_registry).scan(ledger)

        assert collector_registry.get_sample_value("image_ledger_open_iterators") == 0
