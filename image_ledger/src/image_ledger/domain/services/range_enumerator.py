"""Range enumeration over a half-open key interval.

The enumerator opens one iterator on the accessor, drains it in key
order and closes it exactly once, whether the scan finishes normally or
the accessor fails part way. Values that do not decode as image records
are kept as raw text rather than dropped, so a partially malformed
ledger still enumerates completely.

Entries whose stored value is empty are skipped.
"""

from __future__ import annotations

from contextlib import closing
from typing import TYPE_CHECKING

from image_ledger.domain.entities import ImageRecord
from image_ledger.domain.errors import DecodeError
from image_ledger.domain.value_objects import (
    IMAGE_KEY_RANGE,
    DecodedRecord,
    KeyRange,
    RawValue,
    ScanEntry,
    ScanValue,
)
from image_ledger.infrastructure.logging import get_logger
from image_ledger.ports.outbound.state_accessor import StateAccessor, StateEntry

if TYPE_CHECKING:
    from image_ledger.infrastructure.metrics import MetricsRegistry

logger = get_logger(__name__)


class RangeEnumerator:
    """Collects every record in a key range as tagged scan entries.

    Attributes:
        metrics: Optional metrics registry for scan counters.
    """

    def __init__(self, metrics: MetricsRegistry | None = None) -> None:
        self._metrics = metrics

    def scan(
        self,
        state: StateAccessor,
        key_range: KeyRange = IMAGE_KEY_RANGE,
    ) -> list[ScanEntry]:
        """Enumerate all non-empty entries in key_range.

        Args:
            state: The ledger accessor.
            key_range: Interval to scan; defaults to the image namespace.

        Returns:
            Entries in ascending key order. Empty list for an empty range.

        Raises:
            Exception: Whatever the accessor raises while opening or
                advancing the iterator. The iterator is closed first.
        """
        iterator = state.get_state_by_range(key_range.start, key_range.end)
        if self._metrics is not None:
            self._metrics.open_iterators.inc()

        entries: list[ScanEntry] = []
        try:
            with closing(iterator):
                while iterator.has_next():
                    entry = iterator.next()
                    if not entry.value:
                        continue
                    entries.append(ScanEntry(key=entry.key, value=self._decode(entry)))
        finally:
            if self._metrics is not None:
                self._metrics.open_iterators.dec()

        if self._metrics is not None:
            self._metrics.scan_entries_total.inc(len(entries))

        logger.debug(
            "range_scanned",
            start=key_range.start,
            end=key_range.end,
            entries=len(entries),
        )
        return entries

    def _decode(self, entry: StateEntry) -> ScanValue:
        try:
            return DecodedRecord(ImageRecord.from_bytes(entry.key, entry.value))
        except DecodeError as e:
            logger.warning("scan_value_not_decoded", key=entry.key, reason=str(e))
            if self._metrics is not None:
                self._metrics.scan_decode_fallbacks_total.inc()
            return RawValue(entry.value.decode("utf-8", errors="replace"))
