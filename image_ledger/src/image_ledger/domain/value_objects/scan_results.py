"""Tagged results produced by range enumeration.

A scanned value is either a decoded image record or, when the stored
bytes do not decode, the raw value as text. Enumeration stays total over
partially malformed ledgers instead of failing on the first bad entry.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    from image_ledger.domain.entities.image_record import ImageRecord


@dataclass(frozen=True, slots=True)
class DecodedRecord:
    """A scanned value that decoded to an image record."""

    record: ImageRecord

    def to_json_value(self) -> dict[str, Any]:
        """Return the record in its wire-format mapping."""
        return self.record.to_dict()


@dataclass(frozen=True, slots=True)
class RawValue:
    """A scanned value that could not be decoded, kept as text."""

    text: str

    def to_json_value(self) -> str:
        """Return the stored text as is."""
        return self.text


ScanValue = Union[DecodedRecord, RawValue]


@dataclass(frozen=True, slots=True)
class ScanEntry:
    """One (key, value) pair returned by range enumeration."""

    key: str
    value: ScanValue

    @property
    def is_decoded(self) -> bool:
        return isinstance(self.value, DecodedRecord)

    def to_dict(self) -> dict[str, Any]:
        """Render in the ``{"Key": ..., "Record": ...}`` shape clients expect."""
        return {"Key": self.key, "Record": self.value.to_json_value()}
