"""Unit tests for key identifiers and scan result value objects."""

from __future__ import annotations

import pytest

from image_ledger.domain.entities import ImageRecord
from image_ledger.domain.value_objects import (
    IMAGE_KEY_RANGE,
    DecodedRecord,
    KeyRange,
    RawValue,
    RecordKey,
    ScanEntry,
    sequence_key,
)


class TestSequenceKey:
    """Tests for sequence_key."""

    def test_zero_based(self) -> None:
        assert sequence_key(0) == "IMG0"
        assert sequence_key(12) == "IMG12"

    def test_custom_prefix(self) -> None:
        assert sequence_key(3, prefix="DOC") == "DOC3"

    def test_negative_index(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            sequence_key(-1)


class TestKeyRange:
    """Tests for KeyRange."""

    def test_image_range_bounds(self) -> None:
        assert IMAGE_KEY_RANGE.start == "IMG0"
        assert IMAGE_KEY_RANGE.end == "IMG999"

    def test_half_open(self) -> None:
        assert IMAGE_KEY_RANGE.contains("IMG0")
        assert IMAGE_KEY_RANGE.contains("IMG998")
        assert not IMAGE_KEY_RANGE.contains("IMG999")

    def test_lexicographic_not_numeric(self) -> None:
        """IMG1000 sorts between IMG1 and IMG2, so it is inside the range."""
        assert IMAGE_KEY_RANGE.contains("IMG1000")
        assert not IMAGE_KEY_RANGE.contains("IMG9990")

    def test_inverted_range(self) -> None:
        with pytest.raises(ValueError, match="sorts before"):
            KeyRange(RecordKey("B"), RecordKey("A"))


class TestScanEntry:
    """Tests for tagged scan entries."""

    def test_decoded_entry(self) -> None:
        record = ImageRecord.new("IMG0", "Typhoid", " 1 MB", "Tomoko")
        entry = ScanEntry(key="IMG0", value=DecodedRecord(record))

        assert entry.is_decoded
        assert entry.to_dict() == {
            "Key": "IMG0",
            "Record": {
                "docType": "img",
                "imageName": "Typhoid",
                "imageSize": " 1 MB",
                "Owner": "Tomoko",
            },
        }

    def test_raw_entry(self) -> None:
        entry = ScanEntry(key="IMG5", value=RawValue("garbage"))

        assert not entry.is_decoded
        assert entry.to_dict() == {"Key": "IMG5", "Record": "garbage"}
