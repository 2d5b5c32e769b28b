"""Value objects for the image ledger domain.

Value objects are immutable types that represent domain concepts.
They have no identity - two value objects with the same attributes are equal.

Exports:
    Identifiers:
        - RecordKey: Type-safe ledger key
        - KeyRange: Half-open key interval for range scans
        - IMAGE_KEY_PREFIX, IMAGE_DOC_TYPE: Image namespace constants
        - IMAGE_RANGE_START, IMAGE_RANGE_END, IMAGE_KEY_RANGE: Scan bounds
        - sequence_key: Build ``IMG<n>`` keys

    Scan Results:
        - DecodedRecord, RawValue: Tagged scan values
        - ScanEntry: Key plus tagged value
"""

from image_ledger.domain.value_objects.identifiers import (
    IMAGE_DOC_TYPE,
    IMAGE_KEY_PREFIX,
    IMAGE_KEY_RANGE,
    IMAGE_RANGE_END,
    IMAGE_RANGE_START,
    KeyRange,
    RecordKey,
    sequence_key,
)
from image_ledger.domain.value_objects.scan_results import (
    DecodedRecord,
    RawValue,
    ScanEntry,
    ScanValue,
)

__all__ = [
    # Identifiers
    "RecordKey",
    "KeyRange",
    "IMAGE_KEY_PREFIX",
    "IMAGE_DOC_TYPE",
    "IMAGE_RANGE_START",
    "IMAGE_RANGE_END",
    "IMAGE_KEY_RANGE",
    "sequence_key",
    # Scan results
    "DecodedRecord",
    "RawValue",
    "ScanEntry",
    "ScanValue",
]
