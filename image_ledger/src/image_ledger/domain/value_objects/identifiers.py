"""Record keys and the key namespace used by image records.

Image records live under keys of the form ``IMG<n>`` where ``n`` is a
zero-based decimal index. Range enumeration scans the half-open interval
[IMAGE_RANGE_START, IMAGE_RANGE_END), which lexicographically covers the
sequential keys IMG0 through IMG998 (and any other key sorting between
them). The bound is not enforced on writes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NewType


RecordKey = NewType("RecordKey", str)
"""Ledger key under which a record is stored. Caller-chosen and immutable."""

IMAGE_KEY_PREFIX = "IMG"
"""Prefix for sequentially generated image keys."""

IMAGE_DOC_TYPE = "img"
"""Discriminator stored with every image record."""

IMAGE_RANGE_START = RecordKey("IMG0")
IMAGE_RANGE_END = RecordKey("IMG999")


def sequence_key(index: int, prefix: str = IMAGE_KEY_PREFIX) -> RecordKey:
    """Build the key for a sequence index.

    Args:
        index: Zero-based sequence index.
        prefix: Key prefix (defaults to the image prefix).

    Returns:
        The key, e.g. ``IMG0`` for index 0.

    Raises:
        ValueError: If index is negative.
    """
    if index < 0:
        raise ValueError(f"index must be non-negative, got {index}")
    return RecordKey(f"{prefix}{index}")


@dataclass(frozen=True, slots=True)
class KeyRange:
    """Half-open lexicographic key interval [start, end).

    Example:
        >>> r = KeyRange(RecordKey("IMG0"), RecordKey("IMG999"))
        >>> r.contains("IMG12")
        True
        >>> r.contains("IMG999")
        False
    """

    start: RecordKey
    end: RecordKey

    def __post_init__(self) -> None:
        """Validate the bounds."""
        if self.end < self.start:
            raise ValueError(f"range end {self.end!r} sorts before start {self.start!r}")

    def contains(self, key: str) -> bool:
        """Check whether key falls in [start, end)."""
        return self.start <= key < self.end


IMAGE_KEY_RANGE = KeyRange(IMAGE_RANGE_START, IMAGE_RANGE_END)
