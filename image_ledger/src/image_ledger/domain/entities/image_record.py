"""ImageRecord entity and its JSON wire format.

An image record is small metadata about an image asset, stored as the
value under a caller-chosen ledger key. The key is the record's identity
and is not part of the serialized value.

Wire format (field casing is fixed for compatibility with stored data):

    {"docType": "img", "imageName": "...", "imageSize": "...", "Owner": "..."}

Fields other than these four are kept in ``extra`` and written back
unchanged, so updates never drop data added by other writers.

Round-trip law: ``ImageRecord.from_bytes(r.key, r.to_bytes()) == r`` for
every record ``r``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from typing import Any, ClassVar, Mapping

from image_ledger.domain.errors import DecodeError
from image_ledger.domain.value_objects import IMAGE_DOC_TYPE, RecordKey


@dataclass(frozen=True)
class ImageRecord:
    """Image metadata stored under a ledger key.

    Attributes:
        key: Ledger key (identity, never serialized).
        name: Free-form image name.
        size: Unit-bearing size text such as ``"1 MB"``; opaque to the core.
        owner: Principal currently owning the image.
        doc_type: Record type discriminator, always ``"img"``.
        extra: Stored fields not listed above, carried through unchanged.

    Example:
        >>> record = ImageRecord.new("IMG7", "Xray", "2 MB", "Ana")
        >>> record.to_bytes()
        b'{"docType":"img","imageName":"Xray","imageSize":"2 MB","Owner":"Ana"}'
    """

    key: RecordKey
    name: str
    size: str
    owner: str
    doc_type: str = field(default=IMAGE_DOC_TYPE)
    extra: Mapping[str, Any] = field(default_factory=dict, hash=False)

    FIELD_DOC_TYPE: ClassVar[str] = "docType"
    FIELD_NAME: ClassVar[str] = "imageName"
    FIELD_SIZE: ClassVar[str] = "imageSize"
    FIELD_OWNER: ClassVar[str] = "Owner"

    def __post_init__(self) -> None:
        """Validate the discriminator."""
        if self.doc_type != IMAGE_DOC_TYPE:
            raise ValueError(f"doc_type must be {IMAGE_DOC_TYPE!r}, got {self.doc_type!r}")

    @classmethod
    def new(cls, key: str, name: str, size: str, owner: str) -> ImageRecord:
        """Create a record with the fixed image discriminator."""
        return cls(key=RecordKey(key), name=name, size=size, owner=owner)

    def to_dict(self) -> dict[str, Any]:
        """Return the wire-format mapping (without the key)."""
        data: dict[str, Any] = {
            self.FIELD_DOC_TYPE: self.doc_type,
            self.FIELD_NAME: self.name,
            self.FIELD_SIZE: self.size,
            self.FIELD_OWNER: self.owner,
        }
        for name, value in self.extra.items():
            data.setdefault(name, value)
        return data

    def to_bytes(self) -> bytes:
        """Serialize to compact UTF-8 JSON for storage."""
        return json.dumps(
            self.to_dict(), separators=(",", ":"), ensure_ascii=False
        ).encode("utf-8")

    @classmethod
    def from_dict(cls, key: str, data: Any) -> ImageRecord:
        """Build a record from a decoded wire-format mapping.

        Raises:
            DecodeError: If the mapping is not a complete image record.
        """
        if not isinstance(data, dict):
            raise DecodeError(f"Record at {key} is not a JSON object")

        known = (cls.FIELD_DOC_TYPE, cls.FIELD_NAME, cls.FIELD_SIZE, cls.FIELD_OWNER)
        values: dict[str, str] = {}
        for name in known:
            if name not in data:
                raise DecodeError(f"Record at {key} is missing field {name}")
            value = data[name]
            if not isinstance(value, str):
                raise DecodeError(f"Record at {key} has non-string field {name}")
            values[name] = value

        if values[cls.FIELD_DOC_TYPE] != IMAGE_DOC_TYPE:
            raise DecodeError(
                f"Record at {key} has docType {values[cls.FIELD_DOC_TYPE]!r}, "
                f"expected {IMAGE_DOC_TYPE!r}"
            )

        return cls(
            key=RecordKey(key),
            name=values[cls.FIELD_NAME],
            size=values[cls.FIELD_SIZE],
            owner=values[cls.FIELD_OWNER],
            extra={name: value for name, value in data.items() if name not in known},
        )

    @classmethod
    def from_bytes(cls, key: str, data: bytes) -> ImageRecord:
        """Deserialize a stored value.

        Args:
            key: The ledger key the value was read from.
            data: Raw stored bytes.

        Returns:
            The decoded record.

        Raises:
            DecodeError: If the bytes are not UTF-8 JSON describing an image record.
        """
        try:
            decoded = json.loads(data.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise DecodeError(f"Record at {key} is not valid JSON: {e}") from e
        return cls.from_dict(key, decoded)

    def transfer(self, new_owner: str, new_name: str) -> ImageRecord:
        """Return a copy with owner and name replaced.

        Key, doc type, size and extra fields are carried over unchanged.
        """
        return replace(self, owner=new_owner, name=new_name)
