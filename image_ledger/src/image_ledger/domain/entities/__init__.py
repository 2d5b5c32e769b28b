"""Domain entities for the image ledger.

Exports:
    ImageRecord: Image metadata stored under a ledger key, with its JSON codec.
"""

from image_ledger.domain.entities.image_record import ImageRecord

__all__ = [
    "ImageRecord",
]
