"""Domain services for business logic.

Services implement the record handlers and the range-enumeration
protocol on top of the ImageRecord entity and the State Accessor port.
"""

from image_ledger.domain.services.image_handlers import (
    OP_INIT_LEDGER,
    OP_QUERY_ALL_IMAGES,
    OP_QUERY_IMAGE,
    OP_TRANSFER_IMAGE,
    OP_UPLOAD_IMAGE,
    SEED_IMAGES,
    ImageHandlers,
    require_arity,
    require_text,
)
from image_ledger.domain.services.range_enumerator import RangeEnumerator

__all__ = [
    "ImageHandlers",
    "RangeEnumerator",
    "require_arity",
    "require_text",
    "SEED_IMAGES",
    "OP_INIT_LEDGER",
    "OP_UPLOAD_IMAGE",
    "OP_QUERY_IMAGE",
    "OP_QUERY_ALL_IMAGES",
    "OP_TRANSFER_IMAGE",
]
