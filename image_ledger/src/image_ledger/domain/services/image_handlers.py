"""Record handlers for image assets.

Each handler has the same signature, ``(context, args) -> payload``, and
raises a ChaincodeError subclass on failure. Handlers keep no state
between invocations; everything they touch comes in through the
InvocationContext.

Operations:
    initLedger: Seed IMG0..IMG2 with fixed records
    UploadImage: Create or overwrite a record (key, name, size, owner)
    queryImage: Return the raw stored bytes for a key
    queryAllImgs: Return every record in IMG0..IMG999 as a JSON array
    transferImage: Replace owner and name of an existing record
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Sequence

from image_ledger.domain.entities import ImageRecord
from image_ledger.domain.errors import ArityError, InvalidArgumentError, NotFoundError
from image_ledger.domain.services.range_enumerator import RangeEnumerator
from image_ledger.domain.value_objects import IMAGE_KEY_RANGE, sequence_key
from image_ledger.infrastructure.logging import get_logger
from image_ledger.ports.inbound.contract import Handler, InvocationContext

if TYPE_CHECKING:
    from image_ledger.infrastructure.metrics import MetricsRegistry

logger = get_logger(__name__)

OP_INIT_LEDGER = "initLedger"
OP_UPLOAD_IMAGE = "UploadImage"
OP_QUERY_IMAGE = "queryImage"
OP_QUERY_ALL_IMAGES = "queryAllImgs"
OP_TRANSFER_IMAGE = "transferImage"

# (name, size, owner) for IMG0, IMG1, IMG2
SEED_IMAGES: tuple[tuple[str, str, str], ...] = (
    ("Typhoid", " 1 MB", "Tomoko"),
    ("Pnemonia", " 1 MB", "Jin"),
    ("Anemia", " 1 MB", "Max"),
)


def require_arity(args: Sequence[str], expected: int) -> None:
    """Raise ArityError unless exactly `expected` arguments were given."""
    if len(args) != expected:
        raise ArityError(expected=expected, received=len(args))


def require_text(args: Sequence[str]) -> None:
    """Raise InvalidArgumentError unless every argument encodes as UTF-8."""
    for position, arg in enumerate(args):
        try:
            arg.encode("utf-8")
        except UnicodeEncodeError:
            raise InvalidArgumentError(position) from None


class ImageHandlers:
    """The fixed set of image record handlers.

    Collaborators (the range enumerator and metrics) are set once at
    construction and never change, so instances are safe to share.
    """

    def __init__(
        self,
        enumerator: RangeEnumerator | None = None,
        metrics: MetricsRegistry | None = None,
    ) -> None:
        self._metrics = metrics
        self._enumerator = enumerator or RangeEnumerator(metrics=metrics)

    def handlers(self) -> dict[str, Handler]:
        """Return the operation-name to handler mapping."""
        return {
            OP_INIT_LEDGER: self.init_ledger,
            OP_UPLOAD_IMAGE: self.upload_image,
            OP_QUERY_IMAGE: self.query_image,
            OP_QUERY_ALL_IMAGES: self.query_all_images,
            OP_TRANSFER_IMAGE: self.transfer_image,
        }

    def _write(self, ctx: InvocationContext, record: ImageRecord) -> None:
        ctx.state.put_state(record.key, record.to_bytes())
        if self._metrics is not None:
            self._metrics.records_written_total.labels(operation=ctx.operation).inc()

    def init_ledger(self, ctx: InvocationContext, args: Sequence[str]) -> bytes:
        """Seed the ledger with the fixed bootstrap records.

        Arguments are ignored. Re-running rewrites the same content.
        """
        for index, (name, size, owner) in enumerate(SEED_IMAGES):
            record = ImageRecord.new(sequence_key(index), name, size, owner)
            self._write(ctx, record)
            logger.info("image_seeded", key=record.key, name=name, owner=owner)
        return b""

    def upload_image(self, ctx: InvocationContext, args: Sequence[str]) -> bytes:
        """Create or overwrite the record at args[0].

        Args:
            args: key, name, size, owner

        Raises:
            ArityError: Unless exactly 4 arguments are given.
            InvalidArgumentError: If an argument is not valid UTF-8 text.
        """
        require_arity(args, 4)
        require_text(args)
        key, name, size, owner = args
        record = ImageRecord.new(key, name, size, owner)
        self._write(ctx, record)
        logger.info("image_uploaded", key=key, owner=owner)
        return b""

    def query_image(self, ctx: InvocationContext, args: Sequence[str]) -> bytes:
        """Return the stored bytes at args[0] unchanged.

        Raises:
            ArityError: Unless exactly 1 argument is given.
            NotFoundError: If the key is absent or its value is empty.
        """
        require_arity(args, 1)
        key = args[0]
        value = ctx.state.get_state(key)
        if not value:
            raise NotFoundError(key)
        return value

    def query_all_images(self, ctx: InvocationContext, args: Sequence[str]) -> bytes:
        """Return every record in the image key range as a JSON array.

        Each element is ``{"Key": key, "Record": record-or-raw-text}``.
        Arguments are ignored.
        """
        entries = self._enumerator.scan(ctx.state, IMAGE_KEY_RANGE)
        return json.dumps(
            [entry.to_dict() for entry in entries],
            separators=(",", ":"),
            ensure_ascii=False,
        ).encode("utf-8")

    def transfer_image(self, ctx: InvocationContext, args: Sequence[str]) -> bytes:
        """Replace owner and name of the record at args[0].

        Args:
            args: key, new owner, new name

        Raises:
            ArityError: Unless exactly 3 arguments are given.
            InvalidArgumentError: If an argument is not valid UTF-8 text.
            NotFoundError: If no record is stored at the key.
            DecodeError: If the stored value is not an image record.
        """
        require_arity(args, 3)
        require_text(args)
        key, new_owner, new_name = args
        value = ctx.state.get_state(key)
        if not value:
            raise NotFoundError(key)

        current = ImageRecord.from_bytes(key, value)
        self._write(ctx, current.transfer(new_owner=new_owner, new_name=new_name))
        logger.info(
            "image_transferred",
            key=key,
            previous_owner=current.owner,
            owner=new_owner,
        )
        return b""
