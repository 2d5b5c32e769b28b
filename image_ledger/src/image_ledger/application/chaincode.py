"""ImageChaincode - entry points called by the host ledger runtime.

The host calls init() once when the contract is instantiated and
invoke() for every transaction. Both receive the invocation stub; the
contract itself holds nothing but its dispatcher.

Usage:
    from image_ledger.adapters.outbound import InMemoryStateAccessor, InvocationStub
    from image_ledger.application import ImageChaincode

    ledger = InMemoryStateAccessor()
    chaincode = ImageChaincode()
    chaincode.invoke(InvocationStub(ledger, "initLedger"))
    response = chaincode.invoke(InvocationStub(ledger, "queryImage", ["IMG1"]))
"""

from __future__ import annotations

from image_ledger.application.dispatcher import OperationDispatcher, build_dispatcher
from image_ledger.infrastructure.logging import get_logger
from image_ledger.ports.inbound.contract import Response
from image_ledger.ports.outbound.chaincode_stub import ChaincodeStub

logger = get_logger(__name__)


class ImageChaincode:
    """Chaincode for image records."""

    def __init__(self, dispatcher: OperationDispatcher | None = None) -> None:
        self._dispatcher = dispatcher or build_dispatcher()

    @property
    def dispatcher(self) -> OperationDispatcher:
        return self._dispatcher

    def init(self, stub: ChaincodeStub) -> Response:
        """Called on instantiation. Ledger seeding is a separate initLedger call."""
        logger.info("chaincode_instantiated")
        return Response.success()

    def invoke(self, stub: ChaincodeStub) -> Response:
        """Route the stub's function and parameters through the dispatcher."""
        function, params = stub.get_function_and_parameters()
        return self._dispatcher.dispatch(stub, function, params)
