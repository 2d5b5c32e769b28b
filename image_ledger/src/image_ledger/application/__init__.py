"""Application layer for the image ledger.

The application layer turns host invocations into handler calls.

Exports:
    Dispatcher:
        - OperationDispatcher: Frozen name-to-handler routing with envelopes
        - build_dispatcher: Dispatcher with the image handlers registered
    Chaincode:
        - ImageChaincode: init/invoke entry points for the host runtime
    Wiring:
        - build_container: DI container for the gateway
"""

from image_ledger.application.chaincode import ImageChaincode
from image_ledger.application.dispatcher import OperationDispatcher, build_dispatcher
from image_ledger.application.wiring import build_container

__all__ = [
    "ImageChaincode",
    "OperationDispatcher",
    "build_dispatcher",
    "build_container",
]
