"""Inbound adapters for the image ledger.

Inbound adapters handle incoming requests and convert them to
chaincode invocations.

Exports:
    REST API:
        - create_app: Create a FastAPI application
        - run_server: Run the REST API server
        - InvokeRequest, InvokeResponse: Request/response models
"""

from image_ledger.adapters.inbound.rest_api import (
    InvokeRequest,
    InvokeResponse,
    create_app,
    run_server,
)

__all__ = [
    "create_app",
    "run_server",
    "InvokeRequest",
    "InvokeResponse",
]
