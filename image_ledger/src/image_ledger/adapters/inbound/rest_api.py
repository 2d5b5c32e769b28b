"""REST API adapter for the image ledger.

This module provides a FastAPI-based development gateway that submits
invocations to the chaincode against the in-memory ledger. It plays the
part of the client SDK and peer during local development; it is not a
ledger node.

Endpoints:
    GET /health - Health check
    POST /invoke - Invoke any operation by name
    GET /images - Enumerate all image records
    GET /images/{key} - Fetch one image record

Usage:
    from image_ledger.adapters.inbound.rest_api import create_app
    from image_ledger.application import build_container

    app = create_app(build_container())
    # Run with uvicorn: uvicorn app:app --host 0.0.0.0 --port 8000
"""

from __future__ import annotations

import json
from typing import Any

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from image_ledger import __version__
from image_ledger.application.wiring import Container, build_container
from image_ledger.domain.services import OP_QUERY_ALL_IMAGES, OP_QUERY_IMAGE
from image_ledger.ports.inbound.contract import Response


class InvokeRequest(BaseModel):
    """Request model for an invocation."""

    function: str = Field(..., description="Operation name, e.g. queryImage")
    args: list[str] = Field(default_factory=list, description="Ordered string arguments")


class InvokeResponse(BaseModel):
    """Response model mirroring the chaincode envelope."""

    status: int = Field(..., description="200 on success, 500 on failure")
    message: str = Field("", description="Error message on failure")
    payload: str = Field("", description="Payload decoded as UTF-8 text")


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")


def _to_invoke_response(response: Response) -> InvokeResponse:
    return InvokeResponse(
        status=int(response.status),
        message=response.message,
        payload=response.payload.decode("utf-8", errors="replace"),
    )


def create_app(container: Container) -> FastAPI:
    """Create a FastAPI application for the image ledger.

    Args:
        container: Wired components (ledger, chaincode, metrics).

    Returns:
        A configured FastAPI application.
    """
    app = FastAPI(
        title="Image Ledger API",
        description="Development gateway for image ledger invocations",
        version=__version__,
    )

    def invoke(function: str, args: list[str]) -> Response:
        return container.chaincode.invoke(container.stub(function, args))

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(status="healthy", version=__version__)

    @app.post("/invoke", response_model=InvokeResponse, tags=["Chaincode"])
    async def invoke_operation(request: InvokeRequest) -> InvokeResponse:
        """Invoke an operation by name.

        Failures are reported in the envelope (status 500), not as HTTP
        errors, matching what a chaincode client receives.
        """
        return _to_invoke_response(invoke(request.function, request.args))

    @app.get("/images", tags=["Images"])
    async def list_images() -> list[dict[str, Any]]:
        """Enumerate every record in the image key range."""
        response = invoke(OP_QUERY_ALL_IMAGES, [])
        if not response.ok:
            raise HTTPException(status_code=500, detail=response.message)
        return json.loads(response.payload)

    @app.get("/images/{key}", tags=["Images"])
    async def get_image(key: str) -> Any:
        """Fetch one record; the stored JSON is returned as-is."""
        response = invoke(OP_QUERY_IMAGE, [key])
        if not response.ok:
            raise HTTPException(status_code=404, detail=response.message)
        try:
            return json.loads(response.payload)
        except ValueError:
            return response.payload.decode("utf-8", errors="replace")

    return app


def run_server(
    container: Container | None = None,
    host: str | None = None,
    port: int | None = None,
) -> None:
    """Run the REST API server.

    Args:
        container: Wired components; built from the environment if None.
        host: Host to bind to (defaults to config).
        port: Port to bind to (defaults to config).
    """
    import uvicorn

    container = container or build_container(configure_observability=True)
    app = create_app(container)
    uvicorn.run(
        app,
        host=host or container.config.server.host,
        port=port or container.config.server.port,
    )


if __name__ == "__main__":
    run_server()
