"""Integration tests for the REST development gateway."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from prometheus_client import CollectorRegistry

from image_ledger.adapters.inbound import create_app
from image_ledger.application import build_container
from image_ledger.application.wiring import Container
from image_ledger.infrastructure.config import Config


@pytest.fixture
def container(test_config: Config, collector_registry: CollectorRegistry) -> Container:
    return build_container(test_config, registry=collector_registry)


@pytest.fixture
def client(container: Container) -> TestClient:
    return TestClient(create_app(container))


@pytest.mark.integration
class TestWiring:
    """Tests for build_container."""

    def test_seed_on_start(self, container: Container) -> None:
        assert container.ledger.keys() == ["IMG0", "IMG1", "IMG2"]

    def test_no_seed_by_default(self, collector_registry: CollectorRegistry) -> None:
        container = build_container(Config(), registry=collector_registry)
        assert container.ledger.keys() == []


@pytest.mark.integration
class TestRestAPI:
    """Tests for the gateway endpoints."""

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_list_images(self, client: TestClient) -> None:
        response = client.get("/images")

        assert response.status_code == 200
        assert [item["Key"] for item in response.json()] == ["IMG0", "IMG1", "IMG2"]

    def test_get_image(self, client: TestClient) -> None:
        response = client.get("/images/IMG2")

        assert response.status_code == 200
        assert response.json()["imageName"] == "Anemia"

    def test_get_missing_image(self, client: TestClient) -> None:
        response = client.get("/images/IMG77")

        assert response.status_code == 404
        assert response.json()["detail"] == "IMG77 does not exist"

    def test_invoke_transfer(self, client: TestClient) -> None:
        response = client.post(
            "/invoke",
            json={"function": "transferImage", "args": ["IMG0", "Kai", "Cholera"]},
        )
        assert response.status_code == 200
        assert response.json()["status"] == 200

        record = client.get("/images/IMG0").json()
        assert record["Owner"] == "Kai"
        assert record["imageName"] == "Cholera"
        assert record["imageSize"] == " 1 MB"

    def test_invoke_failure_in_envelope(self, client: TestClient) -> None:
        response = client.post("/invoke", json={"function": "doesNotExist", "args": []})

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == 500
        assert body["message"] == "Received unknown function doesNotExist invocation"
        assert body["payload"] == ""

    def test_invoke_query_payload(self, client: TestClient) -> None:
        response = client.post("/invoke", json={"function": "queryImage", "args": ["IMG1"]})

        assert '"Owner":"Jin"' in response.json()["payload"]
