"""Pytest configuration and fixtures for image_ledger tests."""

from __future__ import annotations

import pytest
from prometheus_client import CollectorRegistry

from image_ledger.adapters.outbound import InMemoryStateAccessor
from image_ledger.application import ImageChaincode, build_dispatcher
from image_ledger.application.dispatcher import OperationDispatcher
from image_ledger.infrastructure.config import Config, LedgerConfig
from image_ledger.infrastructure.metrics import MetricsRegistry


@pytest.fixture
def ledger() -> InMemoryStateAccessor:
    """Provide an empty in-memory ledger that records accessor calls."""
    return InMemoryStateAccessor(record_calls=True)


@pytest.fixture
def collector_registry() -> CollectorRegistry:
    """Provide a separate Prometheus registry to avoid conflicts between tests."""
    return CollectorRegistry(auto_describe=True)


@pytest.fixture
def metrics_registry(collector_registry: CollectorRegistry) -> MetricsRegistry:
    """Provide a fresh metrics registry for each test."""
    return MetricsRegistry(registry=collector_registry)


@pytest.fixture
def dispatcher(metrics_registry: MetricsRegistry) -> OperationDispatcher:
    """Provide a dispatcher with the image handlers and isolated metrics."""
    return build_dispatcher(metrics=metrics_registry)


@pytest.fixture
def chaincode(dispatcher: OperationDispatcher) -> ImageChaincode:
    """Provide a chaincode instance."""
    return ImageChaincode(dispatcher)


@pytest.fixture
def test_config() -> Config:
    """Provide a configuration that seeds the ledger on start."""
    return Config(ledger=LedgerConfig(seed_on_start=True))


# Markers for test categories
def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests")
