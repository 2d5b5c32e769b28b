"""Unit tests for build_container."""

from __future__ import annotations

from typing import Any

import pytest
from prometheus_client import CollectorRegistry

from image_ledger.application import wiring
from image_ledger.application.wiring import build_container
from image_ledger.infrastructure.config import Config, ObservabilityConfig


@pytest.mark.unit
class TestBuildContainer:
    """Tests for container wiring."""

    def test_observability_uses_config(
        self, monkeypatch: pytest.MonkeyPatch, collector_registry: CollectorRegistry
    ) -> None:
        """Tracing options come from the observability section."""
        captured: dict[str, Any] = {}
        monkeypatch.setattr(wiring, "setup_logging", lambda *args, **kwargs: None)
        monkeypatch.setattr(wiring, "setup_tracing", lambda **kwargs: captured.update(kwargs))
        config = Config(
            observability=ObservabilityConfig(
                otel_service_name="ledger-test",
                otel_endpoint="http://collector:4317",
                trace_console=True,
            )
        )

        build_container(config, registry=collector_registry, configure_observability=True)

        assert captured == {
            "service_name": "ledger-test",
            "otlp_endpoint": "http://collector:4317",
            "console_export": True,
        }

    def test_shared_ledger_does_not_record_calls(
        self, collector_registry: CollectorRegistry
    ) -> None:
        container = build_container(Config(), registry=collector_registry)

        for _ in range(50):
            container.chaincode.invoke(container.stub("queryAllImgs"))

        assert container.ledger.calls == []
        assert container.ledger.get_stats().iterators_opened == 50
