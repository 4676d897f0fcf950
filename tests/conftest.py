# ============================================================================
# SHARED TEST FIXTURES
# ============================================================================
# EPOCH: 1 - SERVICE HEALTH
# STATUS: Tests - Shared fixtures
# PURPOSE: Isolated registries and deterministic evaluators
# CREATED: 19 OCT 2026
# ============================================================================

from datetime import datetime, timezone

import pytest

from core.config import reset_defaults
from health import (
    ConnectionCheckRegistry,
    EnvironmentProvider,
    HealthHandler,
    ServiceInfo,
    StaticProvenanceProvider,
    StatusEvaluator,
    reset_connection_check,
)

STARTED_AT = datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def _isolate_globals():
    """Clear process-wide registry and cached config around every test."""
    reset_defaults()
    reset_connection_check()
    yield
    reset_connection_check()
    reset_defaults()


@pytest.fixture
def registry():
    return ConnectionCheckRegistry()


@pytest.fixture
def make_evaluator(registry):
    """Factory for evaluators with fixed service identity and provenance."""
    evaluators = []

    def _make(**kwargs):
        kwargs.setdefault("registry", registry)
        kwargs.setdefault(
            "service",
            ServiceInfo(name="orders", description="Order API", version="1.2.3"),
        )
        kwargs.setdefault("environment_provider", EnvironmentProvider())
        kwargs.setdefault(
            "provenance_provider",
            StaticProvenanceProvider("3f2c9e1", "main", "v1.2.3"),
        )
        kwargs.setdefault("started_at", STARTED_AT)
        evaluator = StatusEvaluator(**kwargs)
        evaluators.append(evaluator)
        return evaluator

    yield _make

    for evaluator in evaluators:
        evaluator.close()


@pytest.fixture
def make_handler(make_evaluator):
    """Factory for handlers over the test registry."""

    def _make(**kwargs):
        filter_param = kwargs.pop("filter_param", None)
        return HealthHandler(make_evaluator(**kwargs), filter_param=filter_param)

    return _make
