# ============================================================================
# CORE TESTS
# ============================================================================
# EPOCH: 1 - SERVICE HEALTH
# STATUS: Tests - Configuration and structured logging
# PURPOSE: Verify environment overrides and log formatting
# CREATED: 19 OCT 2026
# ============================================================================
"""
Core Tests

Run with:
    pytest tests/test_core.py -v
"""

import asyncio
import json
import logging

from __version__ import __version__
from core.config import EndpointDefaults, ServiceDefaults, get_defaults, reset_defaults
from core.logging import (
    HumanFormatter,
    StructuredFormatter,
    get_current_context,
    get_logger,
    log_context,
)


def _make_record(msg="Evaluating %s", args=("health",)):
    return logging.LogRecord("health.handler", logging.INFO, __file__, 10, msg, args, None)


# ============================================================================
# CONFIGURATION
# ============================================================================

class TestDefaults:
    """Tests for configuration defaults."""

    def test_builtin_defaults(self):
        endpoint = EndpointDefaults()
        service = ServiceDefaults()

        assert endpoint.path == "/health"
        assert endpoint.framework == "fastapi"
        assert endpoint.filter_param == "filter"
        assert service.version == __version__
        assert service.environment_var == "APP_ENV"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("HEALTH_PATH", "/status")
        monkeypatch.setenv("HEALTH_FRAMEWORK", "AIOHTTP")
        monkeypatch.setenv("HEALTH_MAX_PARALLEL", "3")
        monkeypatch.setenv("SERVICE_NAME", "orders")
        monkeypatch.setenv("SERVICE_VERSION", "9.9.9")

        defaults = get_defaults()

        assert defaults.endpoint.path == "/status"
        assert defaults.endpoint.framework == "aiohttp"
        assert defaults.endpoint.max_parallel == 3
        assert defaults.service.name == "orders"
        assert defaults.service.version == "9.9.9"

    def test_cached_until_reset(self, monkeypatch):
        first = get_defaults()
        monkeypatch.setenv("SERVICE_NAME", "changed")

        assert get_defaults() is first

        reset_defaults()
        assert get_defaults().service.name == "changed"


# ============================================================================
# LOGGING
# ============================================================================

class TestStructuredLogging:
    """Tests for formatters and logging context."""

    def test_json_formatter_includes_context(self):
        with log_context(request_id="req-1", check_name="db"):
            data = json.loads(StructuredFormatter().format(_make_record()))

        assert data["message"] == "Evaluating health"
        assert data["level"] == "INFO"
        assert data["logger"] == "health.handler"
        assert data["context"] == {"request_id": "req-1", "check_name": "db"}

    def test_human_formatter(self):
        with log_context(request_id="req-1"):
            line = HumanFormatter().format(_make_record())

        assert "INFO" in line
        assert "[request=req-1]" in line
        assert line.endswith("Evaluating health")

    def test_nested_context_restored(self):
        with log_context(request_id="outer"):
            with log_context(check_name="db") as inner:
                assert inner.request_id == "outer"
                assert inner.check_name == "db"
            assert get_current_context().check_name is None

        assert get_current_context().request_id is None

    def test_context_isolated_between_tasks(self):
        async def request(request_id):
            with log_context(request_id=request_id):
                await asyncio.sleep(0.01)
                return get_current_context().request_id

        async def run():
            return await asyncio.gather(request("req-a"), request("req-b"))

        assert asyncio.run(run()) == ["req-a", "req-b"]
        assert get_current_context().request_id is None

    def test_context_logger_adds_fields(self, caplog):
        logger = get_logger("health.test")

        with caplog.at_level(logging.INFO, logger="health.test"):
            with log_context(request_id="req-9"):
                logger.info("hello", extra={"checks": 2})

        record = caplog.records[-1]
        assert record.extra == {"checks": 2, "request_id": "req-9"}
