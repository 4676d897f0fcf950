# ============================================================================
# HEALTH HANDLER TESTS
# ============================================================================
# EPOCH: 1 - SERVICE HEALTH
# STATUS: Tests - Request handling
# PURPOSE: Verify status codes and bodies independent of any framework
# CREATED: 19 OCT 2026
# ============================================================================
"""
Health Handler Tests

Covers the request state machine:
    evaluate -> FATAL (500) | filter -> invalid (400) | respond (200/500)

Run with:
    pytest tests/test_handler.py -v
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

from core.logging import get_current_context
from health.handler import HealthHandler


def _handle(handler, query=None):
    response = asyncio.run(handler.handle(query))
    return response.status_code, response.body


# ============================================================================
# UNFILTERED
# ============================================================================

class TestHealthHandler:
    """Tests for unfiltered requests."""

    def test_no_checks_registered(self, make_handler):
        status_code, body = _handle(make_handler())

        assert status_code == 200
        assert body["status"] == "ok"
        assert body["connections"] == {}

    def test_all_checks_healthy(self, registry, make_handler):
        one = MagicMock(return_value=True)
        two = MagicMock(return_value=True)
        registry.add("one", one)
        registry.add("two", two)

        status_code, body = _handle(make_handler())

        assert one.called and two.called
        assert status_code == 200
        assert body["status"] == "ok"
        assert body["connections"] == {"one": True, "two": True}

    def test_full_document_returned(self, make_handler):
        _, body = _handle(make_handler())

        for key in ("status", "uptime", "upSince", "service", "connections", "env", "git"):
            assert key in body
        for key in ("name", "description", "version"):
            assert key in body["service"]
        for key in ("nodeEnv", "nodeVersion", "processName", "pid", "cwd"):
            assert key in body["env"]
        for key in ("commitHash", "branchName", "tag"):
            assert key in body["git"]

    def test_failing_check(self, registry, make_handler):
        registry.add("one", lambda: True)
        registry.add("two", lambda: False)

        status_code, body = _handle(make_handler())

        assert status_code == 500
        assert body["status"] == "fail:two"
        assert body["connections"] == {"one": True, "two": False}

    def test_non_boolean_check(self, registry, make_handler):
        registry.add("one", lambda: True)
        registry.add("bad", MagicMock(return_value="not a bool"))

        status_code, body = _handle(make_handler())

        assert status_code == 500
        assert "bad" in body["message"]
        assert "status" not in body

    def test_raising_check(self, registry, make_handler):
        registry.add("db", AsyncMock(side_effect=ConnectionError("refused")))

        status_code, body = _handle(make_handler())

        assert status_code == 500
        assert "db" in body["message"]

    def test_evaluator_crash_becomes_500(self):
        evaluator = MagicMock()
        evaluator.evaluate = AsyncMock(side_effect=RuntimeError("boom"))

        status_code, body = _handle(HealthHandler(evaluator))

        assert status_code == 500
        assert body == {"message": "Health evaluation failed: boom"}

    def test_evaluator_cancelled_internally_becomes_500(self):
        evaluator = MagicMock()
        evaluator.evaluate = AsyncMock(side_effect=asyncio.CancelledError())

        status_code, body = _handle(HealthHandler(evaluator))

        assert status_code == 500
        assert body == {"message": "Health evaluation failed: cancelled"}

    def test_concurrent_requests_keep_own_request_id(self, registry, make_handler):
        seen = []

        async def slow():
            await asyncio.sleep(0.01)
            seen.append(get_current_context().request_id)
            return True

        registry.add("slow", slow)
        handler = make_handler()

        async def run():
            return await asyncio.gather(handler.handle(), handler.handle())

        responses = asyncio.run(run())

        assert [r.status_code for r in responses] == [200, 200]
        assert len(seen) == 2
        assert None not in seen
        assert len(set(seen)) == 2


# ============================================================================
# FILTERED
# ============================================================================

class TestHealthHandlerFilter:
    """Tests for ?filter= requests."""

    def test_single_path(self, registry, make_handler):
        registry.add("one", lambda: True)

        status_code, body = _handle(make_handler(), {"filter": "status"})

        assert status_code == 200
        assert body == {"status": "ok"}

    def test_multiple_paths(self, make_handler):
        status_code, body = _handle(make_handler(), {"filter": "status,env.nodeEnv"})

        assert status_code == 200
        assert list(body) == ["status", "env.nodeEnv"]

    def test_subtree(self, make_handler):
        _, body = _handle(make_handler(), {"filter": "git"})

        assert body == {"git": {"commitHash": "3f2c9e1", "branchName": "main", "tag": "v1.2.3"}}

    def test_unknown_path(self, make_handler):
        status_code, body = _handle(make_handler(), {"filter": "foo"})

        assert status_code == 400
        assert body == {"message": 'Invalid filter path "foo"'}

    def test_first_unknown_path_only(self, make_handler):
        status_code, body = _handle(make_handler(), {"filter": "status,foo,env.bar"})

        assert status_code == 400
        assert body == {"message": 'Invalid filter path "foo"'}

    def test_status_code_from_unfiltered_document(self, registry, make_handler):
        registry.add("db", lambda: False)

        status_code, body = _handle(make_handler(), {"filter": "service.name"})

        assert status_code == 500
        assert body == {"service.name": "orders"}

    def test_fatal_wins_over_filter(self, registry, make_handler):
        registry.add("bad", lambda: 42)

        status_code, body = _handle(make_handler(), {"filter": "foo"})

        assert status_code == 500
        assert "bad" in body["message"]

    def test_empty_filter_returns_full_document(self, make_handler):
        status_code, body = _handle(make_handler(), {"filter": ""})

        assert status_code == 200
        assert "git" in body and "env" in body

    def test_custom_filter_param(self, make_handler):
        handler = make_handler(filter_param="fields")

        _, body = _handle(handler, {"fields": "status", "filter": "foo"})

        assert body == {"status": "ok"}
