# ============================================================================
# AIOHTTP ROUTER ADAPTER
# ============================================================================
# EPOCH: 1 - SERVICE HEALTH
# STATUS: Infrastructure - aiohttp.web health endpoint
# PURPOSE: Mount the health handler on an aiohttp web.Application
# CREATED: 19 OCT 2026
# ============================================================================
"""
aiohttp Router Adapter

For lightweight processes (workers, consumers) that only run a minimal
HTTP server for probes:

    app = web.Application()
    AioHttpRouterAdapter().register(app, "/health", HealthHandler())

    runner = web.AppRunner(app)
    await runner.setup()
    await web.TCPSite(runner, "0.0.0.0", 8000).start()
"""

from aiohttp import web

from health.adapters.base import RouterAdapter
from health.handler import HealthHandler


class AioHttpRouterAdapter(RouterAdapter):
    """Registers the health endpoint with router.add_get() and closes it on cleanup."""

    framework = "aiohttp"

    def register(self, server: web.Application, path: str, handler: HealthHandler) -> None:
        async def health_status(request: web.Request) -> web.Response:
            response = await handler.handle(request.query)
            return web.json_response(response.body, status=response.status_code)

        async def close_handler(app: web.Application) -> None:
            handler.close()

        server.router.add_get(path, health_status)
        server.on_cleanup.append(close_handler)


__all__ = [
    "AioHttpRouterAdapter",
]
