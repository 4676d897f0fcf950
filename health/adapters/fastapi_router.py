# ============================================================================
# FASTAPI ROUTER ADAPTER
# ============================================================================
# EPOCH: 1 - SERVICE HEALTH
# STATUS: Infrastructure - FastAPI health endpoint
# PURPOSE: Mount the health handler on a FastAPI app or APIRouter
# CREATED: 19 OCT 2026
# ============================================================================
"""
FastAPI Router Adapter

    app = FastAPI()
    FastAPIRouterAdapter().register(app, "/health", HealthHandler())
"""

from typing import Union

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse

from health.adapters.base import RouterAdapter
from health.handler import HealthHandler


class FastAPIRouterAdapter(RouterAdapter):
    """Registers the health endpoint with add_api_route()."""

    framework = "fastapi"

    def register(
        self,
        server: Union[FastAPI, APIRouter],
        path: str,
        handler: HealthHandler,
    ) -> None:
        async def health_status(request: Request) -> JSONResponse:
            """
            Aggregated service health.

            Optional ?filter=<path>,<path> restricts the returned fields.
            """
            response = await handler.handle(request.query_params)
            return JSONResponse(status_code=response.status_code, content=response.body)

        server.add_api_route(
            path,
            health_status,
            methods=["GET"],
            tags=["Health"],
            response_class=JSONResponse,
        )


__all__ = [
    "FastAPIRouterAdapter",
]
