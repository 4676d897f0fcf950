# ============================================================================
# AZURE FUNCTIONS ROUTER ADAPTER
# ============================================================================
# EPOCH: 1 - SERVICE HEALTH
# STATUS: Infrastructure - Azure Functions V2 health endpoint
# PURPOSE: Mount the health handler on a FunctionApp or Blueprint
# CREATED: 19 OCT 2026
# ============================================================================
"""
Azure Functions Router Adapter

Registers an anonymous GET HTTP trigger. Azure prefixes routes with the
host's routePrefix (default "api"), so "/health" is served at /api/health.

    app = func.FunctionApp(http_auth_level=func.AuthLevel.ANONYMOUS)
    AzureFunctionsRouterAdapter().register(app, "/health", HealthHandler())
"""

import json
from typing import Awaitable, Callable, Union

import azure.functions as func

from health.adapters.base import RouterAdapter
from health.handler import HealthHandler

HttpFunction = Callable[[func.HttpRequest], Awaitable[func.HttpResponse]]


def _json_response(data: dict, status_code: int = 200) -> func.HttpResponse:
    """Create JSON HTTP response."""
    return func.HttpResponse(
        json.dumps(data, default=str),
        status_code=status_code,
        headers={"Content-Type": "application/json"},
    )


class AzureFunctionsRouterAdapter(RouterAdapter):
    """
    Registers the health endpoint as an HTTP-triggered function.

    Args:
        function_name: Function name, unique within the function app
    """

    framework = "azure"

    def __init__(self, function_name: str = "health"):
        self.function_name = function_name

    def build_function(self, handler: HealthHandler) -> HttpFunction:
        """Build the HTTP trigger body for `handler`."""

        async def health_status(req: func.HttpRequest) -> func.HttpResponse:
            response = await handler.handle(req.params)
            return _json_response(response.body, status_code=response.status_code)

        return health_status

    def register(
        self,
        server: Union[func.FunctionApp, func.Blueprint],
        path: str,
        handler: HealthHandler,
    ) -> None:
        route = server.route(
            route=path.strip("/"),
            methods=["GET"],
            auth_level=func.AuthLevel.ANONYMOUS,
        )
        server.function_name(name=self.function_name)(
            route(self.build_function(handler))
        )


__all__ = [
    "AzureFunctionsRouterAdapter",
]
