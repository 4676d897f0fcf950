# ============================================================================
# ROUTER ADAPTERS
# ============================================================================
# EPOCH: 1 - SERVICE HEALTH
# STATUS: Infrastructure - Framework adapter selection
# PURPOSE: Resolve a framework name to its adapter and mount the endpoint
# CREATED: 19 OCT 2026
# ============================================================================
"""
Router Adapters

Supported frameworks:
- "fastapi": FastAPI app or APIRouter (default)
- "aiohttp": aiohttp web.Application
- "azure": Azure Functions V2 FunctionApp or Blueprint

Adapter modules are imported on first use, so a service only needs the
framework it actually runs on.
"""

import importlib
import logging
from typing import Any, Dict, Optional, Tuple

from core.config import get_defaults
from health.adapters.base import RouterAdapter
from health.exceptions import UnsupportedFrameworkError
from health.handler import HealthHandler

logger = logging.getLogger(__name__)

_ADAPTERS: Dict[str, Tuple[str, str]] = {
    "fastapi": ("health.adapters.fastapi_router", "FastAPIRouterAdapter"),
    "aiohttp": ("health.adapters.aiohttp_router", "AioHttpRouterAdapter"),
    "azure": ("health.adapters.azure_blueprint", "AzureFunctionsRouterAdapter"),
}


def get_adapter(framework: str) -> RouterAdapter:
    """
    Get a router adapter by framework name.

    Raises:
        UnsupportedFrameworkError: If no adapter exists for `framework`
    """
    key = (framework or "").lower()
    if key not in _ADAPTERS:
        raise UnsupportedFrameworkError(framework, _ADAPTERS)

    module_name, class_name = _ADAPTERS[key]
    module = importlib.import_module(module_name)
    return getattr(module, class_name)()


def expose_health_endpoint(
    server: Any,
    path: Optional[str] = None,
    framework: Optional[str] = None,
    handler: Optional[HealthHandler] = None,
) -> HealthHandler:
    """
    Mount the health endpoint on `server`.

    Args:
        server: Framework application/router object
        path: Route path (HEALTH_PATH, default "/health")
        framework: "fastapi", "aiohttp" or "azure" (HEALTH_FRAMEWORK, default "fastapi")
        handler: Handler to mount (default: handler over the process-wide registry)

    Returns:
        The mounted HealthHandler
    """
    defaults = get_defaults().endpoint
    path = path or defaults.path
    framework = framework or defaults.framework

    adapter = get_adapter(framework)
    handler = handler or HealthHandler()
    adapter.register(server, path, handler)

    logger.info(f"Health endpoint mounted at GET {path} ({adapter.framework})")
    return handler


__all__ = [
    "RouterAdapter",
    "get_adapter",
    "expose_health_endpoint",
]
