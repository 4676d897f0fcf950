# ============================================================================
# SERVICE HEALTH - Azure Function App
# ============================================================================
# EPOCH: 1 - SERVICE HEALTH
# STATUS: Gateway - Health endpoint on Azure Functions
# PURPOSE: Azure Functions V2 entry point serving /api/health
# CREATED: 19 OCT 2026
# ============================================================================
"""
Service Health Function App

Azure Functions V2 entry point. The endpoint is served at
/api/<HEALTH_PATH> (default /api/health).
"""

import logging

import azure.functions as func

from core.config import get_defaults
from health import HealthHandler, StatusEvaluator, expose_health_endpoint, get_registry

app = func.FunctionApp(http_auth_level=func.AuthLevel.ANONYMOUS)

logger = logging.getLogger(__name__)

registry = get_registry()
registry.add("function_host", lambda: True)

expose_health_endpoint(
    app,
    path=get_defaults().endpoint.path,
    framework="azure",
    handler=HealthHandler(StatusEvaluator(registry=registry)),
)

logger.info("Service health function app ready")
