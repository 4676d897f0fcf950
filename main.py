# ============================================================================
# SERVICE HEALTH - FASTAPI APPLICATION
# ============================================================================
# EPOCH: 1 - SERVICE HEALTH
# STATUS: Core - FastAPI application entry point
# PURPOSE: Example service exposing the health endpoint
# CREATED: 19 OCT 2026
# ============================================================================
"""
Service Health FastAPI Application

Minimal service mounting GET /health. Real services register their own
connection checks (database, cache, queues) before serving traffic.

Usage:
    uvicorn main:app --host 0.0.0.0 --port 8000

Environment Variables:
    SERVICE_NAME / SERVICE_DESCRIPTION / SERVICE_VERSION: "service" section
    HEALTH_PATH: Route path (default /health)
    LOG_LEVEL / LOG_FORMAT: Logging level and "json" output
"""

import os

from fastapi import FastAPI

from __version__ import __version__, BUILD_DATE, EPOCH
from core.config import get_defaults
from core.logging import configure_logging, get_logger
from health import (
    HealthHandler,
    StatusEvaluator,
    expose_health_endpoint,
    get_registry,
)

configure_logging(
    level=os.environ.get("LOG_LEVEL", "INFO"),
    json_output=os.environ.get("LOG_FORMAT", "").lower() == "json",
)
logger = get_logger(__name__)


def create_app() -> FastAPI:
    """Build the FastAPI app with the health endpoint mounted."""
    defaults = get_defaults()

    app = FastAPI(
        title=defaults.service.name,
        description=defaults.service.description,
        version=defaults.service.version,
    )

    registry = get_registry()
    registry.add("process", lambda: True)

    handler = HealthHandler(StatusEvaluator(registry=registry))
    expose_health_endpoint(app, defaults.endpoint.path, "fastapi", handler)

    logger.info(f"Service health v{__version__} (Epoch {EPOCH}, Build {BUILD_DATE}) ready")
    return app


app = create_app()
