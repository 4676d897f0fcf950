# ============================================================================
# HEALTH CHECK MODULE
# ============================================================================
# EPOCH: 1 - SERVICE HEALTH
# STATUS: Infrastructure - Pluggable health endpoint
# PURPOSE: Connection check registry, aggregation, filtering and mounting
# CREATED: 19 OCT 2026
# ============================================================================
"""
Health Check Module

Aggregates user-supplied connection checks into one status document served
at GET /health on FastAPI, aiohttp or Azure Functions.

Architecture:
- ConnectionCheckRegistry: Named checks, insertion-ordered, thread-safe
- StatusEvaluator: Parallel execution and aggregation
- filter: ?filter=<dot.path>,... projection of the document
- HealthHandler: Status code and JSON body, framework-agnostic
- adapters: One RouterAdapter per framework

Usage:
    from health import add_connection_check, expose_health_endpoint

    add_connection_check("postgres", lambda: pool.check())
    expose_health_endpoint(app)                      # FastAPI
    expose_health_endpoint(web_app, "/health", "aiohttp")
"""

from health.core import (
    CheckOutcome,
    CheckResult,
    ConnectionCheck,
    EvaluationResult,
)
from health.exceptions import (
    HealthCheckError,
    InvalidFilterPathError,
    UnsupportedFrameworkError,
)
from health.models import (
    StatusDocument,
    ServiceInfo,
    EnvironmentInfo,
    GitInfo,
    ErrorResponse,
)
from health.registry import (
    ConnectionCheckRegistry,
    get_registry,
    add_connection_check,
    remove_connection_check,
    reset_connection_check,
    connection_check,
)
from health.providers import (
    EnvironmentProvider,
    GitProvenanceProvider,
    StaticProvenanceProvider,
)
from health.evaluator import StatusEvaluator
from health.filter import parse_filter, project
from health.handler import HealthHandler, HealthResponse
from health.adapters import RouterAdapter, get_adapter, expose_health_endpoint

__all__ = [
    # Core types
    "CheckOutcome",
    "CheckResult",
    "ConnectionCheck",
    "EvaluationResult",
    # Errors
    "HealthCheckError",
    "InvalidFilterPathError",
    "UnsupportedFrameworkError",
    # Models
    "StatusDocument",
    "ServiceInfo",
    "EnvironmentInfo",
    "GitInfo",
    "ErrorResponse",
    # Registry
    "ConnectionCheckRegistry",
    "get_registry",
    "add_connection_check",
    "remove_connection_check",
    "reset_connection_check",
    "connection_check",
    # Providers
    "EnvironmentProvider",
    "GitProvenanceProvider",
    "StaticProvenanceProvider",
    # Evaluation
    "StatusEvaluator",
    "parse_filter",
    "project",
    # Handler & mounting
    "HealthHandler",
    "HealthResponse",
    "RouterAdapter",
    "get_adapter",
    "expose_health_endpoint",
]
