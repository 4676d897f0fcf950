# ============================================================================
# CONFIGURATION DEFAULTS
# ============================================================================
# EPOCH: 1 - SERVICE HEALTH
# STATUS: Core - Default configuration values
# PURPOSE: Centralized defaults for the health endpoint and service identity
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configuration Defaults

Provides defaults for the health endpoint. These can be overridden via
environment variables.

Design:
- Immutable dataclasses for defaults
- Environment variable overrides
- Type-safe access
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from __version__ import __version__


@dataclass(frozen=True)
class EndpointDefaults:
    """
    Defaults for mounting the health endpoint.

    Controls the route path, the framework adapter and check parallelism.
    """
    path: str = "/health"
    framework: str = "fastapi"
    filter_param: str = "filter"

    # Max checks evaluated at the same time
    max_parallel: int = 10

    @classmethod
    def from_env(cls) -> "EndpointDefaults":
        """Create from environment variables."""
        return cls(
            path=os.getenv("HEALTH_PATH", "/health"),
            framework=os.getenv("HEALTH_FRAMEWORK", "fastapi").lower(),
            filter_param=os.getenv("HEALTH_FILTER_PARAM", "filter"),
            max_parallel=int(os.getenv("HEALTH_MAX_PARALLEL", 10)),
        )


@dataclass(frozen=True)
class ServiceDefaults:
    """
    Static service identity reported under "service" in the status document.
    """
    name: str = "service"
    description: str = ""
    version: str = __version__

    # Environment variable reported as env.nodeEnv
    environment_var: str = "APP_ENV"

    @classmethod
    def from_env(cls) -> "ServiceDefaults":
        """Create from environment variables."""
        return cls(
            name=os.getenv("SERVICE_NAME", "service"),
            description=os.getenv("SERVICE_DESCRIPTION", ""),
            version=os.getenv("SERVICE_VERSION", __version__),
            environment_var=os.getenv("HEALTH_ENV_VAR", "APP_ENV"),
        )


# ============================================================================
# GLOBAL DEFAULTS INSTANCE
# ============================================================================

@dataclass
class Defaults:
    """Container for all default configurations."""
    endpoint: EndpointDefaults = field(default_factory=EndpointDefaults)
    service: ServiceDefaults = field(default_factory=ServiceDefaults)

    @classmethod
    def from_env(cls) -> "Defaults":
        """Create all defaults from environment variables."""
        return cls(
            endpoint=EndpointDefaults.from_env(),
            service=ServiceDefaults.from_env(),
        )


_defaults: Optional[Defaults] = None


def get_defaults() -> Defaults:
    """Get global defaults instance."""
    global _defaults
    if _defaults is None:
        _defaults = Defaults.from_env()
    return _defaults


def reset_defaults() -> None:
    """Reset defaults (for testing)."""
    global _defaults
    _defaults = None


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "EndpointDefaults",
    "ServiceDefaults",
    "Defaults",
    "get_defaults",
    "reset_defaults",
]
