# ============================================================================
# CONFIGURATION MODULE
# ============================================================================
# EPOCH: 1 - SERVICE HEALTH
# STATUS: Core - Configuration and defaults
# PURPOSE: Centralized configuration management
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configuration Module

Provides centralized configuration and defaults for the health endpoint.
"""

from core.config.defaults import (
    EndpointDefaults,
    ServiceDefaults,
    Defaults,
    get_defaults,
    reset_defaults,
)

__all__ = [
    "EndpointDefaults",
    "ServiceDefaults",
    "Defaults",
    "get_defaults",
    "reset_defaults",
]
