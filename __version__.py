# ============================================================================
# VERSION - SERVICE HEALTH
# ============================================================================
# EPOCH: 1 - SERVICE HEALTH
# ============================================================================
"""
Version information for the service health endpoint.

This is the single source of truth for the package version.
Updated manually for each release.
"""
__version__ = "1.0.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Build metadata
BUILD_DATE = "2026-10-19"

EPOCH = 1
CODENAME = "Service Health"
