# ============================================================================
# CORE MODULE
# ============================================================================
# EPOCH: 1 - SERVICE HEALTH
# STATUS: Core module initialization
# PURPOSE: Shared logging and configuration for the health endpoint
# LAST_REVIEWED: 19 OCT 2026
# ============================================================================

from core.config import get_defaults, reset_defaults
from core.logging import configure_logging, get_logger, log_context

__all__ = [
    # Config
    "get_defaults",
    "reset_defaults",
    # Logging
    "configure_logging",
    "get_logger",
    "log_context",
]
