# ============================================================================
# ROUTER ADAPTER INTERFACE
# ============================================================================
# EPOCH: 1 - SERVICE HEALTH
# STATUS: Infrastructure - Framework shim interface
# PURPOSE: Narrow contract every framework adapter implements
# CREATED: 19 OCT 2026
# ============================================================================
"""
Router Adapter Interface

An adapter registers a GET route on a framework-specific server object and
delegates each request to a HealthHandler. It owns nothing else: query
parsing, evaluation and status codes all live in the handler.
"""

from abc import ABC, abstractmethod
from typing import Any

from health.handler import HealthHandler


class RouterAdapter(ABC):
    """
    Base class for framework adapters.

    Attributes:
        framework: Discriminator used by get_adapter()
    """

    framework: str = "unknown"

    @abstractmethod
    def register(self, server: Any, path: str, handler: HealthHandler) -> None:
        """
        Register GET `path` on `server`, answering with `handler`.

        Args:
            server: Framework application/router object
            path: Route path (e.g. "/health")
            handler: Framework-agnostic health handler
        """
        pass


__all__ = [
    "RouterAdapter",
]
