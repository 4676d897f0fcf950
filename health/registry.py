# ============================================================================
# CONNECTION CHECK REGISTRY
# ============================================================================
# EPOCH: 1 - SERVICE HEALTH
# STATUS: Infrastructure - Connection check registration
# PURPOSE: Register named connection checks and hand out snapshots
# CREATED: 19 OCT 2026
# ============================================================================
"""
Connection Check Registry

Maps check names to zero-argument callables returning a boolean.

Ordering:
- Checks are evaluated and reported in insertion order.
- Re-registering a name replaces the callable in place; the name keeps
  its original position.

Concurrency:
- Mutations build a new mapping and swap it in under a lock, so a
  snapshot always sees a complete before- or after-state.
- No lock is held while checks run.

Usage:
    # Explicit registry (preferred, one per app or test)
    registry = ConnectionCheckRegistry()
    registry.add("postgres", lambda: db.ping())

    # Process-wide default registry
    add_connection_check("redis", redis_client.ping)

    @connection_check("queue")
    async def queue_reachable() -> bool:
        ...
"""

import logging
import threading
from typing import Callable, Dict, Optional, Tuple

from health.core import ConnectionCheck

logger = logging.getLogger(__name__)


class ConnectionCheckRegistry:
    """
    Thread-safe registry of connection checks.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._checks: Dict[str, ConnectionCheck] = {}

    def add(self, name: str, check: ConnectionCheck) -> None:
        """
        Register a connection check, replacing any check with the same name.

        Args:
            name: Non-empty check name, reported under "connections"
            check: Zero-argument callable returning a bool (or awaitable bool)

        Raises:
            ValueError: If name is empty
            TypeError: If check is not callable
        """
        if not isinstance(name, str) or not name:
            raise ValueError("Connection check name must be a non-empty string")
        if not callable(check):
            raise TypeError(f"Connection check {name!r} must be callable")

        with self._lock:
            if name in self._checks:
                logger.warning(f"Overwriting connection check: {name}")
            checks = dict(self._checks)
            checks[name] = check
            self._checks = checks

        logger.debug(f"Registered connection check: {name}")

    def remove(self, name: str) -> bool:
        """
        Remove a connection check by name.

        Returns:
            True if check was removed
        """
        with self._lock:
            if name not in self._checks:
                return False
            checks = dict(self._checks)
            del checks[name]
            self._checks = checks
        return True

    def reset(self) -> None:
        """Remove all registered checks."""
        with self._lock:
            self._checks = {}

    def get(self, name: str) -> Optional[ConnectionCheck]:
        """Get connection check by name."""
        return self._checks.get(name)

    def snapshot(self) -> Tuple[Tuple[str, ConnectionCheck], ...]:
        """Current checks as (name, check) pairs, in insertion order."""
        with self._lock:
            return tuple(self._checks.items())

    def names(self) -> Tuple[str, ...]:
        """Registered check names, in insertion order."""
        with self._lock:
            return tuple(self._checks)

    def __len__(self) -> int:
        return len(self._checks)

    def __contains__(self, name: str) -> bool:
        return name in self._checks


# ============================================================================
# GLOBAL REGISTRY & HELPERS
# ============================================================================

_registry: Optional[ConnectionCheckRegistry] = None
_registry_lock = threading.Lock()


def get_registry() -> ConnectionCheckRegistry:
    """Get the process-wide connection check registry."""
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                _registry = ConnectionCheckRegistry()
    return _registry


def add_connection_check(name: str, check: ConnectionCheck) -> None:
    """Register a check on the process-wide registry."""
    get_registry().add(name, check)


def remove_connection_check(name: str) -> bool:
    """Remove a check from the process-wide registry."""
    return get_registry().remove(name)


def reset_connection_check() -> None:
    """Remove every check from the process-wide registry (test teardown)."""
    get_registry().reset()


def connection_check(
    name: Optional[str] = None,
    registry: Optional[ConnectionCheckRegistry] = None,
) -> Callable[[ConnectionCheck], ConnectionCheck]:
    """
    Decorator to register a function as a connection check.

    Args:
        name: Check name (defaults to the function name)
        registry: Target registry (defaults to the process-wide one)

    Example:
        @connection_check("postgres")
        async def postgres_reachable() -> bool:
            ...
    """
    def decorator(func: ConnectionCheck) -> ConnectionCheck:
        (registry or get_registry()).add(name or func.__name__, func)
        return func

    return decorator


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "ConnectionCheckRegistry",
    "get_registry",
    "add_connection_check",
    "remove_connection_check",
    "reset_connection_check",
    "connection_check",
]
