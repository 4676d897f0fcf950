# ============================================================================
# HEALTH CHECK EXCEPTIONS
# ============================================================================
# EPOCH: 1 - SERVICE HEALTH
# STATUS: Infrastructure - Error taxonomy
# PURPOSE: Exceptions raised by filtering and endpoint mounting
# CREATED: 19 OCT 2026
# ============================================================================
"""
Health Check Exceptions

Check failures and invalid check results are never raised; they are
carried inside the evaluation result. Only caller errors are exceptions.
"""

from typing import Iterable


class HealthCheckError(Exception):
    """Base class for health endpoint errors."""


class InvalidFilterPathError(HealthCheckError):
    """A requested filter path does not exist in the status document."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f'Invalid filter path "{path}"')

    @property
    def message(self) -> str:
        return str(self)


class UnsupportedFrameworkError(HealthCheckError, ValueError):
    """No router adapter is registered for the requested framework."""

    def __init__(self, framework: str, supported: Iterable[str]):
        self.framework = framework
        self.supported = tuple(supported)
        super().__init__(
            f"Unsupported framework: {framework!r} "
            f"(expected one of: {', '.join(self.supported)})"
        )


__all__ = [
    "HealthCheckError",
    "InvalidFilterPathError",
    "UnsupportedFrameworkError",
]
