# ============================================================================
# HEALTH CHECK CORE TYPES
# ============================================================================
# EPOCH: 1 - SERVICE HEALTH
# STATUS: Infrastructure - Check outcome types
# PURPOSE: Connection check signature, per-check results, evaluation result
# CREATED: 19 OCT 2026
# ============================================================================
"""
Health Check Core Types

A connection check is any zero-argument callable returning a boolean,
either directly or through an awaitable.

Outcome per check (tagged, never inferred later from a raw value):
- healthy: returned True
- unhealthy: returned False
- invalid: returned anything that is not a bool, or raised

Aggregation:
- any invalid check makes the whole evaluation FATAL
- otherwise "ok" when every check is healthy, else "fail:<names>"
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, List, Optional, Union

from health.models import STATUS_FAIL_PREFIX, STATUS_OK, StatusDocument


ConnectionCheck = Callable[[], Union[bool, Awaitable[bool]]]


class CheckOutcome(str, Enum):
    """Classification of a single connection check run."""
    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
    INVALID = "invalid"


@dataclass
class CheckResult:
    """Result from a single connection check."""
    name: str
    outcome: CheckOutcome
    value: Any = None
    error: Optional[str] = None
    duration_ms: float = 0.0

    @classmethod
    def classify(cls, name: str, value: Any) -> "CheckResult":
        """Classify a returned value. Only a real bool counts."""
        if value is True:
            return cls(name=name, outcome=CheckOutcome.HEALTHY, value=True)
        if value is False:
            return cls(name=name, outcome=CheckOutcome.UNHEALTHY, value=False)
        return cls(
            name=name,
            outcome=CheckOutcome.INVALID,
            value=value,
            error=f"expected a boolean, got {type(value).__name__}",
        )

    @classmethod
    def from_exception(cls, name: str, e: BaseException) -> "CheckResult":
        """Create invalid result from exception."""
        return cls(
            name=name,
            outcome=CheckOutcome.INVALID,
            error=f"{type(e).__name__}: {e}",
        )

    @property
    def is_valid(self) -> bool:
        return self.outcome != CheckOutcome.INVALID


def build_status(results: List[CheckResult]) -> str:
    """Build the status string from valid results, keeping their order."""
    failing = [r.name for r in results if r.outcome == CheckOutcome.UNHEALTHY]
    if not failing:
        return STATUS_OK
    return STATUS_FAIL_PREFIX + ",".join(failing)


@dataclass
class EvaluationResult:
    """
    Outcome of one evaluation: a status document, or FATAL.

    FATAL carries the names of the checks that returned a non-boolean
    or raised, in registration order.
    """
    document: Optional[StatusDocument] = None
    invalid_checks: List[str] = field(default_factory=list)
    checks: List[CheckResult] = field(default_factory=list)

    @property
    def is_fatal(self) -> bool:
        return bool(self.invalid_checks)

    @property
    def message(self) -> Optional[str]:
        """Error message naming the offending checks (FATAL only)."""
        if not self.is_fatal:
            return None
        return f"Invalid connection check result: {', '.join(self.invalid_checks)}"


__all__ = [
    "ConnectionCheck",
    "STATUS_OK",
    "STATUS_FAIL_PREFIX",
    "CheckOutcome",
    "CheckResult",
    "EvaluationResult",
    "build_status",
]
