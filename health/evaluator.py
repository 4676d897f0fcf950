# ============================================================================
# STATUS EVALUATOR
# ============================================================================
# EPOCH: 1 - SERVICE HEALTH
# STATUS: Infrastructure - Connection check execution and aggregation
# PURPOSE: Run every registered check and build the status document
# CREATED: 19 OCT 2026
# ============================================================================
"""
Status Evaluator

Executes connection checks with:
- Parallel execution (bounded by max_parallel)
- Coroutine checks awaited on the loop, blocking checks in a thread pool
- Results merged in registration order, whatever the completion order
- No retries and no per-check timeout (wrap slow checks before registering)

Evaluation never raises. It yields either a StatusDocument or a FATAL
result naming the checks that returned a non-boolean or raised.
"""

import asyncio
import contextvars
import inspect
import time
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from typing import Any, List, Optional, Sequence, Tuple

from core.config import get_defaults
from core.logging import get_logger, log_context
from health.core import (
    CheckResult,
    ConnectionCheck,
    EvaluationResult,
    build_status,
)
from health.models import EnvironmentInfo, GitInfo, ServiceInfo, StatusDocument
from health.providers import (
    EnvironmentProvider,
    GitProvenanceProvider,
    process_start_time,
)
from health.registry import ConnectionCheckRegistry, get_registry

logger = get_logger(__name__, component="health")


class StatusEvaluator:
    """
    Evaluates all registered connection checks into one status document.
    """

    def __init__(
        self,
        registry: Optional[ConnectionCheckRegistry] = None,
        service: Optional[ServiceInfo] = None,
        environment_provider: Optional[EnvironmentProvider] = None,
        provenance_provider: Optional[GitProvenanceProvider] = None,
        started_at: Optional[datetime] = None,
        max_parallel: Optional[int] = None,
    ):
        """
        Initialize evaluator.

        Args:
            registry: Check registry (uses the process-wide one if None)
            service: Static service identity (from config if None)
            environment_provider: Source of the "env" section
            provenance_provider: Source of the "git" section
            started_at: Service start time (process start if None)
            max_parallel: Max concurrent checks (from config if None)
        """
        defaults = get_defaults()

        # An empty registry is falsy, so test against None explicitly
        self.registry = registry if registry is not None else get_registry()
        self.service = service or ServiceInfo(
            name=defaults.service.name,
            description=defaults.service.description,
            version=defaults.service.version,
        )
        self.environment_provider = environment_provider or EnvironmentProvider(
            defaults.service.environment_var
        )
        self.provenance_provider = provenance_provider or GitProvenanceProvider()
        started_at = started_at or process_start_time()
        if started_at.tzinfo is None:
            started_at = started_at.replace(tzinfo=timezone.utc)
        self.started_at = started_at
        self.max_parallel = max_parallel or defaults.endpoint.max_parallel
        self._thread_pool: Optional[ThreadPoolExecutor] = None

    async def evaluate(self) -> EvaluationResult:
        """
        Run every registered check and aggregate the results.

        Returns:
            EvaluationResult holding either the document or the FATAL check names
        """
        start_time = time.monotonic()
        snapshot = self.registry.snapshot()

        results = await self._execute_all(snapshot)
        total_duration_ms = (time.monotonic() - start_time) * 1000

        invalid = [r.name for r in results if not r.is_valid]
        if invalid:
            logger.warning(
                f"Health evaluation FATAL: invalid result from {', '.join(invalid)} "
                f"({total_duration_ms:.1f}ms)"
            )
            return EvaluationResult(invalid_checks=invalid, checks=results)

        document = self._build_document(results)
        logger.debug(
            f"Health evaluated: {document.status} "
            f"({len(results)} checks, {total_duration_ms:.1f}ms)"
        )
        return EvaluationResult(document=document, checks=results)

    def close(self) -> None:
        """Release the worker threads used for blocking checks."""
        if self._thread_pool is not None:
            self._thread_pool.shutdown(wait=False)
            self._thread_pool = None

    def _get_thread_pool(self) -> ThreadPoolExecutor:
        """Create the pool on the first blocking check."""
        if self._thread_pool is None:
            self._thread_pool = ThreadPoolExecutor(
                max_workers=self.max_parallel,
                thread_name_prefix="connection-check",
            )
        return self._thread_pool

    async def _execute_all(
        self,
        snapshot: Sequence[Tuple[str, ConnectionCheck]],
    ) -> List[CheckResult]:
        """Execute checks in parallel; gather keeps snapshot order."""
        if not snapshot:
            return []

        semaphore = asyncio.Semaphore(self.max_parallel)

        async def run_with_semaphore(name: str, check: ConnectionCheck) -> CheckResult:
            async with semaphore:
                return await self._execute_check(name, check)

        return list(
            await asyncio.gather(
                *(run_with_semaphore(name, check) for name, check in snapshot)
            )
        )

    async def _execute_check(self, name: str, check: ConnectionCheck) -> CheckResult:
        """Execute a single check. Never raises for check errors."""
        start_time = time.monotonic()

        with log_context(check_name=name):
            try:
                value = await self._run_check(check)

            except asyncio.CancelledError as e:
                # Cancellation of this evaluation must still propagate
                task = asyncio.current_task()
                if task is not None and task.cancelling():
                    raise
                logger.error(f"Connection check {name} was cancelled")
                result = CheckResult.from_exception(name, e)

            except Exception as e:
                logger.error(f"Connection check {name} raised: {e}", exc_info=True)
                result = CheckResult.from_exception(name, e)

            else:
                result = CheckResult.classify(name, value)
                if not result.is_valid:
                    logger.error(
                        f"Connection check {name} returned a non-boolean result: {value!r}"
                    )

            result.duration_ms = (time.monotonic() - start_time) * 1000
            logger.debug(
                f"Connection check {name}: {result.outcome.value} ({result.duration_ms:.1f}ms)"
            )
        return result

    async def _run_check(self, check: ConnectionCheck) -> Any:
        if inspect.iscoroutinefunction(check):
            value = await check()
        else:
            # run_in_executor does not carry the logging context across
            ctx = contextvars.copy_context()
            loop = asyncio.get_running_loop()
            value = await loop.run_in_executor(self._get_thread_pool(), ctx.run, check)

        if inspect.isawaitable(value):
            value = await value
        return value

    def _build_document(self, results: List[CheckResult]) -> StatusDocument:
        now = datetime.now(timezone.utc)
        return StatusDocument(
            status=build_status(results),
            uptime=max((now - self.started_at).total_seconds(), 0.0),
            up_since=self.started_at,
            service=self.service,
            connections={r.name: r.value for r in results},
            env=self._environment(),
            git=self._provenance(),
        )

    def _environment(self) -> EnvironmentInfo:
        try:
            return self.environment_provider.snapshot()
        except Exception as e:
            logger.warning(f"Environment snapshot unavailable: {e}")
            return EnvironmentInfo()

    def _provenance(self) -> GitInfo:
        try:
            return self.provenance_provider.provenance()
        except Exception as e:
            logger.warning(f"Build provenance unavailable: {e}")
            return GitInfo()


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "StatusEvaluator",
]
