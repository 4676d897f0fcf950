# ============================================================================
# HEALTH REQUEST HANDLER
# ============================================================================
# EPOCH: 1 - SERVICE HEALTH
# STATUS: Infrastructure - Framework-agnostic /health handler
# PURPOSE: Map evaluation and filtering onto an HTTP status code and body
# CREATED: 19 OCT 2026
# ============================================================================
"""
Health Request Handler

Response Codes:
    200 - All connection checks returned True
    500 - One or more checks returned False (body is the status document)
    500 - One or more checks returned a non-boolean or raised
          (body is {"message": ...} naming them)
    400 - The filter names a field that does not exist

The status code always comes from the unfiltered document; filtering only
changes which fields are returned.
"""

import asyncio
import uuid
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from core.config import get_defaults
from core.logging import get_logger, log_context
from health.evaluator import StatusEvaluator
from health.exceptions import InvalidFilterPathError
from health.filter import parse_filter, project
from health.models import ErrorResponse

logger = get_logger(__name__, component="health")


@dataclass
class HealthResponse:
    """Status code and JSON body for one health request."""
    status_code: int
    body: Dict[str, Any]


def _error(status_code: int, message: str) -> HealthResponse:
    return HealthResponse(
        status_code=status_code,
        body=ErrorResponse(message=message).model_dump(),
    )


class HealthHandler:
    """
    Handles one GET /health request, independent of the HTTP framework.

    Router adapters extract the query parameters and write the returned
    HealthResponse back to their own response type.
    """

    def __init__(
        self,
        evaluator: Optional[StatusEvaluator] = None,
        filter_param: Optional[str] = None,
    ):
        self.evaluator = evaluator or StatusEvaluator()
        self.filter_param = filter_param or get_defaults().endpoint.filter_param

    async def handle(self, query: Optional[Mapping[str, str]] = None) -> HealthResponse:
        """
        Evaluate health and build the response.

        Args:
            query: Request query parameters

        Returns:
            HealthResponse; never raises
        """
        raw_filter = (query or {}).get(self.filter_param)

        with log_context(request_id=uuid.uuid4().hex[:12], component="health"):
            try:
                return await self._handle(raw_filter)
            except asyncio.CancelledError:
                task = asyncio.current_task()
                if task is not None and task.cancelling():
                    raise
                logger.error("Health evaluation was cancelled")
                return _error(500, "Health evaluation failed: cancelled")
            except Exception as e:
                logger.exception(f"Health evaluation failed: {e}")
                return _error(500, f"Health evaluation failed: {e}")

    def close(self) -> None:
        """Release resources held by the evaluator."""
        self.evaluator.close()

    async def _handle(self, raw_filter: Optional[str]) -> HealthResponse:
        result = await self.evaluator.evaluate()

        if result.is_fatal:
            return _error(500, result.message)

        document = result.document
        status_code = 200 if document.is_ok else 500

        try:
            body = project(document.to_dict(), parse_filter(raw_filter))
        except InvalidFilterPathError as e:
            logger.info(f"Rejected health filter: {e}")
            return _error(400, e.message)

        if status_code != 200:
            logger.warning(f"Health check failing: {document.status}")

        return HealthResponse(status_code=status_code, body=body)


__all__ = [
    "HealthResponse",
    "HealthHandler",
]
