"""Deadline — bound one computation by a timeout and map expiry to a typed error.

Invariants:
    - Expiry raises OperationCancelledError naming the operation
    - asyncio.CancelledError (caller went away) is never caught here; it
      propagates so the task finishes cancelling
    - timeout_seconds <= 0 or None disables the bound
"""

import asyncio
import logging
from typing import Awaitable, TypeVar

from reporting.core.errors import OperationCancelledError

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def run_with_deadline(
    operation: str, timeout_seconds: float | None, work: Awaitable[T],
) -> T:
    """Await `work`, cancelling it when the deadline passes."""
    bound = timeout_seconds if timeout_seconds and timeout_seconds > 0 else None
    try:
        async with asyncio.timeout(bound):
            return await work
    except TimeoutError as e:
        logger.info(
            f"{operation} exceeded {timeout_seconds}s deadline",
            extra={"operation": operation, "error_code": "OPERATION_CANCELLED"},
        )
        raise OperationCancelledError(operation, timeout_seconds) from e
