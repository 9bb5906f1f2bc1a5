import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def retry_with_backoff(
    operation: Callable[[], Awaitable[T]],
    max_attempts: int = 3,
    base_delay_ms: float = 1000,
) -> T:
    """
    Awaits `operation()` up to `max_attempts` times with exponential backoff.

    Retries on any exception, whatever its type. The caller decides which
    errors are worth retrying by choosing what to wrap.
    Sleep between attempts: base_delay_ms * 2^attempt. With 1000: 1s, 2s, 4s.
    The last exception is re-raised unchanged once attempts run out.
    """
    last_error: BaseException | None = None
    for attempt in range(max_attempts):
        try:
            return await operation()
        except Exception as e:
            last_error = e
            if attempt < max_attempts - 1:
                wait = base_delay_ms * (2 ** attempt) / 1000
                logger.warning(
                    "Attempt %d/%d failed (%s), retrying after %.3fs",
                    attempt + 1, max_attempts, e, wait,
                )
                await asyncio.sleep(wait)
    if last_error is None:
        raise ValueError("max_attempts must be at least 1")
    raise last_error
