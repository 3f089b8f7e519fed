import asyncio
import logging
from typing import Awaitable, Callable


LOG = logging.getLogger(__name__)


INITIAL_BACKOFF_SECS = 1
BACKOFF_STEP_SECS = 1
MAX_BACKOFF_SECS = 5


async def get_height_with_retry(
        get_height: Callable[[], Awaitable[int]],
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep
) -> int:
    """Poll `get_height` until it succeeds.

    Sleeps 1 second after the first failure, one second more after each next
    one, up to 5 seconds. There is no attempt limit.
    """
    backoff = INITIAL_BACKOFF_SECS
    while True:
        try:
            return await get_height()
        except Exception as e:
            LOG.warning(f'failed to get height, retrying in {backoff} s', exc_info=e)
        await sleep(backoff)
        backoff = min(backoff + BACKOFF_STEP_SECS, MAX_BACKOFF_SECS)
