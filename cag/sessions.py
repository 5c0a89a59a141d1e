"""
Scoped model session handling.

Every session is created for exactly one chunk and released on every exit
path, including errors, early returns and task cancellation.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from enum import Enum
from typing import Any, AsyncIterator, Dict, Optional

from cag.errors import SessionTimeout
from cag.interfaces import IModelProvider, IModelSession

logger = logging.getLogger(__name__)


class FailurePolicy(Enum):
    """How a generation pass reacts to a chunk that cannot be processed."""

    FAIL_FAST = "fail_fast"
    SKIP_AND_LOG = "skip_and_log"


@asynccontextmanager
async def model_session(
    provider: IModelProvider,
    options: Optional[Dict[str, Any]] = None
) -> AsyncIterator[IModelSession]:
    """
    Create a session from the provider and release it when the block exits.

    Errors raised by ``release`` are logged rather than raised so they never
    mask an error from the body of the block.
    """
    session = await provider.create(options or {})
    try:
        yield session
    finally:
        try:
            await session.release()
        except Exception as e:
            logger.warning(f"Failed to release model session: {str(e)}")


async def send_prompt(
    session: IModelSession,
    prompt: str,
    timeout: Optional[float] = None,
    chunk_index: Optional[int] = None
) -> str:
    """
    Send a prompt on a session, optionally bounded by a timeout in seconds.

    Raises:
        SessionTimeout: If the session does not answer in time
    """
    if timeout is None:
        return await session.send(prompt)

    try:
        return await asyncio.wait_for(session.send(prompt), timeout=timeout)
    except asyncio.TimeoutError as e:
        raise SessionTimeout(
            f"Model session did not respond within {timeout} seconds",
            chunk_index=chunk_index
        ) from e
