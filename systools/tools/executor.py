"""Tool executor — dispatches a tool call by name with timing and logging."""
import logging
import os
import time
from typing import Optional, Sequence

from .errors import UnknownToolError
from .registry import lookup

logger = logging.getLogger(__name__)


def environ_list() -> list:
    """The process environment as KEY=VALUE strings."""
    return [f"{k}={v}" for k, v in os.environ.items()]


async def execute_tool(name: str, input: str = "{}", env: Optional[Sequence[str]] = None) -> str:
    """Execute a registered tool by name.

    Errors from the handler are logged and re-raised unchanged.
    """
    tool, ok = lookup(name)
    if not ok:
        logger.warning(f"Unknown tool: {name}")
        raise UnknownToolError(name)

    if env is None:
        env = environ_list()

    logger.info(f"Executing tool: {name}")
    t0 = time.monotonic()
    try:
        result = await tool.handler(env, input)
    except Exception as e:
        elapsed = time.monotonic() - t0
        logger.error(f"Tool {name} failed after {elapsed:.1f}s: {e}", exc_info=True)
        raise

    elapsed = time.monotonic() - t0
    logger.info(f"Tool {name}: {elapsed:.1f}s -> {len(result)} chars")
    return result
