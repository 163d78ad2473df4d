#!/usr/bin/env python3
"""
systools - builtin tool launcher
Lists the registered tools or runs one with a JSON argument blob

    run_tool.py --list
    run_tool.py sys.read '{"filename": "/etc/hostname"}'
"""
import asyncio
import logging
import sys

from systools.config import settings
from systools.tools import execute_tool, tool_descriptions_for_llm, ToolError

logger = logging.getLogger(__name__)

USAGE = "usage: run_tool.py --list | run_tool.py <tool> [json-args]"


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if not argv or len(argv) > 2:
        print(USAGE, file=sys.stderr)
        return 2
    if argv[0] == "--list":
        print(tool_descriptions_for_llm())
        return 0

    name = argv[0]
    payload = argv[1] if len(argv) == 2 else "{}"
    try:
        result = asyncio.run(execute_tool(name, payload))
    except ToolError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        # OSError, httpx transport errors: keep the type, messages are terse
        print(f"error: {type(e).__name__}: {e}", file=sys.stderr)
        return 1

    if result:
        print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
