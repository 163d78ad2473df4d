"""Abort tool — lets a caller fail the run with its own diagnostic."""
from typing import Sequence

from ..errors import AbortError
from ..registry import ToolArgs, ToolParam, decode_args, register_tool


class AbortArgs(ToolArgs):
    message: str = ""


@register_tool(
    "sys.abort",
    description="Aborts execution",
    params=[
        ToolParam(
            "message",
            description="The description of the error or unexpected result that caused abort to be called",
        ),
    ],
)
async def sys_abort(env: Sequence[str], input: str) -> str:
    args = decode_args("sys.abort", AbortArgs, input)
    raise AbortError(args.message)
