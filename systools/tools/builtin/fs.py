"""File tools — read and overwrite local files.

Paths are used verbatim; confining them is the caller's job.
"""
import asyncio
import logging
import os
from typing import Sequence

from ...config import settings
from ..registry import ToolArgs, ToolParam, decode_args, register_tool

logger = logging.getLogger(__name__)


class ReadArgs(ToolArgs):
    filename: str = ""


class WriteArgs(ToolArgs):
    filename: str = ""
    content: str = ""


def _read_file(path: str) -> str:
    with open(path, "rb") as f:
        data = f.read()
    return data.decode("utf-8", errors="surrogateescape")


def _write_file(path: str, data: bytes, mode: int) -> None:
    # mode only applies when the file is created; existing files keep theirs
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
    with os.fdopen(fd, "wb") as f:
        f.write(data)


@register_tool(
    "sys.read",
    description="Reads the contents of a file",
    params=[
        ToolParam("filename", description="The name of the file to read"),
    ],
)
async def sys_read(env: Sequence[str], input: str) -> str:
    args = decode_args("sys.read", ReadArgs, input)
    logger.debug(f"Reading file {args.filename}")
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, _read_file, args.filename)


@register_tool(
    "sys.write",
    description="Write the contents to a file",
    params=[
        ToolParam("filename", description="The name of the file to write to"),
        ToolParam("content", description="The content to write"),
    ],
)
async def sys_write(env: Sequence[str], input: str) -> str:
    args = decode_args("sys.write", WriteArgs, input)
    data = args.content.encode("utf-8", errors="surrogateescape")
    loop = asyncio.get_running_loop()
    await loop.run_in_executor(None, _write_file, args.filename, data, settings.write_file_mode)
    logger.debug(f"Wrote {len(data)} bytes to file {args.filename}")
    return ""
