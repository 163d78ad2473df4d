"""Web tools — one HTTP GET or POST per call via httpx."""
import logging
from typing import Sequence

import httpx

from ...config import settings
from ..errors import HTTPStatusError
from ..registry import ToolArgs, ToolParam, decode_args, register_tool

logger = logging.getLogger(__name__)


class GetArgs(ToolArgs):
    url: str = ""


class PostArgs(ToolArgs):
    url: str = ""
    content: str = ""
    contentType: str = ""


def _client() -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=settings.http_timeout_s, follow_redirects=True)


def _status_line(resp: httpx.Response) -> str:
    return f"{resp.status_code} {resp.reason_phrase}".rstrip()


@register_tool(
    "sys.http.get",
    description="Download the contents of a http or https URL",
    params=[
        ToolParam("url", description="The URL to download"),
    ],
)
async def sys_http_get(env: Sequence[str], input: str) -> str:
    args = decode_args("sys.http.get", GetArgs, input)
    logger.debug(f"http get {args.url}")
    async with _client() as client:
        async with client.stream("GET", args.url) as resp:
            if resp.status_code != 200:
                raise HTTPStatusError("download", args.url, _status_line(resp))
            await resp.aread()
            return resp.content.decode("utf-8", errors="surrogateescape")


@register_tool(
    "sys.http.post",
    description="Write contents to a http or https URL using the POST method",
    params=[
        ToolParam("url", description="The URL to POST to"),
        ToolParam("content", description="The content to POST"),
        ToolParam(
            "contentType",
            description='The "content type" of the content such as application/json or text/plain',
            required=False,
        ),
    ],
)
async def sys_http_post(env: Sequence[str], input: str) -> str:
    args = decode_args("sys.http.post", PostArgs, input)
    data = args.content.encode("utf-8", errors="surrogateescape")
    headers = {}
    if args.contentType:
        headers["Content-Type"] = args.contentType

    logger.debug(f"http post {args.url} ({len(data)} bytes)")
    async with _client() as client:
        # Response body is read by post() and discarded
        resp = await client.post(args.url, content=data, headers=headers)
    if resp.status_code > 399:
        raise HTTPStatusError("post", args.url, _status_line(resp))

    return f"Wrote {len(data)} to {args.url}"
