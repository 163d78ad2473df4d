"""Shared fixtures — fake HTTP servers for the web tools."""
from unittest.mock import patch

import httpx
import pytest


@pytest.fixture
def mock_http():
    """Route the web tools' client through an httpx.MockTransport.

    Usage: mock_http(handler) where handler(request) -> httpx.Response.
    Requests seen by the transport are collected in the returned list.
    """
    seen = []
    patches = []

    def install(handler):
        async def recording(request):
            seen.append(request)
            result = handler(request)
            if hasattr(result, "__await__"):
                result = await result
            return result

        transport = httpx.MockTransport(recording)
        p = patch(
            "systools.tools.builtin.web._client",
            side_effect=lambda: httpx.AsyncClient(transport=transport, follow_redirects=True),
        )
        p.start()
        patches.append(p)
        return seen

    yield install
    for p in patches:
        p.stop()
