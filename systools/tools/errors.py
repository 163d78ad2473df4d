"""Errors raised by the tool registry and the builtin handlers.

Filesystem (OSError) and transport (httpx.HTTPError) failures are not wrapped;
they reach the caller as raised by the underlying call.
"""


class ToolError(RuntimeError):
    """Base class for errors synthesized by systools."""


class ArgumentDecodeError(ToolError, ValueError):
    """Tool input was not a JSON object of string fields."""

    def __init__(self, tool: str, detail: str):
        self.tool = tool
        self.detail = detail
        super().__init__(f"invalid arguments for {tool}: {detail}")


class HTTPStatusError(ToolError):
    """Server answered with a status the handler treats as failure."""

    def __init__(self, action: str, url: str, status: str):
        self.url = url
        self.status = status
        super().__init__(f"failed to {action} {url}: {status}")


class AbortError(ToolError):
    def __init__(self, message: str):
        self.message = message
        super().__init__(f"ABORT: {message}")


class UnknownToolError(ToolError, KeyError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")

    def __str__(self) -> str:
        # KeyError would quote the message
        return self.args[0]


class RegistryFrozenError(ToolError):
    """Raised when registering a tool after the registry has been built."""
