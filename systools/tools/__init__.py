"""Tool system — registry, builtin handlers, executor."""
from .registry import (
    register_tool, build_registry, lookup, list_tools, tool_descriptions_for_llm,
    Tool, ToolParam,
)
from .errors import (
    ToolError, ArgumentDecodeError, HTTPStatusError, AbortError, UnknownToolError,
    RegistryFrozenError,
)
from .executor import execute_tool

# Import builtin tools and freeze the registry
build_registry()
