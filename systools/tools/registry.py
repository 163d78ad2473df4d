"""Tool registry — decorator-based registration, frozen after startup."""
import copy
import logging
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Sequence, Tuple, Type, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from ..config import settings
from .errors import ArgumentDecodeError, RegistryFrozenError

logger = logging.getLogger(__name__)

Handler = Callable[[Sequence[str], str], Awaitable[str]]


@dataclass(frozen=True)
class ToolParam:
    name: str
    description: str = ""
    type: str = "string"
    required: bool = True


@dataclass(frozen=True)
class Tool:
    """A builtin tool descriptor.

    Registered entries carry only description, arguments and handler; the
    identity fields (name, id, instructions) are filled in by lookup() and
    list_tools(). A zero-value Tool() is what lookup() returns on a miss.
    """
    name: str = ""
    id: str = ""
    instructions: str = ""
    description: str = ""
    arguments: Dict[str, Any] = field(default_factory=dict)
    params: Tuple[ToolParam, ...] = ()
    handler: Optional[Handler] = None


class ToolArgs(BaseModel):
    """Base for per-tool argument models: a flat JSON object of strings."""
    model_config = ConfigDict(strict=True, extra="ignore", frozen=True)

    @field_validator("*", mode="before")
    @classmethod
    def _null_is_empty(cls, v: Any) -> Any:
        return "" if v is None else v


ArgsT = TypeVar("ArgsT", bound=ToolArgs)


def object_schema(*params: ToolParam) -> Dict[str, Any]:
    """JSON schema for an object whose properties are the given params."""
    return {
        "type": "object",
        "properties": {
            p.name: {"type": p.type, "description": p.description} for p in params
        },
    }


def decode_args(tool: str, model: Type[ArgsT], raw: str) -> ArgsT:
    """Decode a tool's JSON input. Missing fields fall back to the model defaults."""
    try:
        return model.model_validate_json(raw)
    except ValidationError as e:
        detail = "; ".join(err["msg"] for err in e.errors()) or str(e)
        raise ArgumentDecodeError(tool, detail) from e


_pending: Dict[str, Tool] = {}
_tools: Optional[Mapping[str, Tool]] = None


def register_tool(
    name: str,
    description: str = "",
    params: Optional[List[ToolParam]] = None,
):
    """Decorator to register a tool handler. Only valid before build_registry()."""
    def decorator(func):
        if _tools is not None:
            raise RegistryFrozenError(f"registry is frozen, cannot register {name}")
        if name in _pending:
            raise ValueError(f"Duplicate tool name: {name}")
        declared = tuple(params or [])
        _pending[name] = Tool(
            description=description or (func.__doc__ or "").strip(),
            arguments=object_schema(*declared),
            params=declared,
            handler=func,
        )
        logger.info(f"Registered tool: {name}")
        return func
    return decorator


def build_registry() -> Mapping[str, Tool]:
    """Import the builtin handlers and freeze the registry. Idempotent."""
    global _tools
    if _tools is None:
        from . import builtin  # noqa: F401  (triggers @register_tool)
        _tools = MappingProxyType(dict(_pending))
        logger.info(f"Tool registry ready: {len(_tools)} tools")
    return _tools


def _with_identity(name: str, tool: Tool) -> Tool:
    return replace(
        tool,
        arguments=copy.deepcopy(tool.arguments),
        name=name,
        id=name,
        instructions=settings.instructions_prefix + name,
    )


def lookup(name: str) -> Tuple[Tool, bool]:
    tool = build_registry().get(name)
    if tool is None:
        return Tool(), False
    return _with_identity(name, tool), True


def list_tools() -> List[Tool]:
    tools = build_registry()
    return [_with_identity(name, tools[name]) for name in sorted(tools)]


def tool_descriptions_for_llm() -> str:
    """Generate tool list for an LLM system prompt."""
    lines = []
    for tool in list_tools():
        params = []
        for p in tool.params:
            req = "required" if p.required else "optional"
            params.append(f"{p.name}({req}): {p.description}")
        params_text = ", ".join(params) if params else "none"
        lines.append(f"- {tool.name}: {tool.description} | params: {params_text}")
    return "\n".join(lines)
