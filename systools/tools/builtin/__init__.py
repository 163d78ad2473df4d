"""Auto-import builtin tool modules to trigger @register_tool decorators."""
from . import fs
from . import web
from . import abort
