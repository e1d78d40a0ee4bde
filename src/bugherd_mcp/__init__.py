"""BugHerd MCP Server - Model Context Protocol integration.

This package exposes the BugHerd bug tracking API to AI assistants as
read-only MCP tools.

Modules:
- server: stdio MCP server implementation
- client: BugHerd API v2 client
- formatters: Response formatting utilities
- tools: MCP tool definitions
- handlers: Tool implementation handlers
"""

__version__ = "0.1.0"

from . import client
from . import formatters
from . import tools
from . import handlers

__all__ = ["client", "formatters", "tools", "handlers", "__version__"]
