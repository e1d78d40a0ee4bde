"""BugHerd MCP Server - Expose BugHerd bug tracking to AI assistants."""
import os
import sys
import asyncio
import logging
import traceback
from typing import Any, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, TextContent, Tool

from . import client as api
from . import tools
from .client import create_client, verify_connection
from .handlers import HANDLERS


def resolve_log_level(name: Optional[str]) -> int:
    """Map a level name such as "debug" to its logging constant, INFO if unrecognised."""
    level = logging.getLevelName((name or "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


LOG_LEVEL_SETTING = os.getenv("BUGHERD_LOG_LEVEL")

# Configure logging to stderr; stdout carries the MCP protocol
logging.basicConfig(
    level=resolve_log_level(LOG_LEVEL_SETTING),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    stream=sys.stderr,
    force=True
)
logger = logging.getLogger("bugherd-mcp")

if LOG_LEVEL_SETTING and resolve_log_level(LOG_LEVEL_SETTING) == logging.INFO \
        and LOG_LEVEL_SETTING.upper() != "INFO":
    logger.warning(f"Unknown BUGHERD_LOG_LEVEL {LOG_LEVEL_SETTING!r}, using INFO")

CONNECTION_ERROR_TEXT = (
    f"Error: Unable to connect to BugHerd API. "
    f"Check your {api.API_KEY_ENV_VAR} environment variable."
)


# MCP Server instance
app = Server("bugherd-mcp")


def _error_result(text: str) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=True)


@app.list_tools()
async def list_tools() -> list[Tool]:
    """List available BugHerd tools."""
    return tools.get_tools()


# SDK-side jsonschema validation is off: the connection check runs first and
# argument errors come back through the same error path as everything else.
@app.call_tool(validate_input=False)
async def call_tool(name: str, arguments: Optional[dict[str, Any]]) -> CallToolResult:
    """Handle MCP tool calls by delegating to the BugHerd handlers."""
    logger.info(f"Tool call: {name} with arguments: {arguments}")

    async with create_client() as client:
        try:
            if not await verify_connection(client):
                return _error_result(CONNECTION_ERROR_TEXT)

            handler = HANDLERS.get(name)
            if not handler:
                logger.warning(f"Unknown tool requested: {name}")
                return _error_result(f"Unknown tool: {name}")

            content = await handler(arguments, client)
            return CallToolResult(content=content)

        except Exception as e:
            logger.error(f"Error during {name} call:")
            logger.error(f"  Error type: {type(e).__name__}")
            logger.error(f"  Error message: {str(e)}")
            logger.debug(f"  Traceback:\n{traceback.format_exc()}")
            return _error_result(f"Error: {str(e)}")


async def main():
    """Run the MCP server over stdio."""
    if not os.getenv(api.API_KEY_ENV_VAR):
        logger.warning(f"{api.API_KEY_ENV_VAR} is not set; tool calls will fail until it is")

    async with stdio_server() as (read_stream, write_stream):
        logger.info("BugHerd MCP Server started")
        await app.run(read_stream, write_stream, app.create_initialization_options())


def run():
    """Console entry point."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("BugHerd MCP Server stopped")
    except Exception as e:
        logger.critical(f"Fatal error: {type(e).__name__}: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    run()
