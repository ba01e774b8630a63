"""MCP server exposing the roadmap and sprint tools over stdio."""

from __future__ import annotations

import logging
from typing import Any

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from projectpilot import __version__
from projectpilot.core.contracts.config import ProjectPilotConfig
from projectpilot.core.contracts.exceptions import ProjectPilotError
from projectpilot.core.providers.factory import ProviderFactory, provider_factory
from projectpilot.core.tools import ToolDispatcher, tool_definitions

_LOG = logging.getLogger(__name__)

SERVER_NAME = "projectpilot"


def build_server(config: ProjectPilotConfig, factory: ProviderFactory | None = None) -> Server:
    """Wire the tool dispatcher into an MCP server.

    Arguments are validated by the pydantic tool models in the dispatcher,
    which also accept bare-string titles and snake_case keys. Exceptions
    raised by the dispatcher are reported by the MCP layer as tool results
    with ``isError`` set and the exception message as text.
    """
    dispatcher = ToolDispatcher(factory or provider_factory(config), config)
    server: Server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return tool_definitions()

    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[types.TextContent]:
        try:
            return await dispatcher.dispatch(name, arguments)
        except ProjectPilotError as exc:
            _LOG.warning("Tool %s failed: %s", name, exc)
            raise

    return server


async def serve_stdio(config: ProjectPilotConfig) -> None:
    server = build_server(config)
    _LOG.info("Serving %s for %s over stdio", SERVER_NAME, config.target)
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())
