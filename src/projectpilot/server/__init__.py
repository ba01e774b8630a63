"""MCP server-domain exports."""

from projectpilot.server.app import build_server, serve_stdio

__all__ = ["build_server", "serve_stdio"]
