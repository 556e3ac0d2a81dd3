"""
MCP server + startup.

Handles tools/list and tools/call over stdio for the configured repository.
"""

from __future__ import annotations

import logging
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from .client.gh_client import GhClient
from .config import ConfigurationError, Settings
from .context import ToolContext
from .handlers import dispatch_tool
from .tools import ALL_TOOLS

log = logging.getLogger("repo_tools.server")


def create_mcp_server(ctx: ToolContext) -> Server:
  """Create and configure the MCP server with all tool handlers."""
  server = Server("github-repo-tools")

  @server.list_tools()
  async def list_tools() -> list[Tool]:
    return ALL_TOOLS

  @server.call_tool()
  async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[TextContent]:
    args = arguments or {}
    result = await dispatch_tool(ctx, name, args)
    return [TextContent(type="text", text=result.content)]

  return server


async def build_context(settings: Settings, client: GhClient) -> ToolContext:
  """Report (but do not enforce) the configuration state and bind the context."""
  try:
    owner, repo = settings.repo_coordinates()
    log.info("Serving tools for %s/%s", owner, repo)
  except ConfigurationError as e:
    log.error("%s; tools will fail until it is set", e)

  if not settings.token:
    log.error("No GitHub token available; tools will fail until GITHUB_PAT is set")
  else:
    try:
      authed = await client.check_auth()
    except Exception:
      log.exception("GitHub auth check could not complete")
    else:
      if not authed:
        log.error("GitHub authentication failed")

  return ToolContext(settings=settings, client=client)


async def run_server(settings: Settings | None = None) -> None:
  """Run the MCP server on stdio."""
  settings = settings or Settings.from_env()
  client = GhClient(settings)
  ctx = await build_context(settings, client)
  server = create_mcp_server(ctx)
  try:
    async with stdio_server() as (read_stream, write_stream):
      await server.run(read_stream, write_stream, server.create_initialization_options())
  finally:
    await client.close()
    log.info("GitHub repo tools server stopped")
