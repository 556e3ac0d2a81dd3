"""
Entry point for the GitHub repo tools MCP server.

Run with: python -m repo_tools
"""

from __future__ import annotations

import asyncio
import logging
import os
import sys


def log_level(name: str | None) -> int:
  """Resolve a LOG_LEVEL name, falling back to INFO for unknown names."""
  level = logging.getLevelName((name or "INFO").strip().upper())
  return level if isinstance(level, int) else logging.INFO


def main() -> None:
  logging.basicConfig(
    level=log_level(os.environ.get("LOG_LEVEL")),
    format="[%(name)s] %(levelname)s: %(message)s",
    stream=sys.stderr,
  )

  from .server import run_server

  asyncio.run(run_server())


if __name__ == "__main__":
  main()
