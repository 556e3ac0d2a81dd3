"""
GitHub repository tools for AI agents.

Issues, labels, milestones, branches, pull requests and reviews of one
configured repository, each exposed as a schema-validated tool that makes a
single REST call and returns a narrow result shape.
"""

from __future__ import annotations

from .client.gh_client import RemoteError
from .config import ConfigurationError, Settings
from .context import ToolContext
from .handlers import dispatch_tool, execute_tool
from .tools import ALL_TOOLS
from .validation import ValidationError

__all__ = [
  "ALL_TOOLS",
  "ConfigurationError",
  "RemoteError",
  "Settings",
  "ToolContext",
  "ValidationError",
  "dispatch_tool",
  "execute_tool",
]

__version__ = "1.0.0"
