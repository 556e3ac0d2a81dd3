"""
GitHub tool definitions organized by domain.

Each module exports a list of Tool objects that are combined into ALL_TOOLS.
"""

from __future__ import annotations

from mcp.types import Tool

from .issue import issue_tools
from .label import label_tools, milestone_tools
from .pr import branch_tools, pr_tools
from .review import review_comment_tools, review_request_tools, review_tools

ALL_TOOLS: list[Tool] = [
  *issue_tools,
  *label_tools,
  *milestone_tools,
  *pr_tools,
  *branch_tools,
  *review_comment_tools,
  *review_request_tools,
  *review_tools,
]

TOOLS_BY_NAME: dict[str, Tool] = {tool.name: tool for tool in ALL_TOOLS}
