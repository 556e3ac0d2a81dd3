"""
Pull request and branch tools (13 tools).
"""

from __future__ import annotations

from mcp.types import Tool

_PULL_NUMBER = {"type": "integer", "minimum": 1, "description": "Pull request number"}

pr_tools: list[Tool] = [
  Tool(
    name="create_pull",
    description="Create a pull request in the configured repository.",
    inputSchema={
      "type": "object",
      "properties": {
        "title": {"type": "string", "minLength": 1, "description": "Pull request title"},
        "head": {
          "type": "string",
          "minLength": 1,
          "description": "Branch containing your changes. Use 'user:branch' for forks.",
        },
        "base": {"type": "string", "minLength": 1, "description": "Branch you want to merge into."},
        "body": {"type": "string", "description": "Pull request body (Markdown supported)"},
        "draft": {"type": "boolean", "description": "Create as a draft pull request"},
        "maintainer_can_modify": {"type": "boolean"},
      },
      "required": ["title", "head", "base"],
    },
  ),
  Tool(
    name="list_pulls",
    description="List/search pull requests in the configured repository. Display as: #{pr_number}. {pr_title}",
    inputSchema={
      "type": "object",
      "properties": {
        "state": {"type": "string", "enum": ["open", "closed", "all"], "default": "open"},
        "head": {"type": "string", "description": "Filter by head 'user:branch'"},
        "base": {"type": "string", "description": "Filter by base branch name"},
        "sort": {
          "type": "string",
          "enum": ["created", "updated", "popularity", "long-running"],
          "default": "created",
        },
        "direction": {"type": "string", "enum": ["desc", "asc"], "default": "desc"},
        "limit": {"type": "integer", "minimum": 1, "maximum": 100, "default": 20},
        "keyword": {"type": "string", "description": "One word; filters title/body of the fetched page"},
      },
      "required": [],
    },
  ),
  Tool(
    name="get_pull",
    description="Get a single pull request by number.",
    inputSchema={
      "type": "object",
      "properties": {"number": _PULL_NUMBER},
      "required": ["number"],
    },
  ),
  Tool(
    name="update_pull",
    description="Update a pull request (title/body/state/base/draft/maintainer permissions).",
    inputSchema={
      "type": "object",
      "properties": {
        "number": _PULL_NUMBER,
        "title": {"type": "string"},
        "body": {"type": "string"},
        "state": {"type": "string", "enum": ["open", "closed"]},
        "base": {"type": "string"},
        "maintainer_can_modify": {"type": "boolean"},
        "draft": {"type": "boolean"},
      },
      "required": ["number"],
    },
  ),
  Tool(
    name="list_pull_commits",
    description="List commits on a pull request.",
    inputSchema={
      "type": "object",
      "properties": {
        "number": _PULL_NUMBER,
        "limit": {"type": "integer", "minimum": 1, "maximum": 250, "default": 100},
      },
      "required": ["number"],
    },
  ),
  Tool(
    name="list_pull_files",
    description="List files changed in a pull request.",
    inputSchema={
      "type": "object",
      "properties": {
        "number": _PULL_NUMBER,
        "limit": {"type": "integer", "minimum": 1, "maximum": 300, "default": 100},
      },
      "required": ["number"],
    },
  ),
  Tool(
    name="check_pull_merged",
    description="Check if a pull request has been merged.",
    inputSchema={
      "type": "object",
      "properties": {"number": _PULL_NUMBER},
      "required": ["number"],
    },
  ),
  Tool(
    name="merge_pull",
    description="Merge a pull request.",
    inputSchema={
      "type": "object",
      "properties": {
        "number": _PULL_NUMBER,
        "commit_title": {"type": "string"},
        "commit_message": {"type": "string"},
        "merge_method": {"type": "string", "enum": ["merge", "squash", "rebase"]},
        "sha": {"type": "string", "description": "Ensure head matches this SHA before merge."},
      },
      "required": ["number"],
    },
  ),
  Tool(
    name="update_pull_branch",
    description="Update a pull request branch with the latest changes from its base.",
    inputSchema={
      "type": "object",
      "properties": {
        "number": _PULL_NUMBER,
        "expected_head_sha": {"type": "string"},
      },
      "required": ["number"],
    },
  ),
]

branch_tools: list[Tool] = [
  Tool(
    name="list_branches",
    description="List branches in the configured repository.",
    inputSchema={
      "type": "object",
      "properties": {
        "protected": {"type": "boolean", "description": "Only protected (true) or unprotected (false) branches"},
        "limit": {"type": "integer", "minimum": 1, "maximum": 100, "default": 30},
        "keyword": {"type": "string", "description": "One word; filters branch names of the fetched page"},
      },
      "required": [],
    },
  ),
  Tool(
    name="get_branch",
    description="Get a single branch by name.",
    inputSchema={
      "type": "object",
      "properties": {"branch": {"type": "string", "minLength": 1}},
      "required": ["branch"],
    },
  ),
  Tool(
    name="rename_branch",
    description="Rename a branch in the configured repository.",
    inputSchema={
      "type": "object",
      "properties": {
        "branch": {"type": "string", "minLength": 1, "description": "Current branch name"},
        "new_name": {"type": "string", "minLength": 1, "description": "New branch name"},
      },
      "required": ["branch", "new_name"],
    },
  ),
  Tool(
    name="merge_branch",
    description="Merge a branch/ref into a base branch in the configured repository.",
    inputSchema={
      "type": "object",
      "properties": {
        "base": {"type": "string", "minLength": 1, "description": "Base branch to merge into"},
        "head": {
          "type": "string",
          "minLength": 1,
          "description": "Head ref (branch name or commit SHA) to merge from",
        },
        "commit_message": {"type": "string"},
      },
      "required": ["base", "head"],
    },
  ),
]
