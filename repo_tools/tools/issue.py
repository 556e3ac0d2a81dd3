"""
Issue, assignee and issue-comment tools (12 tools).
"""

from __future__ import annotations

from mcp.types import Tool

issue_tools: list[Tool] = [
  Tool(
    name="create_issue",
    description="Create a GitHub issue in the configured repository.",
    inputSchema={
      "type": "object",
      "properties": {
        "title": {"type": "string", "minLength": 1, "description": "Issue title"},
        "body": {"type": "string", "description": "Issue body (Markdown supported)"},
        "labels": {
          "type": "array",
          "items": {"type": "string"},
          "description": "Labels to apply to the issue",
        },
        "assignees": {
          "type": "array",
          "items": {"type": "string"},
          "description": "Usernames to assign to the issue",
        },
      },
      "required": ["title"],
    },
  ),
  Tool(
    name="list_issues",
    description=(
      "List/search issues in the configured repository. "
      "When you display issues use the format #{issue_number}. {issue_title}"
    ),
    inputSchema={
      "type": "object",
      "properties": {
        "state": {
          "type": "string",
          "description": "The status of the issue.",
          "enum": ["open", "closed", "all"],
          "default": "open",
        },
        "keyword": {
          "type": "string",
          "description": (
            "Use sparingly, only if the user asks for issues related to X. "
            "Keep this to one word; it filters title/body of the fetched page."
          ),
        },
        "labels": {
          "type": "array",
          "items": {"type": "string"},
          "description": (
            "Filter by label names. Not every issue about subject X carries the label X; "
            "use this when the user asks for a specific label."
          ),
        },
        "mentioned": {
          "type": "string",
          "description": "Username mentioned in the conversation or description of the issue.",
        },
        "assignee": {
          "type": "string",
          "description": (
            "Username to filter by. Use '@' for the repository owner, 'none' for "
            "unassigned issues and '*' for issues assigned to anyone."
          ),
        },
        "sort": {
          "type": "string",
          "enum": ["created", "updated", "comments"],
          "default": "created",
        },
        "direction": {"type": "string", "enum": ["desc", "asc"], "default": "desc"},
        "limit": {
          "type": "integer",
          "minimum": 1,
          "maximum": 100,
          "default": 20,
          "description": "Maximum number of issues to return",
        },
      },
      "required": [],
    },
  ),
  Tool(
    name="update_issue",
    description=(
      "Update title/body/labels/assignees for an issue. If the user does not provide an "
      "issue number, list issues first and ask the user for a specific number."
    ),
    inputSchema={
      "type": "object",
      "properties": {
        "number": {"type": "integer", "minimum": 1, "description": "Issue number"},
        "title": {"type": "string", "description": "New issue title"},
        "body": {"type": "string", "description": "New issue body"},
        "labels": {
          "type": "array",
          "items": {"type": "string"},
          "description": "Replacement label set",
        },
        "assignees": {
          "type": "array",
          "items": {"type": "string"},
          "description": "Replacement assignee set",
        },
      },
      "required": ["number"],
    },
  ),
  Tool(
    name="close_issue",
    description=(
      "Close an issue. If the user does not provide an issue number, list issues first "
      "and ask the user for a specific number."
    ),
    inputSchema={
      "type": "object",
      "properties": {
        "number": {"type": "integer", "minimum": 1, "description": "Issue number"},
      },
      "required": ["number"],
    },
  ),
  Tool(
    name="add_issue_assignees",
    description="Add one or more assignees to an issue.",
    inputSchema={
      "type": "object",
      "properties": {
        "number": {"type": "integer", "minimum": 1, "description": "Issue number"},
        "assignees": {
          "type": "array",
          "items": {"type": "string"},
          "minItems": 1,
          "description": "Usernames to assign",
        },
      },
      "required": ["number", "assignees"],
    },
  ),
  Tool(
    name="remove_issue_assignees",
    description="Remove one or more assignees from an issue.",
    inputSchema={
      "type": "object",
      "properties": {
        "number": {"type": "integer", "minimum": 1, "description": "Issue number"},
        "assignees": {
          "type": "array",
          "items": {"type": "string"},
          "minItems": 1,
          "description": "Usernames to remove",
        },
      },
      "required": ["number", "assignees"],
    },
  ),
  Tool(
    name="check_repo_assignee",
    description="Check if a user can be assigned issues in this repository.",
    inputSchema={
      "type": "object",
      "properties": {
        "assignee": {"type": "string", "minLength": 1, "description": "Username to check"},
      },
      "required": ["assignee"],
    },
  ),
  Tool(
    name="list_repo_assignees",
    description="List assignable users for this repository.",
    inputSchema={
      "type": "object",
      "properties": {
        "limit": {"type": "integer", "minimum": 1, "maximum": 100, "default": 30},
      },
      "required": [],
    },
  ),
  Tool(
    name="list_issue_comments",
    description="List comments on a specific issue or pull request.",
    inputSchema={
      "type": "object",
      "properties": {
        "number": {"type": "integer", "minimum": 1, "description": "Issue or PR number"},
        "limit": {"type": "integer", "minimum": 1, "maximum": 100, "default": 50},
      },
      "required": ["number"],
    },
  ),
  Tool(
    name="create_issue_comment",
    description="Create a comment on an issue or pull request.",
    inputSchema={
      "type": "object",
      "properties": {
        "number": {"type": "integer", "minimum": 1, "description": "Issue or PR number"},
        "body": {"type": "string", "minLength": 1, "description": "Comment body (Markdown supported)"},
      },
      "required": ["number", "body"],
    },
  ),
  Tool(
    name="update_issue_comment",
    description="Update an existing issue/PR comment by ID.",
    inputSchema={
      "type": "object",
      "properties": {
        "comment_id": {"type": "integer", "minimum": 1, "description": "Comment ID"},
        "body": {"type": "string", "minLength": 1, "description": "New comment body"},
      },
      "required": ["comment_id", "body"],
    },
  ),
  Tool(
    name="delete_issue_comment",
    description="Delete an issue/PR comment by ID.",
    inputSchema={
      "type": "object",
      "properties": {
        "comment_id": {"type": "integer", "minimum": 1, "description": "Comment ID"},
      },
      "required": ["comment_id"],
    },
  ),
]
