"""
Label and milestone tools (11 tools).
"""

from __future__ import annotations

from mcp.types import Tool

_COLOR = {
  "type": "string",
  "pattern": "^[0-9a-fA-F]{6}$",
  "description": "Six hex digits without '#', e.g. 'ff0000'",
}

label_tools: list[Tool] = [
  Tool(
    name="list_repo_labels",
    description="List labels for the configured repository.",
    inputSchema={
      "type": "object",
      "properties": {
        "limit": {"type": "integer", "minimum": 1, "maximum": 100, "default": 50},
      },
      "required": [],
    },
  ),
  Tool(
    name="create_repo_label",
    description="Create a label in the configured repository.",
    inputSchema={
      "type": "object",
      "properties": {
        "name": {"type": "string", "minLength": 1, "description": "Label name"},
        "color": _COLOR,
        "description": {"type": "string", "description": "Short description of the label"},
      },
      "required": ["name"],
    },
  ),
  Tool(
    name="update_repo_label",
    description="Update a label in the configured repository.",
    inputSchema={
      "type": "object",
      "properties": {
        "current_name": {"type": "string", "minLength": 1, "description": "Existing label name"},
        "new_name": {"type": "string", "description": "New label name"},
        "color": _COLOR,
        "description": {"type": "string", "description": "New description"},
      },
      "required": ["current_name"],
    },
  ),
  Tool(
    name="delete_repo_label",
    description="Delete a label in the configured repository.",
    inputSchema={
      "type": "object",
      "properties": {
        "name": {"type": "string", "minLength": 1, "description": "Label name"},
      },
      "required": ["name"],
    },
  ),
  Tool(
    name="set_issue_labels",
    description="Replace labels on an issue (omit labels to clear them).",
    inputSchema={
      "type": "object",
      "properties": {
        "number": {"type": "integer", "minimum": 1, "description": "Issue number"},
        "labels": {"type": "array", "items": {"type": "string"}},
      },
      "required": ["number"],
    },
  ),
  Tool(
    name="add_issue_labels",
    description="Add labels to an issue.",
    inputSchema={
      "type": "object",
      "properties": {
        "number": {"type": "integer", "minimum": 1, "description": "Issue number"},
        "labels": {"type": "array", "items": {"type": "string"}},
      },
      "required": ["number"],
    },
  ),
  Tool(
    name="remove_issue_label",
    description="Remove a single label from an issue.",
    inputSchema={
      "type": "object",
      "properties": {
        "number": {"type": "integer", "minimum": 1, "description": "Issue number"},
        "name": {"type": "string", "minLength": 1, "description": "Label name"},
      },
      "required": ["number", "name"],
    },
  ),
]

milestone_tools: list[Tool] = [
  Tool(
    name="list_milestones",
    description="List milestones for the configured repository.",
    inputSchema={
      "type": "object",
      "properties": {
        "state": {"type": "string", "enum": ["open", "closed", "all"], "default": "open"},
        "sort": {"type": "string", "enum": ["due_on", "completeness"], "default": "due_on"},
        "direction": {"type": "string", "enum": ["asc", "desc"], "default": "asc"},
        "limit": {"type": "integer", "minimum": 1, "maximum": 100, "default": 50},
      },
      "required": [],
    },
  ),
  Tool(
    name="create_milestone",
    description="Create a milestone.",
    inputSchema={
      "type": "object",
      "properties": {
        "title": {"type": "string", "minLength": 1, "description": "Milestone title"},
        "state": {"type": "string", "enum": ["open", "closed"]},
        "description": {"type": "string"},
        "due_on": {"type": "string", "description": "Due date (ISO 8601)"},
      },
      "required": ["title"],
    },
  ),
  Tool(
    name="update_milestone",
    description="Update a milestone.",
    inputSchema={
      "type": "object",
      "properties": {
        "number": {"type": "integer", "minimum": 1, "description": "Milestone number"},
        "title": {"type": "string"},
        "state": {"type": "string", "enum": ["open", "closed"]},
        "description": {"type": "string"},
        "due_on": {"type": "string", "description": "Due date (ISO 8601)"},
      },
      "required": ["number"],
    },
  ),
  Tool(
    name="delete_milestone",
    description="Delete a milestone.",
    inputSchema={
      "type": "object",
      "properties": {
        "number": {"type": "integer", "minimum": 1, "description": "Milestone number"},
      },
      "required": ["number"],
    },
  ),
]
