"""
Pull request review, review comment and review request tools (18 tools).

A review is pending until an event is submitted; only pending reviews can be
deleted, submitted ones can only be dismissed. Each step is its own tool.
"""

from __future__ import annotations

from mcp.types import Tool

REVIEW_EVENTS = ["APPROVE", "REQUEST_CHANGES", "COMMENT"]
SIDES = ["LEFT", "RIGHT"]

_PULL_NUMBER = {"type": "integer", "minimum": 1, "description": "Pull request number"}
_REVIEW_ID = {"type": "integer", "minimum": 1, "description": "Review ID"}
_COMMENT_ID = {"type": "integer", "minimum": 1, "description": "Review comment ID"}
_LIMIT_50 = {"type": "integer", "minimum": 1, "maximum": 100, "default": 50}

review_tools: list[Tool] = [
  Tool(
    name="list_pull_reviews",
    description="List reviews for a pull request.",
    inputSchema={
      "type": "object",
      "properties": {"number": _PULL_NUMBER},
      "required": ["number"],
    },
  ),
  Tool(
    name="create_pull_review",
    description="Create a review for a pull request. Omit event to leave the review pending.",
    inputSchema={
      "type": "object",
      "properties": {
        "number": _PULL_NUMBER,
        "body": {"type": "string"},
        "event": {"type": "string", "enum": REVIEW_EVENTS},
        "comments": {
          "type": "array",
          "items": {
            "type": "object",
            "properties": {
              "path": {"type": "string", "minLength": 1},
              "position": {"type": "integer", "minimum": 1},
              "line": {"type": "integer", "minimum": 1},
              "side": {"type": "string", "enum": SIDES},
              "start_line": {"type": "integer", "minimum": 1},
              "start_side": {"type": "string", "enum": SIDES},
              "body": {"type": "string", "minLength": 1},
            },
            "required": ["path", "body"],
          },
        },
      },
      "required": ["number"],
    },
  ),
  Tool(
    name="get_pull_review",
    description="Get a review for a pull request.",
    inputSchema={
      "type": "object",
      "properties": {"number": _PULL_NUMBER, "review_id": _REVIEW_ID},
      "required": ["number", "review_id"],
    },
  ),
  Tool(
    name="update_pull_review",
    description="Update the body of a pull request review.",
    inputSchema={
      "type": "object",
      "properties": {
        "number": _PULL_NUMBER,
        "review_id": _REVIEW_ID,
        "body": {"type": "string", "minLength": 1},
      },
      "required": ["number", "review_id", "body"],
    },
  ),
  Tool(
    name="delete_pending_pull_review",
    description="Delete a pending review for a pull request.",
    inputSchema={
      "type": "object",
      "properties": {"number": _PULL_NUMBER, "review_id": _REVIEW_ID},
      "required": ["number", "review_id"],
    },
  ),
  Tool(
    name="list_review_comments_for_review",
    description="List comments for a pull request review.",
    inputSchema={
      "type": "object",
      "properties": {"number": _PULL_NUMBER, "review_id": _REVIEW_ID, "limit": _LIMIT_50},
      "required": ["number", "review_id"],
    },
  ),
  Tool(
    name="dismiss_pull_review",
    description="Dismiss a review for a pull request.",
    inputSchema={
      "type": "object",
      "properties": {
        "number": _PULL_NUMBER,
        "review_id": _REVIEW_ID,
        "message": {"type": "string", "minLength": 1, "description": "Reason for dismissal"},
      },
      "required": ["number", "review_id", "message"],
    },
  ),
  Tool(
    name="submit_pull_review",
    description="Submit a pending review for a pull request (APPROVE, REQUEST_CHANGES, COMMENT).",
    inputSchema={
      "type": "object",
      "properties": {
        "number": _PULL_NUMBER,
        "review_id": _REVIEW_ID,
        "body": {"type": "string"},
        "event": {"type": "string", "enum": REVIEW_EVENTS},
      },
      "required": ["number", "review_id", "event"],
    },
  ),
]

review_comment_tools: list[Tool] = [
  Tool(
    name="list_repo_review_comments",
    description="List review comments across the repository.",
    inputSchema={
      "type": "object",
      "properties": {
        "sort": {"type": "string", "enum": ["created", "updated"], "default": "created"},
        "direction": {"type": "string", "enum": ["asc", "desc"], "default": "desc"},
        "since": {"type": "string", "description": "Only comments updated after this ISO 8601 time"},
        "limit": _LIMIT_50,
      },
      "required": [],
    },
  ),
  Tool(
    name="get_review_comment",
    description="Get a single review comment by ID.",
    inputSchema={
      "type": "object",
      "properties": {"comment_id": _COMMENT_ID},
      "required": ["comment_id"],
    },
  ),
  Tool(
    name="update_review_comment",
    description="Update a review comment for a pull request.",
    inputSchema={
      "type": "object",
      "properties": {"comment_id": _COMMENT_ID, "body": {"type": "string", "minLength": 1}},
      "required": ["comment_id", "body"],
    },
  ),
  Tool(
    name="delete_review_comment",
    description="Delete a review comment for a pull request.",
    inputSchema={
      "type": "object",
      "properties": {"comment_id": _COMMENT_ID},
      "required": ["comment_id"],
    },
  ),
  Tool(
    name="list_pull_review_comments",
    description="List review comments on a specific pull request.",
    inputSchema={
      "type": "object",
      "properties": {"number": _PULL_NUMBER, "limit": _LIMIT_50},
      "required": ["number"],
    },
  ),
  Tool(
    name="create_pull_review_comment",
    description="Create a review comment on a pull request (or a reply if in_reply_to is provided).",
    inputSchema={
      "type": "object",
      "properties": {
        "number": _PULL_NUMBER,
        "body": {"type": "string", "minLength": 1},
        "commit_id": {"type": "string", "minLength": 1, "description": "SHA of the commit to comment on"},
        "path": {"type": "string", "minLength": 1, "description": "Relative path of the file"},
        "side": {"type": "string", "enum": SIDES},
        "start_side": {"type": "string", "enum": SIDES},
        "line": {"type": "integer", "minimum": 1},
        "start_line": {"type": "integer", "minimum": 1},
        "in_reply_to": {
          "type": "integer",
          "minimum": 1,
          "description": "If provided, creates a reply instead of a new comment thread.",
        },
      },
      "required": ["number", "body", "commit_id", "path"],
    },
  ),
  Tool(
    name="create_review_comment_reply",
    description="Create a reply for a review comment.",
    inputSchema={
      "type": "object",
      "properties": {"comment_id": _COMMENT_ID, "body": {"type": "string", "minLength": 1}},
      "required": ["comment_id", "body"],
    },
  ),
]

review_request_tools: list[Tool] = [
  Tool(
    name="get_requested_reviewers",
    description="Get all requested reviewers for a pull request.",
    inputSchema={
      "type": "object",
      "properties": {"number": _PULL_NUMBER},
      "required": ["number"],
    },
  ),
  Tool(
    name="request_reviewers",
    description="Request reviewers for a pull request (users and/or teams).",
    inputSchema={
      "type": "object",
      "properties": {
        "number": _PULL_NUMBER,
        "reviewers": {"type": "array", "items": {"type": "string"}, "default": []},
        "team_reviewers": {"type": "array", "items": {"type": "string"}, "default": []},
      },
      "required": ["number"],
    },
  ),
  Tool(
    name="remove_requested_reviewers",
    description="Remove requested reviewers from a pull request.",
    inputSchema={
      "type": "object",
      "properties": {
        "number": _PULL_NUMBER,
        "reviewers": {"type": "array", "items": {"type": "string"}, "default": []},
        "team_reviewers": {"type": "array", "items": {"type": "string"}, "default": []},
      },
      "required": ["number"],
    },
  ),
]
