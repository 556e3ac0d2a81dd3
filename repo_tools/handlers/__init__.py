"""Handler dispatch table: maps tool names to handler functions."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from ..context import ToolContext
from ..helpers import ErrorCategory, ToolResult, log_and_format_error
from ..models import Shape
from . import issue, label, pr, review

log = logging.getLogger("repo_tools.handlers")

Handler = Callable[[ToolContext, dict[str, Any]], Awaitable[Shape]]


def _table(category: ErrorCategory, *handlers: Handler) -> dict[str, tuple[Handler, ErrorCategory]]:
  return {fn.__name__: (fn, category) for fn in handlers}


DISPATCH: dict[str, tuple[Handler, ErrorCategory]] = {
  **_table(
    ErrorCategory.ISSUE,
    issue.create_issue,
    issue.list_issues,
    issue.update_issue,
    issue.close_issue,
  ),
  **_table(
    ErrorCategory.ASSIGNEE,
    issue.add_issue_assignees,
    issue.remove_issue_assignees,
    issue.check_repo_assignee,
    issue.list_repo_assignees,
  ),
  **_table(
    ErrorCategory.COMMENT,
    issue.list_issue_comments,
    issue.create_issue_comment,
    issue.update_issue_comment,
    issue.delete_issue_comment,
  ),
  **_table(
    ErrorCategory.LABEL,
    label.list_repo_labels,
    label.create_repo_label,
    label.update_repo_label,
    label.delete_repo_label,
    label.set_issue_labels,
    label.add_issue_labels,
    label.remove_issue_label,
  ),
  **_table(
    ErrorCategory.MILESTONE,
    label.list_milestones,
    label.create_milestone,
    label.update_milestone,
    label.delete_milestone,
  ),
  **_table(
    ErrorCategory.PR,
    pr.create_pull,
    pr.list_pulls,
    pr.get_pull,
    pr.update_pull,
    pr.list_pull_commits,
    pr.list_pull_files,
    pr.check_pull_merged,
    pr.merge_pull,
    pr.update_pull_branch,
  ),
  **_table(
    ErrorCategory.BRANCH,
    pr.list_branches,
    pr.get_branch,
    pr.rename_branch,
    pr.merge_branch,
  ),
  **_table(
    ErrorCategory.REVIEW,
    review.list_pull_reviews,
    review.create_pull_review,
    review.get_pull_review,
    review.update_pull_review,
    review.delete_pending_pull_review,
    review.list_review_comments_for_review,
    review.dismiss_pull_review,
    review.submit_pull_review,
    review.list_repo_review_comments,
    review.get_review_comment,
    review.update_review_comment,
    review.delete_review_comment,
    review.list_pull_review_comments,
    review.create_pull_review_comment,
    review.create_review_comment_reply,
    review.get_requested_reviewers,
    review.request_reviewers,
    review.remove_requested_reviewers,
  ),
}


async def execute_tool(ctx: ToolContext, name: str, arguments: dict[str, Any]) -> Shape:
  """Run a tool and return its result shape. Errors propagate unchanged."""
  try:
    handler, _category = DISPATCH[name]
  except KeyError:
    raise KeyError(f"Unknown tool: {name}") from None
  return await handler(ctx, arguments)


async def dispatch_tool(ctx: ToolContext, name: str, arguments: dict[str, Any]) -> ToolResult:
  """Look up and execute a tool handler by name, rendering the outcome for the agent."""
  entry = DISPATCH.get(name)
  if entry is None:
    return ToolResult(content=f"Unknown tool: {name}", is_error=True)
  handler, category = entry
  try:
    result = await handler(ctx, arguments)
  except Exception as e:
    return log_and_format_error(name, e, category)
  log.debug("Tool %s completed", name)
  return ToolResult(content=result.model_dump_json())
