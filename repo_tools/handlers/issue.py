"""Issue, assignee and issue-comment tool handlers."""

from __future__ import annotations

from typing import Any

from ..client.gh_client import RemoteError
from ..context import ToolContext
from ..helpers import as_items, filter_by_keyword, logins
from ..models import (
  AssigneeCheck,
  AssigneeRemoval,
  AssigneeUpdate,
  CommentRef,
  IdStatus,
  IssueComment,
  IssueCommentList,
  IssueList,
  IssueSummary,
  LoginList,
  NumberedRef,
)
from ..validation import (
  opt_enum,
  opt_keyword,
  opt_limit,
  opt_string,
  opt_string_list,
  req_positive_int,
  req_string,
  req_string_list,
  req_text,
)

# ---------------------------------------------------------------------------
# Issues
# ---------------------------------------------------------------------------


async def create_issue(ctx: ToolContext, args: dict[str, Any]) -> NumberedRef:
  title = req_string(args, "title")
  body = opt_string(args, "body")
  labels = opt_string_list(args, "labels")
  assignees = opt_string_list(args, "assignees")

  r = await ctx.request(
    "POST /repos/{owner}/{repo}/issues",
    title=title,
    body=body,
    labels=labels,
    assignees=assignees,
  )
  return NumberedRef.model_validate({**r.data, "status": "created"})


async def list_issues(ctx: ToolContext, args: dict[str, Any]) -> IssueList:
  state = opt_enum(args, "state", ("open", "closed", "all"), "open")
  keyword = opt_keyword(args)
  labels = opt_string_list(args, "labels")
  mentioned = opt_string(args, "mentioned")
  assignee = opt_string(args, "assignee")
  sort = opt_enum(args, "sort", ("created", "updated", "comments"), "created")
  direction = opt_enum(args, "direction", ("desc", "asc"), "desc")
  limit = opt_limit(args, 20)

  if assignee == "@":
    assignee = ctx.owner

  r = await ctx.request(
    "GET /repos/{owner}/{repo}/issues",
    state=state,
    mentioned=mentioned,
    assignee=assignee,
    sort=sort,
    direction=direction,
    per_page=limit,
    labels=",".join(labels) if labels else None,
  )
  items = filter_by_keyword(as_items(r.data), keyword, lambda it: (it.get("title"), it.get("body")))
  return IssueList(items=[IssueSummary.model_validate(it) for it in items])


async def update_issue(ctx: ToolContext, args: dict[str, Any]) -> NumberedRef:
  number = req_positive_int(args, "number")
  title = opt_string(args, "title")
  body = opt_string(args, "body")
  labels = opt_string_list(args, "labels")
  assignees = opt_string_list(args, "assignees")

  r = await ctx.request(
    "PATCH /repos/{owner}/{repo}/issues/{issue_number}",
    issue_number=number,
    title=title,
    body=body,
    labels=labels,
    assignees=assignees,
  )
  return NumberedRef.model_validate({**r.data, "status": "updated"})


async def close_issue(ctx: ToolContext, args: dict[str, Any]) -> NumberedRef:
  number = req_positive_int(args, "number")

  r = await ctx.request(
    "PATCH /repos/{owner}/{repo}/issues/{issue_number}",
    issue_number=number,
    state="closed",
  )
  return NumberedRef.model_validate({**r.data, "status": "closed"})


# ---------------------------------------------------------------------------
# Assignees
# ---------------------------------------------------------------------------


async def add_issue_assignees(ctx: ToolContext, args: dict[str, Any]) -> AssigneeUpdate:
  number = req_positive_int(args, "number")
  assignees = req_string_list(args, "assignees")

  r = await ctx.request(
    "POST /repos/{owner}/{repo}/issues/{issue_number}/assignees",
    issue_number=number,
    assignees=assignees,
  )
  data = r.data if isinstance(r.data, dict) else {}
  return AssigneeUpdate(number=number, assignees=logins(data.get("assignees")), status="updated")


async def remove_issue_assignees(ctx: ToolContext, args: dict[str, Any]) -> AssigneeRemoval:
  number = req_positive_int(args, "number")
  assignees = req_string_list(args, "assignees")

  await ctx.request(
    "DELETE /repos/{owner}/{repo}/issues/{issue_number}/assignees",
    issue_number=number,
    assignees=assignees,
  )
  return AssigneeRemoval(number=number, removed=assignees, status="updated")


async def check_repo_assignee(ctx: ToolContext, args: dict[str, Any]) -> AssigneeCheck:
  assignee = req_string(args, "assignee")

  try:
    await ctx.request("GET /repos/{owner}/{repo}/assignees/{assignee}", assignee=assignee)
  except RemoteError as e:
    if e.status == 404:
      return AssigneeCheck(assignee=assignee, assignable=False)
    raise
  return AssigneeCheck(assignee=assignee, assignable=True)


async def list_repo_assignees(ctx: ToolContext, args: dict[str, Any]) -> LoginList:
  limit = opt_limit(args, 30)

  r = await ctx.request("GET /repos/{owner}/{repo}/assignees", per_page=limit)
  return LoginList(items=logins(as_items(r.data)))


# ---------------------------------------------------------------------------
# Issue comments
# ---------------------------------------------------------------------------


async def list_issue_comments(ctx: ToolContext, args: dict[str, Any]) -> IssueCommentList:
  number = req_positive_int(args, "number")
  limit = opt_limit(args, 50)

  r = await ctx.request(
    "GET /repos/{owner}/{repo}/issues/{issue_number}/comments",
    issue_number=number,
    per_page=limit,
  )
  return IssueCommentList(items=[IssueComment.model_validate(c) for c in as_items(r.data)])


async def create_issue_comment(ctx: ToolContext, args: dict[str, Any]) -> CommentRef:
  number = req_positive_int(args, "number")
  body = req_text(args, "body")

  r = await ctx.request(
    "POST /repos/{owner}/{repo}/issues/{issue_number}/comments",
    issue_number=number,
    body=body,
  )
  return CommentRef.model_validate({**r.data, "status": "created"})


async def update_issue_comment(ctx: ToolContext, args: dict[str, Any]) -> CommentRef:
  comment_id = req_positive_int(args, "comment_id")
  body = req_text(args, "body")

  r = await ctx.request(
    "PATCH /repos/{owner}/{repo}/issues/comments/{comment_id}",
    comment_id=comment_id,
    body=body,
  )
  return CommentRef.model_validate({**r.data, "status": "updated"})


async def delete_issue_comment(ctx: ToolContext, args: dict[str, Any]) -> IdStatus:
  comment_id = req_positive_int(args, "comment_id")

  await ctx.request("DELETE /repos/{owner}/{repo}/issues/comments/{comment_id}", comment_id=comment_id)
  return IdStatus(id=comment_id, status="deleted")
