"""Label and milestone tool handlers."""

from __future__ import annotations

from typing import Any

from ..context import ToolContext
from ..helpers import as_items
from ..models import (
  IssueLabels,
  Label,
  LabelList,
  LabelRef,
  Milestone,
  MilestoneList,
  NameStatus,
  NumberedRef,
  NumberStatus,
  RemovedIssueLabel,
)
from ..validation import (
  opt_enum,
  opt_hex_color,
  opt_limit,
  opt_string,
  opt_string_list,
  req_positive_int,
  req_string,
)

# ---------------------------------------------------------------------------
# Repository labels
# ---------------------------------------------------------------------------


async def list_repo_labels(ctx: ToolContext, args: dict[str, Any]) -> LabelList:
  limit = opt_limit(args, 50)

  r = await ctx.request("GET /repos/{owner}/{repo}/labels", per_page=limit)
  return LabelList(items=[Label.model_validate(lbl) for lbl in as_items(r.data)])


async def create_repo_label(ctx: ToolContext, args: dict[str, Any]) -> LabelRef:
  name = req_string(args, "name")
  color = opt_hex_color(args)
  description = opt_string(args, "description")

  r = await ctx.request(
    "POST /repos/{owner}/{repo}/labels",
    name=name,
    color=color,
    description=description,
  )
  return LabelRef(name=r.data["name"], url=r.data.get("url"), status="created")


async def update_repo_label(ctx: ToolContext, args: dict[str, Any]) -> NameStatus:
  current_name = req_string(args, "current_name")
  new_name = opt_string(args, "new_name")
  color = opt_hex_color(args)
  description = opt_string(args, "description")

  r = await ctx.request(
    "PATCH /repos/{owner}/{repo}/labels/{name}",
    name=current_name,
    new_name=new_name,
    color=color,
    description=description,
  )
  return NameStatus(name=r.data["name"], status="updated")


async def delete_repo_label(ctx: ToolContext, args: dict[str, Any]) -> NameStatus:
  name = req_string(args, "name")

  await ctx.request("DELETE /repos/{owner}/{repo}/labels/{name}", name=name)
  return NameStatus(name=name, status="deleted")


# ---------------------------------------------------------------------------
# Issue labels
# ---------------------------------------------------------------------------


async def set_issue_labels(ctx: ToolContext, args: dict[str, Any]) -> IssueLabels:
  number = req_positive_int(args, "number")
  labels = opt_string_list(args, "labels") or []

  r = await ctx.request(
    "PUT /repos/{owner}/{repo}/issues/{issue_number}/labels",
    issue_number=number,
    labels=labels,
  )
  return IssueLabels(number=number, labels=as_items(r.data))


async def add_issue_labels(ctx: ToolContext, args: dict[str, Any]) -> IssueLabels:
  number = req_positive_int(args, "number")
  labels = opt_string_list(args, "labels") or []

  r = await ctx.request(
    "POST /repos/{owner}/{repo}/issues/{issue_number}/labels",
    issue_number=number,
    labels=labels,
  )
  return IssueLabels(number=number, labels=as_items(r.data))


async def remove_issue_label(ctx: ToolContext, args: dict[str, Any]) -> RemovedIssueLabel:
  number = req_positive_int(args, "number")
  name = req_string(args, "name")

  await ctx.request(
    "DELETE /repos/{owner}/{repo}/issues/{issue_number}/labels/{name}",
    issue_number=number,
    name=name,
  )
  return RemovedIssueLabel(number=number, removed=name)


# ---------------------------------------------------------------------------
# Milestones
# ---------------------------------------------------------------------------


async def list_milestones(ctx: ToolContext, args: dict[str, Any]) -> MilestoneList:
  state = opt_enum(args, "state", ("open", "closed", "all"), "open")
  sort = opt_enum(args, "sort", ("due_on", "completeness"), "due_on")
  direction = opt_enum(args, "direction", ("asc", "desc"), "asc")
  limit = opt_limit(args, 50)

  r = await ctx.request(
    "GET /repos/{owner}/{repo}/milestones",
    state=state,
    sort=sort,
    direction=direction,
    per_page=limit,
  )
  return MilestoneList(items=[Milestone.model_validate(m) for m in as_items(r.data)])


async def create_milestone(ctx: ToolContext, args: dict[str, Any]) -> NumberedRef:
  title = req_string(args, "title")
  state = opt_enum(args, "state", ("open", "closed"))
  description = opt_string(args, "description")
  due_on = opt_string(args, "due_on")

  r = await ctx.request(
    "POST /repos/{owner}/{repo}/milestones",
    title=title,
    state=state,
    description=description,
    due_on=due_on,
  )
  return NumberedRef.model_validate({**r.data, "status": "created"})


async def update_milestone(ctx: ToolContext, args: dict[str, Any]) -> NumberStatus:
  number = req_positive_int(args, "number")
  title = opt_string(args, "title")
  state = opt_enum(args, "state", ("open", "closed"))
  description = opt_string(args, "description")
  due_on = opt_string(args, "due_on")

  r = await ctx.request(
    "PATCH /repos/{owner}/{repo}/milestones/{milestone_number}",
    milestone_number=number,
    title=title,
    state=state,
    description=description,
    due_on=due_on,
  )
  return NumberStatus(number=r.data["number"], status="updated")


async def delete_milestone(ctx: ToolContext, args: dict[str, Any]) -> NumberStatus:
  number = req_positive_int(args, "number")

  await ctx.request("DELETE /repos/{owner}/{repo}/milestones/{milestone_number}", milestone_number=number)
  return NumberStatus(number=number, status="deleted")
