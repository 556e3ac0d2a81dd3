"""Pull request and branch tool handlers."""

from __future__ import annotations

from typing import Any

from ..client.gh_client import RemoteError
from ..context import ToolContext
from ..helpers import as_items, filter_by_keyword
from ..models import (
  BranchDetail,
  BranchList,
  BranchMerge,
  BranchRename,
  BranchSummary,
  NumberedRef,
  PullBranchUpdate,
  PullCommit,
  PullCommitList,
  PullDetail,
  PullFile,
  PullFileList,
  PullList,
  PullMergeCheck,
  PullMergeResult,
  PullSummary,
)
from ..validation import (
  opt_boolean,
  opt_enum,
  opt_keyword,
  opt_limit,
  opt_string,
  req_positive_int,
  req_string,
)

# ---------------------------------------------------------------------------
# Pull requests
# ---------------------------------------------------------------------------


async def create_pull(ctx: ToolContext, args: dict[str, Any]) -> NumberedRef:
  title = req_string(args, "title")
  head = req_string(args, "head")
  base = req_string(args, "base")
  body = opt_string(args, "body")
  draft = opt_boolean(args, "draft")
  maintainer_can_modify = opt_boolean(args, "maintainer_can_modify")

  r = await ctx.request(
    "POST /repos/{owner}/{repo}/pulls",
    title=title,
    head=head,
    base=base,
    body=body,
    draft=draft,
    maintainer_can_modify=maintainer_can_modify,
  )
  return NumberedRef.model_validate({**r.data, "status": "created"})


async def list_pulls(ctx: ToolContext, args: dict[str, Any]) -> PullList:
  state = opt_enum(args, "state", ("open", "closed", "all"), "open")
  head = opt_string(args, "head")
  base = opt_string(args, "base")
  sort = opt_enum(args, "sort", ("created", "updated", "popularity", "long-running"), "created")
  direction = opt_enum(args, "direction", ("desc", "asc"), "desc")
  limit = opt_limit(args, 20)
  keyword = opt_keyword(args)

  r = await ctx.request(
    "GET /repos/{owner}/{repo}/pulls",
    state=state,
    head=head,
    base=base,
    sort=sort,
    direction=direction,
    per_page=limit,
  )
  items = filter_by_keyword(as_items(r.data), keyword, lambda it: (it.get("title"), it.get("body")))
  return PullList(items=[PullSummary.model_validate(it) for it in items])


async def get_pull(ctx: ToolContext, args: dict[str, Any]) -> PullDetail:
  number = req_positive_int(args, "number")

  r = await ctx.request("GET /repos/{owner}/{repo}/pulls/{pull_number}", pull_number=number)
  return PullDetail.model_validate(r.data)


async def update_pull(ctx: ToolContext, args: dict[str, Any]) -> NumberedRef:
  number = req_positive_int(args, "number")
  title = opt_string(args, "title")
  body = opt_string(args, "body")
  state = opt_enum(args, "state", ("open", "closed"))
  base = opt_string(args, "base")
  maintainer_can_modify = opt_boolean(args, "maintainer_can_modify")
  draft = opt_boolean(args, "draft")

  r = await ctx.request(
    "PATCH /repos/{owner}/{repo}/pulls/{pull_number}",
    pull_number=number,
    title=title,
    body=body,
    state=state,
    base=base,
    maintainer_can_modify=maintainer_can_modify,
    draft=draft,
  )
  return NumberedRef.model_validate({**r.data, "status": "updated"})


async def list_pull_commits(ctx: ToolContext, args: dict[str, Any]) -> PullCommitList:
  number = req_positive_int(args, "number")
  limit = opt_limit(args, 100, maximum=250)

  r = await ctx.request(
    "GET /repos/{owner}/{repo}/pulls/{pull_number}/commits",
    pull_number=number,
    per_page=limit,
  )
  return PullCommitList(items=[PullCommit.model_validate(c) for c in as_items(r.data)])


async def list_pull_files(ctx: ToolContext, args: dict[str, Any]) -> PullFileList:
  number = req_positive_int(args, "number")
  limit = opt_limit(args, 100, maximum=300)

  r = await ctx.request(
    "GET /repos/{owner}/{repo}/pulls/{pull_number}/files",
    pull_number=number,
    per_page=limit,
  )
  return PullFileList(items=[PullFile.model_validate(f) for f in as_items(r.data)])


async def check_pull_merged(ctx: ToolContext, args: dict[str, Any]) -> PullMergeCheck:
  number = req_positive_int(args, "number")

  try:
    await ctx.request("GET /repos/{owner}/{repo}/pulls/{pull_number}/merge", pull_number=number)
  except RemoteError as e:
    if e.status == 404:
      return PullMergeCheck(number=number, merged=False)
    raise
  return PullMergeCheck(number=number, merged=True)


async def merge_pull(ctx: ToolContext, args: dict[str, Any]) -> PullMergeResult:
  number = req_positive_int(args, "number")
  commit_title = opt_string(args, "commit_title")
  commit_message = opt_string(args, "commit_message")
  merge_method = opt_enum(args, "merge_method", ("merge", "squash", "rebase"))
  sha = opt_string(args, "sha")

  r = await ctx.request(
    "PUT /repos/{owner}/{repo}/pulls/{pull_number}/merge",
    pull_number=number,
    commit_title=commit_title,
    commit_message=commit_message,
    merge_method=merge_method,
    sha=sha,
  )
  data = r.data if isinstance(r.data, dict) else {}
  merged = bool(data.get("merged"))
  return PullMergeResult(
    number=number,
    merged=merged,
    message=data.get("message"),
    sha=data.get("sha"),
    status="merged" if merged else "failed",
  )


async def update_pull_branch(ctx: ToolContext, args: dict[str, Any]) -> PullBranchUpdate:
  number = req_positive_int(args, "number")
  expected_head_sha = opt_string(args, "expected_head_sha")

  r = await ctx.request(
    "PUT /repos/{owner}/{repo}/pulls/{pull_number}/update-branch",
    pull_number=number,
    expected_head_sha=expected_head_sha,
  )
  data = r.data if isinstance(r.data, dict) else {}
  return PullBranchUpdate(
    number=number,
    status="updated",
    message=data.get("message") or "Branch update triggered",
  )


# ---------------------------------------------------------------------------
# Branches
# ---------------------------------------------------------------------------


async def list_branches(ctx: ToolContext, args: dict[str, Any]) -> BranchList:
  protected = opt_boolean(args, "protected")
  limit = opt_limit(args, 30)
  keyword = opt_keyword(args)

  r = await ctx.request(
    "GET /repos/{owner}/{repo}/branches",
    protected=protected,
    per_page=limit,
  )
  items = filter_by_keyword(as_items(r.data), keyword, lambda b: (b.get("name"),))
  return BranchList(items=[BranchSummary.model_validate(b) for b in items])


async def get_branch(ctx: ToolContext, args: dict[str, Any]) -> BranchDetail:
  branch = req_string(args, "branch")

  r = await ctx.request("GET /repos/{owner}/{repo}/branches/{branch}", branch=branch)
  return BranchDetail.model_validate(r.data)


async def rename_branch(ctx: ToolContext, args: dict[str, Any]) -> BranchRename:
  branch = req_string(args, "branch")
  new_name = req_string(args, "new_name")

  r = await ctx.request(
    "POST /repos/{owner}/{repo}/branches/{branch}/rename",
    branch=branch,
    new_name=new_name,
  )
  data = r.data if isinstance(r.data, dict) else {}
  return BranchRename(old_name=branch, new_name=data.get("name"), status="renamed")


async def merge_branch(ctx: ToolContext, args: dict[str, Any]) -> BranchMerge:
  base = req_string(args, "base")
  head = req_string(args, "head")
  commit_message = opt_string(args, "commit_message")

  r = await ctx.request(
    "POST /repos/{owner}/{repo}/merges",
    base=base,
    head=head,
    commit_message=commit_message,
  )
  # 201: merge commit created, 204: base already contains head
  status = {201: "merged", 204: "noop"}.get(r.status, "ok")
  data = r.data if isinstance(r.data, dict) else {}
  return BranchMerge(
    base=base,
    head=head,
    sha=data.get("sha"),
    commit_message=(data.get("commit") or {}).get("message") or commit_message,
    status=status,
  )
