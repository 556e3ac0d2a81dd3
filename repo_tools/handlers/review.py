"""Pull request review, review comment and review request tool handlers."""

from __future__ import annotations

from typing import Any

from ..context import ToolContext
from ..helpers import as_items, logins, team_names
from ..models import (
  CommentRef,
  IdStatus,
  PullReviewComment,
  PullReviewCommentList,
  RemovedReviewers,
  RequestedReviewers,
  Review,
  ReviewComment,
  ReviewCommentList,
  ReviewCommentsForReview,
  ReviewCreated,
  ReviewList,
  ReviewRequestRemoval,
  ReviewRequestUpdate,
  ReviewTransition,
)
from ..tools.review import REVIEW_EVENTS, SIDES
from ..validation import (
  ValidationError,
  opt_enum,
  opt_limit,
  opt_object_list,
  opt_positive_int,
  opt_string,
  opt_string_list,
  req_enum,
  req_positive_int,
  req_string,
  req_text,
)


def _draft_comment(raw: dict[str, Any], index: int) -> dict[str, Any]:
  """Validate one inline comment of a new review."""
  try:
    comment = {
      "path": req_string(raw, "path"),
      "position": opt_positive_int(raw, "position"),
      "line": opt_positive_int(raw, "line"),
      "side": opt_enum(raw, "side", SIDES),
      "start_line": opt_positive_int(raw, "start_line"),
      "start_side": opt_enum(raw, "start_side", SIDES),
      "body": req_text(raw, "body"),
    }
  except ValidationError as e:
    raise ValidationError(f"comments[{index}]: {e}") from e
  return {k: v for k, v in comment.items() if v is not None}


# ---------------------------------------------------------------------------
# Reviews
# ---------------------------------------------------------------------------


async def list_pull_reviews(ctx: ToolContext, args: dict[str, Any]) -> ReviewList:
  number = req_positive_int(args, "number")

  r = await ctx.request("GET /repos/{owner}/{repo}/pulls/{pull_number}/reviews", pull_number=number)
  return ReviewList(number=number, items=[Review.model_validate(rv) for rv in as_items(r.data)])


async def create_pull_review(ctx: ToolContext, args: dict[str, Any]) -> ReviewCreated:
  number = req_positive_int(args, "number")
  body = opt_string(args, "body")
  event = opt_enum(args, "event", REVIEW_EVENTS)
  raw_comments = opt_object_list(args, "comments")
  comments = None
  if raw_comments is not None:
    comments = [_draft_comment(c, i) for i, c in enumerate(raw_comments)]

  r = await ctx.request(
    "POST /repos/{owner}/{repo}/pulls/{pull_number}/reviews",
    pull_number=number,
    body=body,
    event=event,
    comments=comments,
  )
  return ReviewCreated(number=number, review_id=r.data["id"], status="created")


async def get_pull_review(ctx: ToolContext, args: dict[str, Any]) -> Review:
  number = req_positive_int(args, "number")
  review_id = req_positive_int(args, "review_id")

  r = await ctx.request(
    "GET /repos/{owner}/{repo}/pulls/{pull_number}/reviews/{review_id}",
    pull_number=number,
    review_id=review_id,
  )
  return Review.model_validate(r.data)


async def update_pull_review(ctx: ToolContext, args: dict[str, Any]) -> IdStatus:
  number = req_positive_int(args, "number")
  review_id = req_positive_int(args, "review_id")
  body = req_text(args, "body")

  r = await ctx.request(
    "PUT /repos/{owner}/{repo}/pulls/{pull_number}/reviews/{review_id}",
    pull_number=number,
    review_id=review_id,
    body=body,
  )
  data = r.data if isinstance(r.data, dict) else {}
  return IdStatus(id=data.get("id") or review_id, status="updated")


async def delete_pending_pull_review(ctx: ToolContext, args: dict[str, Any]) -> IdStatus:
  number = req_positive_int(args, "number")
  review_id = req_positive_int(args, "review_id")

  await ctx.request(
    "DELETE /repos/{owner}/{repo}/pulls/{pull_number}/reviews/{review_id}",
    pull_number=number,
    review_id=review_id,
  )
  return IdStatus(id=review_id, status="deleted")


async def list_review_comments_for_review(
  ctx: ToolContext,
  args: dict[str, Any],
) -> ReviewCommentsForReview:
  number = req_positive_int(args, "number")
  review_id = req_positive_int(args, "review_id")
  limit = opt_limit(args, 50)

  r = await ctx.request(
    "GET /repos/{owner}/{repo}/pulls/{pull_number}/reviews/{review_id}/comments",
    pull_number=number,
    review_id=review_id,
    per_page=limit,
  )
  return ReviewCommentsForReview(
    number=number,
    review_id=review_id,
    items=[PullReviewComment.model_validate(c) for c in as_items(r.data)],
  )


async def dismiss_pull_review(ctx: ToolContext, args: dict[str, Any]) -> ReviewTransition:
  number = req_positive_int(args, "number")
  review_id = req_positive_int(args, "review_id")
  message = req_text(args, "message")

  r = await ctx.request(
    "PUT /repos/{owner}/{repo}/pulls/{pull_number}/reviews/{review_id}/dismissals",
    pull_number=number,
    review_id=review_id,
    message=message,
  )
  data = r.data if isinstance(r.data, dict) else {}
  return ReviewTransition(id=review_id, state=data.get("state"), status="dismissed")


async def submit_pull_review(ctx: ToolContext, args: dict[str, Any]) -> ReviewTransition:
  number = req_positive_int(args, "number")
  review_id = req_positive_int(args, "review_id")
  body = opt_string(args, "body")
  event = req_enum(args, "event", REVIEW_EVENTS)

  r = await ctx.request(
    "POST /repos/{owner}/{repo}/pulls/{pull_number}/reviews/{review_id}/events",
    pull_number=number,
    review_id=review_id,
    body=body,
    event=event,
  )
  data = r.data if isinstance(r.data, dict) else {}
  return ReviewTransition(id=review_id, state=data.get("state"), status="submitted")


# ---------------------------------------------------------------------------
# Review comments
# ---------------------------------------------------------------------------


async def list_repo_review_comments(ctx: ToolContext, args: dict[str, Any]) -> ReviewCommentList:
  sort = opt_enum(args, "sort", ("created", "updated"), "created")
  direction = opt_enum(args, "direction", ("asc", "desc"), "desc")
  since = opt_string(args, "since")
  limit = opt_limit(args, 50)

  r = await ctx.request(
    "GET /repos/{owner}/{repo}/pulls/comments",
    sort=sort,
    direction=direction,
    since=since,
    per_page=limit,
  )
  return ReviewCommentList(items=[ReviewComment.model_validate(c) for c in as_items(r.data)])


async def get_review_comment(ctx: ToolContext, args: dict[str, Any]) -> ReviewComment:
  comment_id = req_positive_int(args, "comment_id")

  r = await ctx.request("GET /repos/{owner}/{repo}/pulls/comments/{comment_id}", comment_id=comment_id)
  return ReviewComment.model_validate(r.data)


async def update_review_comment(ctx: ToolContext, args: dict[str, Any]) -> CommentRef:
  comment_id = req_positive_int(args, "comment_id")
  body = req_text(args, "body")

  r = await ctx.request(
    "PATCH /repos/{owner}/{repo}/pulls/comments/{comment_id}",
    comment_id=comment_id,
    body=body,
  )
  return CommentRef.model_validate({**r.data, "status": "updated"})


async def delete_review_comment(ctx: ToolContext, args: dict[str, Any]) -> IdStatus:
  comment_id = req_positive_int(args, "comment_id")

  await ctx.request("DELETE /repos/{owner}/{repo}/pulls/comments/{comment_id}", comment_id=comment_id)
  return IdStatus(id=comment_id, status="deleted")


async def list_pull_review_comments(ctx: ToolContext, args: dict[str, Any]) -> PullReviewCommentList:
  number = req_positive_int(args, "number")
  limit = opt_limit(args, 50)

  r = await ctx.request(
    "GET /repos/{owner}/{repo}/pulls/{pull_number}/comments",
    pull_number=number,
    per_page=limit,
  )
  return PullReviewCommentList(
    number=number,
    items=[PullReviewComment.model_validate(c) for c in as_items(r.data)],
  )


async def create_pull_review_comment(ctx: ToolContext, args: dict[str, Any]) -> CommentRef:
  number = req_positive_int(args, "number")
  body = req_text(args, "body")
  commit_id = req_string(args, "commit_id")
  path = req_string(args, "path")
  side = opt_enum(args, "side", SIDES)
  start_side = opt_enum(args, "start_side", SIDES)
  line = opt_positive_int(args, "line")
  start_line = opt_positive_int(args, "start_line")
  in_reply_to = opt_positive_int(args, "in_reply_to")

  if in_reply_to:
    r = await ctx.request(
      "POST /repos/{owner}/{repo}/pulls/comments/{comment_id}/replies",
      comment_id=in_reply_to,
      body=body,
    )
  else:
    r = await ctx.request(
      "POST /repos/{owner}/{repo}/pulls/{pull_number}/comments",
      pull_number=number,
      body=body,
      commit_id=commit_id,
      path=path,
      line=line,
      side=side,
      start_line=start_line,
      start_side=start_side,
    )
  return CommentRef.model_validate({**r.data, "status": "created"})


async def create_review_comment_reply(ctx: ToolContext, args: dict[str, Any]) -> CommentRef:
  comment_id = req_positive_int(args, "comment_id")
  body = req_text(args, "body")

  r = await ctx.request(
    "POST /repos/{owner}/{repo}/pulls/comments/{comment_id}/replies",
    comment_id=comment_id,
    body=body,
  )
  return CommentRef.model_validate({**r.data, "status": "created"})


# ---------------------------------------------------------------------------
# Review requests
# ---------------------------------------------------------------------------


async def get_requested_reviewers(ctx: ToolContext, args: dict[str, Any]) -> RequestedReviewers:
  number = req_positive_int(args, "number")

  r = await ctx.request(
    "GET /repos/{owner}/{repo}/pulls/{pull_number}/requested_reviewers",
    pull_number=number,
  )
  data = r.data if isinstance(r.data, dict) else {}
  return RequestedReviewers(
    number=number,
    users=logins(data.get("users")),
    teams=team_names(data.get("teams")),
  )


async def request_reviewers(ctx: ToolContext, args: dict[str, Any]) -> ReviewRequestUpdate:
  number = req_positive_int(args, "number")
  reviewers = opt_string_list(args, "reviewers") or []
  team_reviewers = opt_string_list(args, "team_reviewers") or []

  r = await ctx.request(
    "POST /repos/{owner}/{repo}/pulls/{pull_number}/requested_reviewers",
    pull_number=number,
    reviewers=reviewers,
    team_reviewers=team_reviewers,
  )
  data = r.data if isinstance(r.data, dict) else {}
  return ReviewRequestUpdate(
    number=number,
    users=logins(data.get("requested_reviewers")),
    teams=team_names(data.get("requested_teams")),
    status="requested",
  )


async def remove_requested_reviewers(ctx: ToolContext, args: dict[str, Any]) -> ReviewRequestRemoval:
  number = req_positive_int(args, "number")
  reviewers = opt_string_list(args, "reviewers") or []
  team_reviewers = opt_string_list(args, "team_reviewers") or []

  await ctx.request(
    "DELETE /repos/{owner}/{repo}/pulls/{pull_number}/requested_reviewers",
    pull_number=number,
    reviewers=reviewers,
    team_reviewers=team_reviewers,
  )
  return ReviewRequestRemoval(
    number=number,
    removed=RemovedReviewers(reviewers=reviewers, team_reviewers=team_reviewers),
    status="removed",
  )
