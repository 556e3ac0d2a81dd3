"""Tests for review, review comment and review request tools."""

import pytest

from repo_tools.handlers import execute_tool
from repo_tools.validation import ValidationError

REVIEWS_ROUTE = "POST /repos/{owner}/{repo}/pulls/{pull_number}/reviews"


def _comment(comment_id, **extra):
  return {
    "id": comment_id,
    "user": {"login": "alice"},
    "path": "src/app.py",
    "body": "Nit",
    "html_url": f"https://github.com/octo/hello-world/pull/4#discussion_r{comment_id}",
    "pull_request_url": "https://api.github.com/repos/octo/hello-world/pulls/4",
    **extra,
  }


class TestReviews:
  @pytest.mark.asyncio
  async def test_pending_review_omits_event(self, ctx, forge):
    forge.respond({"id": 80, "state": "PENDING"})
    result = await execute_tool(ctx, "create_pull_review", {"number": 4, "body": "WIP"})

    route, params = forge.last_call
    assert route == REVIEWS_ROUTE
    assert "event" not in params
    assert result.model_dump() == {"number": 4, "review_id": 80, "status": "created"}

  @pytest.mark.asyncio
  async def test_invalid_event_is_rejected(self, ctx, forge):
    with pytest.raises(ValidationError, match="event"):
      await execute_tool(ctx, "create_pull_review", {"number": 4, "event": "LGTM"})
    assert forge.calls == []

  @pytest.mark.asyncio
  async def test_inline_comments_are_validated_and_trimmed(self, ctx, forge):
    forge.respond({"id": 81, "state": "COMMENTED"})
    await execute_tool(
      ctx,
      "create_pull_review",
      {
        "number": 4,
        "event": "COMMENT",
        "comments": [{"path": "src/app.py", "line": 12, "side": "RIGHT", "body": "Rename this"}],
      },
    )
    assert forge.last_call[1]["comments"] == [
      {"path": "src/app.py", "line": 12, "side": "RIGHT", "body": "Rename this"}
    ]

  @pytest.mark.asyncio
  async def test_bad_inline_comment_names_its_index(self, ctx, forge):
    comments = [
      {"path": "a.py", "body": "ok"},
      {"path": "b.py", "body": "bad side", "side": "MIDDLE"},
    ]
    with pytest.raises(ValidationError, match=r"comments\[1\]"):
      await execute_tool(ctx, "create_pull_review", {"number": 4, "comments": comments})
    assert forge.calls == []

  @pytest.mark.asyncio
  async def test_list_reviews(self, ctx, forge):
    forge.respond([
      {"id": 80, "user": {"login": "bob"}, "state": "APPROVED", "submitted_at": "2024-01-02T00:00:00Z", "body": None},
    ])
    result = await execute_tool(ctx, "list_pull_reviews", {"number": 4})
    assert result.number == 4
    assert result.items[0].model_dump() == {
      "id": 80,
      "user": "bob",
      "state": "APPROVED",
      "submitted_at": "2024-01-02T00:00:00Z",
      "body": "",
    }

  @pytest.mark.asyncio
  async def test_submit_requires_event(self, ctx, forge):
    with pytest.raises(ValidationError, match="event"):
      await execute_tool(ctx, "submit_pull_review", {"number": 4, "review_id": 80})
    assert forge.calls == []

  @pytest.mark.asyncio
  async def test_submit_review(self, ctx, forge):
    forge.respond({"id": 80, "state": "APPROVED"})
    result = await execute_tool(
      ctx, "submit_pull_review", {"number": 4, "review_id": 80, "event": "APPROVE"}
    )
    assert forge.last_call[0].endswith("/reviews/{review_id}/events")
    assert result.model_dump() == {"id": 80, "state": "APPROVED", "status": "submitted"}

  @pytest.mark.asyncio
  async def test_dismiss_review(self, ctx, forge):
    forge.respond({"id": 80, "state": "DISMISSED"})
    result = await execute_tool(
      ctx, "dismiss_pull_review", {"number": 4, "review_id": 80, "message": "Stale"}
    )
    assert forge.last_call[1]["message"] == "Stale"
    assert result.status == "dismissed"

  @pytest.mark.asyncio
  async def test_delete_pending_review(self, ctx, forge):
    forge.respond({"id": 80, "state": "PENDING"})
    result = await execute_tool(ctx, "delete_pending_pull_review", {"number": 4, "review_id": 80})
    assert forge.last_call[0] == "DELETE /repos/{owner}/{repo}/pulls/{pull_number}/reviews/{review_id}"
    assert result.model_dump() == {"id": 80, "status": "deleted"}


class TestReviewComments:
  @pytest.mark.asyncio
  async def test_repo_comments_carry_pull_url(self, ctx, forge):
    forge.respond([_comment(301)])
    result = await execute_tool(ctx, "list_repo_review_comments", {})
    assert result.items[0].pr_url == "https://api.github.com/repos/octo/hello-world/pulls/4"
    assert result.items[0].user == "alice"

  @pytest.mark.asyncio
  async def test_new_comment_on_diff(self, ctx, forge):
    forge.respond(_comment(302), status=201)
    args = {"number": 4, "body": "Typo", "commit_id": "6dcb09b", "path": "src/app.py", "line": 3}
    result = await execute_tool(ctx, "create_pull_review_comment", args)

    route, params = forge.last_call
    assert route == "POST /repos/{owner}/{repo}/pulls/{pull_number}/comments"
    assert params["commit_id"] == "6dcb09b"
    assert params["line"] == 3
    assert result.status == "created"

  @pytest.mark.asyncio
  async def test_in_reply_to_posts_a_reply(self, ctx, forge):
    forge.respond(_comment(303), status=201)
    args = {"number": 4, "body": "Done", "commit_id": "6dcb09b", "path": "src/app.py", "in_reply_to": 301}
    await execute_tool(ctx, "create_pull_review_comment", args)

    route, params = forge.last_call
    assert route == "POST /repos/{owner}/{repo}/pulls/comments/{comment_id}/replies"
    assert params["comment_id"] == 301
    assert params["body"] == "Done"
    assert "path" not in params

  @pytest.mark.asyncio
  async def test_reply_tool(self, ctx, forge):
    forge.respond(_comment(304), status=201)
    result = await execute_tool(ctx, "create_review_comment_reply", {"comment_id": 301, "body": "Thanks"})
    assert result.id == 304

  @pytest.mark.asyncio
  async def test_comments_for_review(self, ctx, forge):
    forge.respond([_comment(305)])
    result = await execute_tool(ctx, "list_review_comments_for_review", {"number": 4, "review_id": 80})
    assert (result.number, result.review_id) == (4, 80)
    assert result.items[0].path == "src/app.py"

  @pytest.mark.asyncio
  async def test_delete_comment(self, ctx, forge):
    forge.respond(None, status=204)
    result = await execute_tool(ctx, "delete_review_comment", {"comment_id": 305})
    assert result.model_dump() == {"id": 305, "status": "deleted"}


class TestReviewRequests:
  @pytest.mark.asyncio
  async def test_requested_reviewers_use_slug_or_name(self, ctx, forge):
    forge.respond({
      "users": [{"login": "alice"}],
      "teams": [{"slug": "core", "name": "Core Team"}, {"name": "Docs"}],
    })
    result = await execute_tool(ctx, "get_requested_reviewers", {"number": 4})
    assert result.model_dump() == {"number": 4, "users": ["alice"], "teams": ["core", "Docs"]}

  @pytest.mark.asyncio
  async def test_request_reviewers(self, ctx, forge):
    forge.respond(
      {"number": 4, "requested_reviewers": [{"login": "bob"}], "requested_teams": [{"slug": "qa"}]},
      status=201,
    )
    result = await execute_tool(ctx, "request_reviewers", {"number": 4, "reviewers": ["bob"]})
    assert forge.last_call[1]["team_reviewers"] == []
    assert result.users == ["bob"]
    assert result.teams == ["qa"]
    assert result.status == "requested"

  @pytest.mark.asyncio
  async def test_remove_requested_reviewers(self, ctx, forge):
    forge.respond({"number": 4, "requested_reviewers": []})
    result = await execute_tool(
      ctx, "remove_requested_reviewers", {"number": 4, "team_reviewers": ["qa"]}
    )
    assert forge.last_call[0] == "DELETE /repos/{owner}/{repo}/pulls/{pull_number}/requested_reviewers"
    assert result.model_dump() == {
      "number": 4,
      "removed": {"reviewers": [], "team_reviewers": ["qa"]},
      "status": "removed",
    }
