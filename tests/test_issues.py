"""Tests for issue, assignee and issue-comment tools."""

import pytest

from repo_tools.client.gh_client import RemoteError
from repo_tools.config import ConfigurationError, Settings
from repo_tools.context import ToolContext
from repo_tools.handlers import execute_tool
from repo_tools.validation import ValidationError

from conftest import OWNER, REPO

ISSUES_ROUTE = "GET /repos/{owner}/{repo}/issues"


def _issue(number, title, body=None, **extra):
  return {
    "number": number,
    "title": title,
    "body": body,
    "html_url": f"https://github.com/{OWNER}/{REPO}/issues/{number}",
    "labels": [{"name": "bug", "color": "ff0000"}],
    **extra,
  }


class TestCreateIssue:
  @pytest.mark.asyncio
  async def test_missing_title_never_calls_remote(self, ctx, forge):
    with pytest.raises(ValidationError, match="title"):
      await execute_tool(ctx, "create_issue", {"body": "no title"})
    assert forge.calls == []

  @pytest.mark.asyncio
  async def test_creates_issue_with_only_given_fields(self, ctx, forge):
    result = await execute_tool(ctx, "create_issue", {"title": "Crash on start", "labels": ["bug"]})

    route, params = forge.last_call
    assert route == "POST /repos/{owner}/{repo}/issues"
    assert params == {"owner": OWNER, "repo": REPO, "title": "Crash on start", "labels": ["bug"]}
    assert result.number == 1
    assert result.url == f"https://github.com/{OWNER}/{REPO}/issues/1"
    assert result.status == "created"

  @pytest.mark.asyncio
  async def test_two_creates_get_distinct_numbers(self, ctx):
    first = await execute_tool(ctx, "create_issue", {"title": "Same title"})
    second = await execute_tool(ctx, "create_issue", {"title": "Same title"})
    assert first.number != second.number

  @pytest.mark.asyncio
  async def test_missing_repository_is_a_configuration_error(self, forge):
    ctx = ToolContext(settings=Settings(token="ghp_test", owner=OWNER), client=forge)
    with pytest.raises(ConfigurationError, match="REPO"):
      await execute_tool(ctx, "create_issue", {"title": "Anything"})
    assert forge.calls == []


class TestListIssues:
  @pytest.mark.asyncio
  async def test_keyword_keeps_matching_items(self, ctx, forge):
    page = [_issue(1, "Fix login bug"), _issue(2, "Update docs")]
    forge.respond(page)
    result = await execute_tool(ctx, "list_issues", {"keyword": "bug"})
    assert [i.number for i in result.items] == [1]

  @pytest.mark.asyncio
  async def test_keyword_is_case_insensitive_and_checks_body(self, ctx, forge):
    page = [_issue(1, "Fix login"), _issue(2, "Update docs", body="Tracks a BUG in the guide")]
    forge.respond(page)
    result = await execute_tool(ctx, "list_issues", {"keyword": "bug"})
    assert [i.number for i in result.items] == [2]

  @pytest.mark.asyncio
  async def test_without_keyword_returns_whole_page(self, ctx, forge):
    forge.respond([_issue(1, "Fix login bug"), _issue(2, "Update docs")])
    result = await execute_tool(ctx, "list_issues", {})
    assert [i.number for i in result.items] == [1, 2]

  @pytest.mark.asyncio
  async def test_defaults_and_query_mapping(self, ctx, forge):
    forge.respond([])
    await execute_tool(ctx, "list_issues", {"assignee": "@", "labels": ["bug", "ui"]})

    route, params = forge.last_call
    assert route == ISSUES_ROUTE
    assert params["assignee"] == OWNER
    assert params["labels"] == "bug,ui"
    assert params["state"] == "open"
    assert params["sort"] == "created"
    assert params["direction"] == "desc"
    assert params["per_page"] == 20

  @pytest.mark.asyncio
  async def test_limit_above_page_size_is_rejected(self, ctx, forge):
    with pytest.raises(ValidationError, match="limit"):
      await execute_tool(ctx, "list_issues", {"limit": 101})
    assert forge.calls == []

  @pytest.mark.asyncio
  async def test_result_shape_ignores_extra_fields(self, ctx, forge):
    forge.respond([_issue(3, "Flaky test", reactions={"+1": 4}, node_id="I_kw")])
    result = await execute_tool(ctx, "list_issues", {})
    assert result.model_dump() == {
      "items": [
        {
          "number": 3,
          "title": "Flaky test",
          "url": f"https://github.com/{OWNER}/{REPO}/issues/3",
          "labels": ["bug"],
        }
      ]
    }


class TestUpdateAndClose:
  @pytest.mark.asyncio
  async def test_update_sends_only_changed_fields(self, ctx, forge):
    forge.respond(_issue(7, "New title"))
    result = await execute_tool(ctx, "update_issue", {"number": 7, "title": "New title"})

    route, params = forge.last_call
    assert route == "PATCH /repos/{owner}/{repo}/issues/{issue_number}"
    assert params == {"owner": OWNER, "repo": REPO, "issue_number": 7, "title": "New title"}
    assert result.status == "updated"

  @pytest.mark.asyncio
  async def test_close_sets_state(self, ctx, forge):
    forge.respond(_issue(7, "Done", state="closed"))
    result = await execute_tool(ctx, "close_issue", {"number": 7})
    assert forge.last_call[1]["state"] == "closed"
    assert result.status == "closed"

  @pytest.mark.asyncio
  async def test_non_positive_number_is_rejected(self, ctx, forge):
    with pytest.raises(ValidationError):
      await execute_tool(ctx, "close_issue", {"number": 0})
    assert forge.calls == []


class TestAssignees:
  @pytest.mark.asyncio
  async def test_add_reports_resulting_assignees(self, ctx, forge):
    forge.respond(_issue(4, "Assign me", assignees=[{"login": "alice"}, {"login": "bob"}]), status=201)
    result = await execute_tool(ctx, "add_issue_assignees", {"number": 4, "assignees": ["bob"]})
    assert result.assignees == ["alice", "bob"]
    assert result.status == "updated"

  @pytest.mark.asyncio
  async def test_remove_echoes_requested_logins(self, ctx, forge):
    forge.respond(_issue(4, "Assign me"))
    result = await execute_tool(ctx, "remove_issue_assignees", {"number": 4, "assignees": ["bob"]})
    assert forge.last_call[0] == "DELETE /repos/{owner}/{repo}/issues/{issue_number}/assignees"
    assert result.removed == ["bob"]

  @pytest.mark.asyncio
  async def test_empty_assignee_list_is_rejected(self, ctx, forge):
    with pytest.raises(ValidationError):
      await execute_tool(ctx, "add_issue_assignees", {"number": 4, "assignees": []})
    assert forge.calls == []

  @pytest.mark.asyncio
  async def test_check_assignee_true_on_success(self, ctx, forge):
    forge.respond(None, status=204)
    result = await execute_tool(ctx, "check_repo_assignee", {"assignee": "alice"})
    assert result.assignable is True

  @pytest.mark.asyncio
  async def test_check_assignee_false_on_not_found(self, ctx, forge):
    forge.fail(404)
    result = await execute_tool(ctx, "check_repo_assignee", {"assignee": "mallory"})
    assert result.model_dump() == {"assignee": "mallory", "assignable": False}

  @pytest.mark.asyncio
  async def test_check_assignee_other_errors_propagate(self, ctx, forge):
    forge.fail(500, "Server Error")
    with pytest.raises(RemoteError) as exc:
      await execute_tool(ctx, "check_repo_assignee", {"assignee": "alice"})
    assert exc.value.status == 500

  @pytest.mark.asyncio
  async def test_list_assignees_returns_logins(self, ctx, forge):
    forge.respond([{"login": "alice", "id": 1}, {"login": "bob", "id": 2}])
    result = await execute_tool(ctx, "list_repo_assignees", {})
    assert result.items == ["alice", "bob"]
    assert forge.last_call[1]["per_page"] == 30


class TestIssueComments:
  @pytest.mark.asyncio
  async def test_list_comments(self, ctx, forge):
    forge.respond([
      {"id": 11, "user": {"login": "alice"}, "body": "LGTM", "html_url": "https://github.com/c/11"},
      {"id": 12, "user": None, "body": "ghost", "html_url": "https://github.com/c/12"},
    ])
    result = await execute_tool(ctx, "list_issue_comments", {"number": 3})
    assert result.items[0].user == "alice"
    assert result.items[1].user is None
    assert forge.last_call[1]["per_page"] == 50

  @pytest.mark.asyncio
  async def test_comment_body_is_sent_verbatim(self, ctx, forge):
    body = "  ```\n  code\n  ```\n"
    forge.respond({"id": 21, "html_url": "https://github.com/c/21"}, status=201)
    result = await execute_tool(ctx, "create_issue_comment", {"number": 3, "body": body})
    assert forge.last_call[1]["body"] == body
    assert result.model_dump() == {"id": 21, "url": "https://github.com/c/21", "status": "created"}

  @pytest.mark.asyncio
  async def test_blank_comment_body_is_rejected(self, ctx, forge):
    with pytest.raises(ValidationError, match="body"):
      await execute_tool(ctx, "create_issue_comment", {"number": 3, "body": "   "})
    assert forge.calls == []

  @pytest.mark.asyncio
  async def test_delete_comment(self, ctx, forge):
    forge.respond(None, status=204)
    result = await execute_tool(ctx, "delete_issue_comment", {"comment_id": 21})
    assert result.model_dump() == {"id": 21, "status": "deleted"}
