"""Tests for label and milestone tools."""

import pytest

from repo_tools.handlers import execute_tool
from repo_tools.validation import ValidationError


class TestRepoLabels:
  @pytest.mark.asyncio
  async def test_created_label_is_listed(self, ctx):
    created = await execute_tool(
      ctx, "create_repo_label", {"name": "bug", "color": "ff0000", "description": "Broken"}
    )
    assert created.status == "created"
    assert created.name == "bug"

    listed = await execute_tool(ctx, "list_repo_labels", {})
    assert [lbl.model_dump() for lbl in listed.items] == [
      {"name": "bug", "color": "ff0000", "description": "Broken"}
    ]

  @pytest.mark.asyncio
  @pytest.mark.parametrize("color", ["#ff0000", "red", "ff00", "ff00001"])
  async def test_invalid_color_never_calls_remote(self, ctx, forge, color):
    with pytest.raises(ValidationError, match="color"):
      await execute_tool(ctx, "create_repo_label", {"name": "bug", "color": color})
    assert forge.calls == []

  @pytest.mark.asyncio
  async def test_update_label_renames(self, ctx, forge):
    forge.respond({"name": "defect", "color": "ff0000"})
    result = await execute_tool(
      ctx, "update_repo_label", {"current_name": "bug", "new_name": "defect"}
    )
    route, params = forge.last_call
    assert route == "PATCH /repos/{owner}/{repo}/labels/{name}"
    assert params["name"] == "bug"
    assert params["new_name"] == "defect"
    assert "color" not in params
    assert result.model_dump() == {"name": "defect", "status": "updated"}

  @pytest.mark.asyncio
  async def test_delete_label(self, ctx, forge):
    forge.respond(None, status=204)
    result = await execute_tool(ctx, "delete_repo_label", {"name": "wontfix"})
    assert result.model_dump() == {"name": "wontfix", "status": "deleted"}


class TestIssueLabels:
  @pytest.mark.asyncio
  async def test_set_labels_defaults_to_empty_list(self, ctx, forge):
    forge.respond([])
    result = await execute_tool(ctx, "set_issue_labels", {"number": 5})
    assert forge.last_call[0] == "PUT /repos/{owner}/{repo}/issues/{issue_number}/labels"
    assert forge.last_call[1]["labels"] == []
    assert result.model_dump() == {"number": 5, "labels": []}

  @pytest.mark.asyncio
  async def test_add_labels_returns_names(self, ctx, forge):
    forge.respond([{"id": 1, "name": "bug", "color": "ff0000"}, {"id": 2, "name": "ui"}])
    result = await execute_tool(ctx, "add_issue_labels", {"number": 5, "labels": ["ui"]})
    assert result.labels == ["bug", "ui"]

  @pytest.mark.asyncio
  async def test_remove_label(self, ctx, forge):
    forge.respond([])
    result = await execute_tool(ctx, "remove_issue_label", {"number": 5, "name": "needs triage"})
    assert forge.last_call[1]["name"] == "needs triage"
    assert result.model_dump() == {"number": 5, "removed": "needs triage"}


class TestMilestones:
  @pytest.mark.asyncio
  async def test_list_defaults(self, ctx, forge):
    forge.respond([
      {"number": 1, "title": "v1.0", "state": "open", "due_on": "2024-06-01T00:00:00Z", "open_issues": 3},
    ])
    result = await execute_tool(ctx, "list_milestones", {})
    params = forge.last_call[1]
    assert (params["state"], params["sort"], params["direction"], params["per_page"]) == (
      "open",
      "due_on",
      "asc",
      50,
    )
    assert result.items[0].model_dump() == {
      "number": 1,
      "title": "v1.0",
      "state": "open",
      "due_on": "2024-06-01T00:00:00Z",
    }

  @pytest.mark.asyncio
  async def test_create_milestone(self, ctx, forge):
    forge.respond({"number": 2, "html_url": "https://github.com/m/2"}, status=201)
    result = await execute_tool(ctx, "create_milestone", {"title": "v2.0", "due_on": "2024-12-01T00:00:00Z"})
    assert result.model_dump() == {"number": 2, "url": "https://github.com/m/2", "status": "created"}

  @pytest.mark.asyncio
  async def test_invalid_state_is_rejected(self, ctx, forge):
    with pytest.raises(ValidationError, match="state"):
      await execute_tool(ctx, "update_milestone", {"number": 2, "state": "all"})
    assert forge.calls == []

  @pytest.mark.asyncio
  async def test_delete_milestone(self, ctx, forge):
    forge.respond(None, status=204)
    result = await execute_tool(ctx, "delete_milestone", {"number": 2})
    assert result.model_dump() == {"number": 2, "status": "deleted"}
