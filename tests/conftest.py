"""Pytest fixtures for the GitHub repo tools tests."""

from __future__ import annotations

from typing import Any

import pytest

from repo_tools.client.gh_client import ForgeResponse, RemoteError
from repo_tools.config import Settings
from repo_tools.context import ToolContext

OWNER = "octo"
REPO = "hello-world"


class FakeForge:
  """Records every call; answers from queued responses or a tiny in-memory repo."""

  def __init__(self) -> None:
    self.calls: list[tuple[str, dict[str, Any]]] = []
    self.queued: list[ForgeResponse | Exception] = []
    self.labels: list[dict[str, Any]] = []
    self.issues: list[dict[str, Any]] = []
    self.branches: dict[str, dict[str, Any]] = {}

  # -- scripting ------------------------------------------------------------

  def respond(self, data: Any = None, status: int = 200) -> None:
    self.queued.append(ForgeResponse(status=status, data=data))

  def fail(self, status: int, message: str = "Not Found") -> None:
    self.queued.append(RemoteError(status, message))

  @property
  def last_call(self) -> tuple[str, dict[str, Any]]:
    return self.calls[-1]

  # -- client protocol ------------------------------------------------------

  async def request(self, route: str, params: dict[str, Any]) -> ForgeResponse:
    self.calls.append((route, dict(params)))
    if self.queued:
      item = self.queued.pop(0)
      if isinstance(item, Exception):
        raise item
      return item
    return self._simulate(route, params)

  def _simulate(self, route: str, params: dict[str, Any]) -> ForgeResponse:
    base = f"https://github.com/{params['owner']}/{params['repo']}"
    api = f"https://api.github.com/repos/{params['owner']}/{params['repo']}"

    if route == "POST /repos/{owner}/{repo}/labels":
      label = {
        "id": 1000 + len(self.labels),
        "node_id": "LA_kwDO",
        "url": f"{api}/labels/{params['name']}",
        "name": params["name"],
        "color": params.get("color", "ededed"),
        "description": params.get("description"),
        "default": False,
      }
      self.labels.append(label)
      return ForgeResponse(status=201, data=label)

    if route == "GET /repos/{owner}/{repo}/labels":
      return ForgeResponse(status=200, data=list(self.labels[: params.get("per_page", 30)]))

    if route == "POST /repos/{owner}/{repo}/issues":
      number = len(self.issues) + 1
      issue = {
        "id": 5000 + number,
        "number": number,
        "title": params["title"],
        "body": params.get("body"),
        "url": f"{api}/issues/{number}",
        "html_url": f"{base}/issues/{number}",
        "state": "open",
        "labels": [{"name": name} for name in params.get("labels", [])],
      }
      self.issues.append(issue)
      return ForgeResponse(status=201, data=issue)

    if route == "GET /repos/{owner}/{repo}/branches/{branch}":
      branch = self.branches.get(params["branch"])
      if branch is None:
        raise RemoteError(404, "Branch not found")
      return ForgeResponse(status=200, data=dict(branch))

    raise AssertionError(f"FakeForge has no answer for {route}")


@pytest.fixture
def settings() -> Settings:
  return Settings(token="ghp_test", owner=OWNER, repo=REPO)


@pytest.fixture
def forge() -> FakeForge:
  return FakeForge()


@pytest.fixture
def ctx(settings: Settings, forge: FakeForge) -> ToolContext:
  return ToolContext(settings=settings, client=forge)
