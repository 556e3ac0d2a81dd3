"""
GitHub client wrapper using PyGithub.

Tools describe each call as an octokit-style route ("GET /repos/{owner}/{repo}/issues")
plus a flat params dict. The client fills the path template, sends the rest as
query string (GET) or JSON body (everything else) through PyGithub's requester,
and returns the status with the decoded payload.

PyGithub is synchronous, so all calls are wrapped with asyncio.to_thread
to keep the tools' async contract intact. Retries are disabled: one tool call
is exactly one HTTP request.
"""

from __future__ import annotations

import asyncio
import contextlib
import functools
import json
import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, TypeVar
from urllib.parse import quote

from github import Auth, Github, GithubException

from ..config import Settings

if TYPE_CHECKING:
  from collections.abc import Callable

log = logging.getLogger("repo_tools.client")

T = TypeVar("T")

_PLACEHOLDER_RE = re.compile(r"\{([a-z_]+)\}")


class RemoteError(Exception):
  """Non-success response from GitHub."""

  def __init__(self, status: int, message: str) -> None:
    super().__init__(f"GitHub API error {status}: {message}")
    self.status = status
    self.message = message


@dataclass(frozen=True)
class ForgeResponse:
  status: int
  data: Any = None


@dataclass(frozen=True)
class PreparedRequest:
  verb: str
  path: str
  query: dict[str, Any] | None
  body: dict[str, Any] | None


class ForgeClient(Protocol):
  async def request(self, route: str, params: dict[str, Any]) -> ForgeResponse: ...


# ---------------------------------------------------------------------------
# Route expansion
# ---------------------------------------------------------------------------


def _query_value(value: Any) -> Any:
  if isinstance(value, bool):
    return "true" if value else "false"
  return value


def prepare_request(route: str, params: dict[str, Any]) -> PreparedRequest:
  """Split a route + params into verb, concrete path, query and body."""
  try:
    verb, template = route.split(" ", 1)
  except ValueError:
    raise ValueError(f"Route must look like 'METHOD /path', got '{route}'") from None
  verb = verb.upper()
  remaining = {k: v for k, v in params.items() if v is not None}

  def fill(match: re.Match[str]) -> str:
    name = match.group(1)
    if name not in remaining:
      raise ValueError(f"Missing path parameter '{name}' for route '{route}'")
    return quote(str(remaining.pop(name)), safe="")

  path = _PLACEHOLDER_RE.sub(fill, template)

  if verb in ("GET", "HEAD"):
    query = {k: _query_value(v) for k, v in remaining.items()}
    return PreparedRequest(verb=verb, path=path, query=query or None, body=None)
  return PreparedRequest(verb=verb, path=path, query=None, body=remaining or None)


def _decode(raw: str | None) -> Any:
  if not raw:
    return None
  try:
    return json.loads(raw)
  except ValueError:
    return raw


def _error_message(data: Any, status: int) -> str:
  if isinstance(data, dict) and data.get("message"):
    return str(data["message"])
  if isinstance(data, str) and data:
    return data
  return f"HTTP {status}"


async def _run_sync(fn: Callable[..., T], *args: Any, **kwargs: Any) -> T:
  """Run a synchronous PyGithub call in a thread."""
  return await asyncio.to_thread(functools.partial(fn, *args, **kwargs))


# ---------------------------------------------------------------------------
# Client
# ---------------------------------------------------------------------------


class GhClient:
  """Async-compatible wrapper around PyGithub's requester."""

  def __init__(self, settings: Settings) -> None:
    self._settings = settings
    self._gh: Github | None = None
    self._is_authed: bool = False
    self._username: str = ""

  @property
  def gh(self) -> Github:
    if self._gh is None:
      token = self._settings.require_token()
      self._gh = Github(
        auth=Auth.Token(token),
        base_url=self._settings.api_url,
        timeout=self._settings.timeout,
        retry=None,
      )
      log.info("PyGithub client initialized for %s", self._settings.api_url)
    return self._gh

  @property
  def is_authed(self) -> bool:
    return self._is_authed

  @property
  def username(self) -> str:
    return self._username

  async def check_auth(self) -> bool:
    """Verify authentication by fetching the authenticated user."""
    try:
      user = await _run_sync(self.gh.get_user)
      self._username = await _run_sync(lambda: user.login)
      self._is_authed = True
      log.info("Authenticated as %s", self._username)
      return True
    except GithubException as exc:
      log.error("Auth check failed: %s", exc)
      self._is_authed = False
      return False

  async def request(self, route: str, params: dict[str, Any]) -> ForgeResponse:
    """Perform exactly one HTTP request for route, raising RemoteError on any non-2xx status."""
    prepared = prepare_request(route, params)
    requester = self.gh.requester
    status, _headers, raw = await _run_sync(
      requester.requestJson,
      prepared.verb,
      prepared.path,
      parameters=prepared.query,
      input=prepared.body,
    )
    log.debug("%s %s -> %s", prepared.verb, prepared.path, status)
    data = _decode(raw)
    if not 200 <= status < 300:
      raise RemoteError(status, _error_message(data, status))
    return ForgeResponse(status=status, data=data)

  async def close(self) -> None:
    """Close the underlying connection."""
    if self._gh:
      with contextlib.suppress(Exception):
        await _run_sync(self._gh.close)
      self._gh = None
      self._is_authed = False

