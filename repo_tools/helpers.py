"""
Shared formatting and error handling helpers for the GitHub repo tools.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar

log = logging.getLogger("repo_tools.helpers")

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Tool result
# ---------------------------------------------------------------------------


@dataclass
class ToolResult:
  content: str
  is_error: bool = False


# ---------------------------------------------------------------------------
# Error handling
# ---------------------------------------------------------------------------


class ErrorCategory(str, Enum):
  ISSUE = "ISSUE"
  ASSIGNEE = "ASSIGNEE"
  COMMENT = "COMMENT"
  LABEL = "LABEL"
  MILESTONE = "MILESTONE"
  BRANCH = "BRANCH"
  PR = "PR"
  REVIEW = "REVIEW"
  CONFIG = "CONFIG"
  VALIDATION = "VALIDATION"
  API = "API"


def error_code(function_name: str, category: str | ErrorCategory | None = None) -> str:
  prefix = category.value if isinstance(category, ErrorCategory) else (category or "GEN")
  hash_val = sum(ord(c) for c in function_name) % 1000
  return f"{prefix}-ERR-{hash_val:03d}"


def log_and_format_error(
  function_name: str,
  error: Exception,
  category: str | ErrorCategory | None = None,
) -> ToolResult:
  """Log a failed tool call and turn it into an error ToolResult.

  Validation, configuration and remote errors are surfaced verbatim; anything
  else is reported by code only.
  """
  from .client.gh_client import RemoteError
  from .config import ConfigurationError
  from .validation import ValidationError

  if isinstance(error, ValidationError):
    category = ErrorCategory.VALIDATION
  elif isinstance(error, ConfigurationError):
    category = ErrorCategory.CONFIG
  code = error_code(function_name, category)

  log.error("[GH] Error in %s - Code: %s - %s", function_name, code, error)

  if isinstance(error, (ValidationError, ConfigurationError, RemoteError)):
    user_message = f"{error} (code: {code})"
  else:
    user_message = f"An error occurred (code: {code}). Check logs for details."

  return ToolResult(content=user_message, is_error=True)


# ---------------------------------------------------------------------------
# Response helpers
# ---------------------------------------------------------------------------


def as_items(data: Any) -> list[dict[str, Any]]:
  """Return the list payload of a collection response."""
  if not isinstance(data, list):
    return []
  return [item for item in data if isinstance(item, dict)]


def logins(users: Iterable[Any] | None) -> list[str]:
  return [u["login"] for u in users or [] if isinstance(u, dict) and u.get("login")]


def team_names(teams: Iterable[Any] | None) -> list[str]:
  names = []
  for team in teams or []:
    if isinstance(team, dict) and (team.get("slug") or team.get("name")):
      names.append(team.get("slug") or team.get("name"))
  return names


def filter_by_keyword(
  items: list[T],
  keyword: str | None,
  fields: Callable[[T], Iterable[str | None]],
) -> list[T]:
  """Keep items where any of fields(item) contains keyword, case-insensitively.

  Narrows the page already fetched; no further pages are requested.
  """
  if not keyword:
    return list(items)
  needle = keyword.lower()
  return [item for item in items if any(needle in (text or "").lower() for text in fields(item))]
