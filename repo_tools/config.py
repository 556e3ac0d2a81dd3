"""
Ambient configuration for the GitHub repo tools.

Resolved once at startup from the environment and passed to every tool
through ToolContext. Missing values are tolerated here and reported as a
ConfigurationError the first time a tool actually needs them.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

log = logging.getLogger("repo_tools.config")

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_TIMEOUT = 15


class ConfigurationError(Exception):
  pass


def _first_env(environ: Mapping[str, str], *keys: str) -> str | None:
  for key in keys:
    value = environ.get(key, "").strip()
    if value:
      return value
  return None


class Settings(BaseModel):
  """Credential and target repository, read-only after construction."""

  model_config = ConfigDict(frozen=True)

  token: str | None = Field(default=None, repr=False)
  owner: str | None = None
  repo: str | None = None
  api_url: str = DEFAULT_API_URL
  timeout: int = Field(default=DEFAULT_TIMEOUT, gt=0)

  @classmethod
  def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ
    timeout_raw = _first_env(env, "GITHUB_TIMEOUT")
    timeout = DEFAULT_TIMEOUT
    if timeout_raw:
      try:
        timeout = int(timeout_raw)
      except ValueError:
        raise ConfigurationError(f"GITHUB_TIMEOUT must be an integer, got '{timeout_raw}'")
    try:
      settings = cls(
        token=_first_env(env, "GITHUB_PAT", "GITHUB_TOKEN"),
        owner=_first_env(env, "OWNER", "GITHUB_OWNER"),
        repo=_first_env(env, "REPO", "GITHUB_REPO"),
        api_url=_first_env(env, "GITHUB_API_URL") or DEFAULT_API_URL,
        timeout=timeout,
      )
    except PydanticValidationError as e:
      raise ConfigurationError(f"Invalid configuration: {e}") from e
    log.debug("Settings loaded for %s/%s", settings.owner or "?", settings.repo or "?")
    return settings

  def repo_coordinates(self) -> tuple[str, str]:
    """Return (owner, repo) or raise if either is missing."""
    missing = [name for name, value in (("OWNER", self.owner), ("REPO", self.repo)) if not value]
    if missing:
      raise ConfigurationError(f"Missing configuration: {', '.join(missing)}")
    return self.owner, self.repo  # type: ignore[return-value]

  def require_token(self) -> str:
    if not self.token:
      raise ConfigurationError("Missing configuration: GITHUB_PAT (or GITHUB_TOKEN)")
    return self.token
