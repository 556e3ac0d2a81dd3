"""
Per-process tool context: the settings and the client every handler receives.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .client.gh_client import ForgeClient, ForgeResponse
from .config import Settings


@dataclass(frozen=True)
class ToolContext:
  settings: Settings
  client: ForgeClient

  @property
  def owner(self) -> str:
    return self.settings.repo_coordinates()[0]

  async def request(self, route: str, **params: Any) -> ForgeResponse:
    """Issue one call against the configured repository.

    owner and repo are filled from settings; None-valued params are dropped.
    """
    owner, repo = self.settings.repo_coordinates()
    payload = {k: v for k, v in params.items() if v is not None}
    return await self.client.request(route, {"owner": owner, "repo": repo, **payload})
