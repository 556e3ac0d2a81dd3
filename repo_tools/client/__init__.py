"""GitHub REST client used by every tool."""

from __future__ import annotations

from .gh_client import ForgeClient, ForgeResponse, GhClient, RemoteError, prepare_request

__all__ = ["ForgeClient", "ForgeResponse", "GhClient", "RemoteError", "prepare_request"]
