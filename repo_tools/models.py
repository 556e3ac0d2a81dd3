"""
Result shapes returned by the tools.

Each model names exactly the fields a tool promises and is validated straight
from the GitHub JSON payload; aliases pick nested values (user.login,
head.ref, ...) and every other field of the payload is ignored.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import AliasChoices, AliasPath, BaseModel, BeforeValidator, ConfigDict, Field


def _text(v: Any) -> Any:
  return "" if v is None else v


def _flag(v: Any) -> Any:
  return False if v is None else v


def _label_names(v: Any) -> Any:
  if not isinstance(v, list):
    return []
  names = [item if isinstance(item, str) else (item or {}).get("name") for item in v]
  return [n for n in names if n]


Flag = Annotated[bool, BeforeValidator(_flag)]
Text = Annotated[str, BeforeValidator(_text)]
LabelNames = Annotated[list[str], BeforeValidator(_label_names)]


class Shape(BaseModel):
  model_config = ConfigDict(frozen=True, extra="ignore")


def _login(default: Any = None) -> Any:
  return Field(default=default, validation_alias=AliasPath("user", "login"))


def _html_url() -> Any:
  return Field(default=None, validation_alias="html_url")


# ---------------------------------------------------------------------------
# Generic acknowledgements
# ---------------------------------------------------------------------------


class NumberedRef(Shape):
  """Created/updated issue, pull request or milestone."""

  number: int
  url: str | None = _html_url()
  status: str


class NumberStatus(Shape):
  number: int
  status: str


class IdStatus(Shape):
  id: int
  status: str


class CommentRef(Shape):
  id: int
  url: str | None = _html_url()
  status: str


class NameStatus(Shape):
  name: str
  status: str


# ---------------------------------------------------------------------------
# Issues, assignees, comments
# ---------------------------------------------------------------------------


class IssueSummary(Shape):
  number: int
  title: str | None = None
  url: str | None = _html_url()
  labels: LabelNames = Field(default_factory=list)


class IssueList(Shape):
  items: list[IssueSummary]


class AssigneeUpdate(Shape):
  number: int
  assignees: list[str]
  status: str


class AssigneeRemoval(Shape):
  number: int
  removed: list[str]
  status: str


class AssigneeCheck(Shape):
  assignee: str
  assignable: bool


class LoginList(Shape):
  items: list[str]


class IssueComment(Shape):
  id: int
  user: str | None = _login()
  body: str | None = None
  url: str | None = _html_url()


class IssueCommentList(Shape):
  items: list[IssueComment]


# ---------------------------------------------------------------------------
# Labels & milestones
# ---------------------------------------------------------------------------


class Label(Shape):
  name: str
  color: str | None = None
  description: str | None = None


class LabelList(Shape):
  items: list[Label]


class LabelRef(Shape):
  name: str
  url: str | None = None
  status: str


class IssueLabels(Shape):
  number: int
  labels: LabelNames


class RemovedIssueLabel(Shape):
  number: int
  removed: str


class Milestone(Shape):
  number: int
  title: str | None = None
  state: str | None = None
  due_on: str | None = None


class MilestoneList(Shape):
  items: list[Milestone]


# ---------------------------------------------------------------------------
# Branches
# ---------------------------------------------------------------------------


class BranchSummary(Shape):
  name: str
  protected: Flag = False
  commit_sha: str | None = Field(default=None, validation_alias=AliasPath("commit", "sha"))
  url: str | None = Field(
    default=None,
    validation_alias=AliasChoices(AliasPath("_links", "html"), AliasPath("_links", "self")),
  )


class BranchList(Shape):
  items: list[BranchSummary]


class BranchDetail(Shape):
  name: str
  protected: Flag = False
  commit_sha: str | None = Field(default=None, validation_alias=AliasPath("commit", "sha"))
  protection_url: str | None = None
  link_html: str | None = Field(default=None, validation_alias=AliasPath("_links", "html"))
  link_self: str | None = Field(default=None, validation_alias=AliasPath("_links", "self"))


class BranchRename(Shape):
  old_name: str
  new_name: str | None = None
  status: str


class BranchMerge(Shape):
  base: str
  head: str
  sha: str | None = None
  commit_message: str | None = None
  status: str


# ---------------------------------------------------------------------------
# Pull requests
# ---------------------------------------------------------------------------


class PullSummary(Shape):
  number: int
  title: str | None = None
  url: str | None = _html_url()
  state: str | None = None
  draft: Flag = False
  head: str | None = Field(default=None, validation_alias=AliasPath("head", "ref"))
  base: str | None = Field(default=None, validation_alias=AliasPath("base", "ref"))


class PullList(Shape):
  items: list[PullSummary]


class PullDetail(PullSummary):
  merged: Flag = False
  user: str | None = _login()
  created_at: str | None = None
  updated_at: str | None = None
  body: Text = ""


class PullCommit(Shape):
  sha: str
  author: str | None = Field(
    default=None,
    validation_alias=AliasChoices(AliasPath("author", "login"), AliasPath("commit", "author", "name")),
  )
  message: Text = Field(default="", validation_alias=AliasPath("commit", "message"))
  html_url: str | None = None


class PullCommitList(Shape):
  items: list[PullCommit]


class PullFile(Shape):
  filename: str
  status: str | None = None
  additions: int | None = None
  deletions: int | None = None
  changes: int | None = None
  blob_url: str | None = None
  raw_url: str | None = None


class PullFileList(Shape):
  items: list[PullFile]


class PullMergeCheck(Shape):
  number: int
  merged: bool


class PullMergeResult(Shape):
  number: int
  merged: Flag = False
  message: str | None = None
  sha: str | None = None
  status: str


class PullBranchUpdate(Shape):
  number: int
  status: str
  message: str


# ---------------------------------------------------------------------------
# Review comments & review requests
# ---------------------------------------------------------------------------


class PullReviewComment(Shape):
  id: int
  user: str | None = _login()
  path: str | None = None
  body: str | None = None
  url: str | None = _html_url()


class ReviewComment(PullReviewComment):
  pr_url: str | None = Field(default=None, validation_alias="pull_request_url")


class ReviewCommentList(Shape):
  items: list[ReviewComment]


class PullReviewCommentList(Shape):
  number: int
  items: list[PullReviewComment]


class ReviewCommentsForReview(Shape):
  number: int
  review_id: int
  items: list[PullReviewComment]


class RequestedReviewers(Shape):
  number: int
  users: list[str]
  teams: list[str]


class ReviewRequestUpdate(RequestedReviewers):
  status: str


class RemovedReviewers(Shape):
  reviewers: list[str]
  team_reviewers: list[str]


class ReviewRequestRemoval(Shape):
  number: int
  removed: RemovedReviewers
  status: str


# ---------------------------------------------------------------------------
# Reviews
# ---------------------------------------------------------------------------


class Review(Shape):
  id: int
  user: str | None = _login()
  state: str | None = None
  submitted_at: str | None = None
  body: Text = ""


class ReviewList(Shape):
  number: int
  items: list[Review]


class ReviewCreated(Shape):
  number: int
  review_id: int
  status: str


class ReviewTransition(Shape):
  id: int
  state: str | None = None
  status: str
