"""Roadmap request specs and the nested result tree."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field, computed_field, model_validator

from projectpilot.core.contracts.entities import Issue, Milestone, Project, WireModel
from projectpilot.core.contracts.exceptions import PartialFailureError, ProviderError


def _title_shorthand(data: Any) -> Any:
    if isinstance(data, str):
        return {"title": data}
    return data


class ProjectSpec(WireModel):
    title: str = Field(min_length=1)
    description: str | None = None

    @model_validator(mode="before")
    @classmethod
    def accept_bare_title(cls, data: Any) -> Any:
        return _title_shorthand(data)


class IssueSpec(WireModel):
    title: str = Field(min_length=1)
    body: str | None = None
    labels: list[str] = Field(default_factory=list)
    assignees: list[str] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def accept_bare_title(cls, data: Any) -> Any:
        return _title_shorthand(data)


class MilestoneSpec(WireModel):
    title: str = Field(min_length=1)
    description: str | None = None
    due_date: datetime | None = None
    issues: list[IssueSpec] = Field(default_factory=list)


class RoadmapSpec(WireModel):
    project: ProjectSpec
    milestones: list[MilestoneSpec] = Field(default_factory=list)


class ItemFailure(WireModel):
    """A classified failure recorded in a result slot instead of being raised."""

    kind: str
    message: str
    retryable: bool = False

    @classmethod
    def from_error(cls, exc: ProviderError) -> ItemFailure:
        return cls(kind=exc.kind, message=str(exc) or type(exc).__name__, retryable=exc.retryable)


class IssueOutcome(WireModel):
    title: str
    issue: Issue | None = None
    error: ItemFailure | None = None
    board_error: ItemFailure | None = None

    @model_validator(mode="after")
    def exactly_one_outcome(self) -> IssueOutcome:
        if (self.issue is None) == (self.error is None):
            raise ValueError("exactly one of issue/error must be set")
        if self.board_error is not None and self.issue is None:
            raise ValueError("board_error requires a created issue")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None and self.board_error is None


class MilestoneOutcome(WireModel):
    title: str
    milestone: Milestone | None = None
    error: ItemFailure | None = None
    issues: list[IssueOutcome] = Field(default_factory=list)

    @model_validator(mode="after")
    def exactly_one_outcome(self) -> MilestoneOutcome:
        if (self.milestone is None) == (self.error is None):
            raise ValueError("exactly one of milestone/error must be set")
        if self.error is not None and self.issues:
            raise ValueError("a failed milestone cannot carry issue outcomes")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None and all(outcome.ok for outcome in self.issues)


class RoadmapResult(WireModel):
    project: Project
    milestones: list[MilestoneOutcome] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def status(self) -> str:
        return "complete" if all(slot.ok for slot in self.milestones) else "partial"

    def failed_milestones(self) -> list[str]:
        return [slot.title for slot in self.milestones if slot.error is not None]

    def failed_issues(self) -> list[str]:
        return [
            outcome.title
            for slot in self.milestones
            for outcome in slot.issues
            if not outcome.ok
        ]

    def raise_for_failures(self) -> None:
        """Raise :class:`PartialFailureError` when any milestone or issue slot failed."""
        if self.status == "complete":
            return
        milestones = self.failed_milestones()
        issues = self.failed_issues()
        raise PartialFailureError(
            f"Roadmap for project {self.project.title!r} partially failed: "
            f"{len(milestones)} milestone(s), {len(issues)} issue(s)",
            failed_milestones=milestones,
            failed_issues=issues,
        )
