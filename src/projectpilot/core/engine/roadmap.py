"""Roadmap orchestration: project, then milestones, then issues per milestone."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable
from typing import TypeVar

from projectpilot.core.contracts.config import ProjectPilotConfig
from projectpilot.core.contracts.entities import Project
from projectpilot.core.contracts.exceptions import AbortedError, ProviderError
from projectpilot.core.contracts.provider import Provider
from projectpilot.core.contracts.roadmap import (
    IssueOutcome,
    IssueSpec,
    ItemFailure,
    MilestoneOutcome,
    MilestoneSpec,
    ProjectSpec,
    RoadmapResult,
    RoadmapSpec,
)

T = TypeVar("T")
_LOG = logging.getLogger(__name__)


class RoadmapOrchestrator:
    """Creates a project with its milestones and issues, best effort.

    Only a failed project aborts the run. Milestone and issue failures are
    recorded in their result slots; a failed milestone's issues are never
    attempted. Milestones run concurrently (bounded by
    ``config.max_concurrent``) but the result always follows input order.
    Already-created resources are never rolled back.
    """

    def __init__(self, provider: Provider, config: ProjectPilotConfig) -> None:
        self._provider = provider
        self._config = config
        self._semaphore = asyncio.Semaphore(config.max_concurrent)

    async def create_roadmap(self, spec: RoadmapSpec) -> RoadmapResult:
        project = await self._create_project(spec.project)

        try:
            async with asyncio.TaskGroup() as tg:
                tasks = [tg.create_task(self._build_milestone(project, ms)) for ms in spec.milestones]
        except* Exception as error_group:
            first_error = error_group.exceptions[0]
            raise first_error from error_group

        result = RoadmapResult(project=project, milestones=[task.result() for task in tasks])
        _LOG.info(
            "Roadmap for %s finished with status %s (%d milestone(s))",
            project.title,
            result.status,
            len(result.milestones),
        )
        return result

    async def _create_project(self, spec: ProjectSpec) -> Project:
        try:
            return await self._guarded(self._provider.create_project(spec.title, spec.description))
        except ProviderError as exc:
            _LOG.error("Project %r could not be created; aborting roadmap: %s", spec.title, exc)
            raise AbortedError(
                f"Roadmap aborted: project {spec.title!r} could not be created: {exc}",
                spec_title=spec.title,
                cause=exc,
            ) from exc

    async def _build_milestone(self, project: Project, spec: MilestoneSpec) -> MilestoneOutcome:
        try:
            milestone = await self._guarded(
                self._provider.create_milestone(spec.title, description=spec.description, due_on=spec.due_date)
            )
        except ProviderError as exc:
            _LOG.warning("Milestone %r failed (%s); skipping %d issue(s)", spec.title, exc.kind, len(spec.issues))
            return MilestoneOutcome(title=spec.title, error=ItemFailure.from_error(exc))

        issues = [await self._build_issue(project, milestone.number, issue_spec) for issue_spec in spec.issues]
        return MilestoneOutcome(title=spec.title, milestone=milestone, issues=issues)

    async def _build_issue(self, project: Project, milestone_number: int, spec: IssueSpec) -> IssueOutcome:
        try:
            issue = await self._guarded(
                self._provider.create_issue(
                    spec.title,
                    body=spec.body,
                    milestone_number=milestone_number,
                    labels=spec.labels,
                    assignees=spec.assignees,
                )
            )
        except ProviderError as exc:
            _LOG.warning("Issue %r failed (%s)", spec.title, exc.kind)
            return IssueOutcome(title=spec.title, error=ItemFailure.from_error(exc))

        if not self._config.add_issues_to_project:
            return IssueOutcome(title=spec.title, issue=issue)

        try:
            item_id = await self._guarded(self._provider.add_to_project(project.id, issue.node_id))
        except ProviderError as exc:
            _LOG.warning("Issue #%d created but not added to project %s (%s)", issue.number, project.id, exc.kind)
            return IssueOutcome(title=spec.title, issue=issue, board_error=ItemFailure.from_error(exc))
        return IssueOutcome(title=spec.title, issue=issue.model_copy(update={"project_item_id": item_id}))

    async def _guarded(self, op: Awaitable[T]) -> T:
        async with self._semaphore:
            return await op
