"""Sprint planning over existing issues."""

from __future__ import annotations

import asyncio
import logging
import uuid
from collections.abc import Awaitable
from typing import TypeVar

from projectpilot.core.contracts.config import ProjectPilotConfig
from projectpilot.core.contracts.exceptions import NotFoundError, ProviderError, ValidationError
from projectpilot.core.contracts.provider import Provider
from projectpilot.core.contracts.sprint import Sprint, SprintSpec, SprintStatus

T = TypeVar("T")
_LOG = logging.getLogger(__name__)


def generate_sprint_id() -> str:
    return f"sprint-{uuid.uuid4().hex[:8]}"


class SprintPlanner:
    def __init__(self, provider: Provider, config: ProjectPilotConfig) -> None:
        self._provider = provider
        self._config = config
        self._semaphore = asyncio.Semaphore(config.max_concurrent)

    async def plan_sprint(self, spec: SprintSpec) -> Sprint:
        """Verify every referenced issue, then build a ``planned`` sprint.

        Raises:
            ValidationError: Bad date window, unknown project, or missing issue(s).
            ProviderError: Any other classified failure while resolving references.
        """
        if spec.start_date >= spec.end_date:
            raise ValidationError(
                f"Sprint {spec.title!r}: start date {spec.start_date.isoformat()} "
                f"must be before end date {spec.end_date.isoformat()}"
            )

        projects = await self._guarded(self._provider.list_projects_for_repo())
        if spec.project_id is not None and spec.project_id not in {project.id for project in projects}:
            raise ValidationError(f"Sprint {spec.title!r}: project {spec.project_id} is not linked to this repository")

        numbers = list(dict.fromkeys(spec.issues))
        try:
            async with asyncio.TaskGroup() as tg:
                found = {number: tg.create_task(self._issue_exists(number)) for number in numbers}
        except* ProviderError as error_group:
            first_error = error_group.exceptions[0]
            raise first_error from error_group

        missing = sorted(number for number, task in found.items() if not task.result())
        if missing:
            listed = ", ".join(f"#{number}" for number in missing)
            raise ValidationError(f"Sprint {spec.title!r} references missing issue(s): {listed}")

        sprint = Sprint(
            id=spec.id or generate_sprint_id(),
            title=spec.title,
            start_date=spec.start_date,
            end_date=spec.end_date,
            status=SprintStatus.PLANNED,
            goals=list(spec.goals),
            issues=numbers,
            project_id=spec.project_id,
        )
        _LOG.info("Planned sprint %s with %d issue(s)", sprint.id, len(sprint.issues))
        return sprint

    async def _issue_exists(self, number: int) -> bool:
        try:
            await self._guarded(self._provider.get_issue(number))
        except NotFoundError:
            _LOG.debug("Issue #%d not found", number)
            return False
        return True

    async def _guarded(self, op: Awaitable[T]) -> T:
        async with self._semaphore:
            return await op
