"""Provider adapter contract.

The orchestrators depend only on this interface, so tests can substitute an
in-memory double with canned responses and induced failures.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from datetime import datetime
from types import TracebackType

from projectpilot.core.contracts.entities import Issue, Milestone, Project


class Provider(ABC):
    """Issues remote calls for one repository.

    Every method is a single logical remote operation and raises a
    :class:`~projectpilot.core.contracts.exceptions.ProviderError` subclass
    on failure. Nothing is rolled back.
    """

    @abstractmethod
    async def __aenter__(self) -> Provider: ...  # pragma: no cover

    @abstractmethod
    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None: ...  # pragma: no cover

    @abstractmethod
    async def create_project(self, title: str, description: str | None = None) -> Project: ...  # pragma: no cover

    @abstractmethod
    async def create_milestone(
        self,
        title: str,
        *,
        description: str | None = None,
        due_on: datetime | None = None,
    ) -> Milestone: ...  # pragma: no cover

    @abstractmethod
    async def create_issue(
        self,
        title: str,
        *,
        body: str | None = None,
        milestone_number: int | None = None,
        labels: Sequence[str] = (),
        assignees: Sequence[str] = (),
    ) -> Issue: ...  # pragma: no cover

    @abstractmethod
    async def get_issue(self, number: int) -> Issue: ...  # pragma: no cover

    @abstractmethod
    async def list_projects_for_repo(self) -> list[Project]: ...  # pragma: no cover

    @abstractmethod
    async def add_to_project(self, project_id: str, content_id: str) -> str: ...  # pragma: no cover
