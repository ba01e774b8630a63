"""GitHub provider adapter over the GraphQL and REST clients."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime
from types import TracebackType
from typing import Any

import httpx

from projectpilot import __version__
from projectpilot.core.contracts.config import ProjectPilotConfig
from projectpilot.core.contracts.entities import Issue, Milestone, Project
from projectpilot.core.contracts.exceptions import NotFoundError, ProviderError, UnknownError
from projectpilot.core.contracts.provider import Provider
from projectpilot.core.providers.github import queries
from projectpilot.core.providers.github._retrying_transport import RetryingTransport
from projectpilot.core.providers.github.graphql import GitHubGraphQLClient
from projectpilot.core.providers.github.mapper import (
    format_due_on,
    issue_from_payload,
    milestone_from_payload,
    project_from_node,
)
from projectpilot.core.providers.github.rest import GitHubRestClient

_LOG = logging.getLogger(__name__)

_MAX_PROJECT_PAGES = 20


class GitHubProvider(Provider):
    """Provider bound to one ``owner/repo``.

    Open it with ``async with``; the underlying HTTP client lives exactly as
    long as the context, so nothing leaks between tool invocations.
    """

    def __init__(self, config: ProjectPilotConfig, *, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._config = config
        self._transport = transport

        self._http: httpx.AsyncClient | None = None
        self._graphql: GitHubGraphQLClient | None = None
        self._rest: GitHubRestClient | None = None

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    async def __aenter__(self) -> GitHubProvider:
        config = self._config
        self._http = httpx.AsyncClient(
            base_url=config.api_url,
            transport=RetryingTransport(transport=self._transport, max_retries=config.max_retries),
            headers={
                "Authorization": f"Bearer {config.token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
                "User-Agent": f"projectpilot/{__version__}",
            },
            limits=httpx.Limits(max_connections=20, max_keepalive_connections=10),
            timeout=httpx.Timeout(config.timeout),
        )
        self._graphql = GitHubGraphQLClient(url=config.resolved_graphql_url, http_client=self._http)
        self._rest = GitHubRestClient(owner=config.owner, repo=config.repo, http_client=self._http)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._http is not None:
            await self._http.aclose()
        self._http = None
        self._graphql = None
        self._rest = None

    # ------------------------------------------------------------------
    # Projects (GraphQL)
    # ------------------------------------------------------------------

    async def create_project(self, title: str, description: str | None = None) -> Project:
        graphql = self._require_graphql()
        owner = await graphql.execute(
            queries.FETCH_REPOSITORY_OWNER,
            {"owner": self._config.owner, "name": self._config.repo},
            action="resolve repository owner",
        )
        repository = owner.get("repository")
        if repository is None:
            raise NotFoundError(f"Repository {self._config.target} not found")

        data = await graphql.execute(
            queries.CREATE_PROJECT,
            {"ownerId": repository["owner"]["id"], "title": title, "repositoryId": repository["id"]},
            action=f"create project {title!r}",
        )
        node = (data.get("createProjectV2") or {}).get("projectV2")
        if node is None:
            raise UnknownError("createProjectV2 returned no project")
        project = project_from_node(node)
        _LOG.info("Created project %s (%s)", project.title, project.id)

        if not description:
            return project

        # The project exists from here on; description failures are not fatal.
        try:
            data = await graphql.execute(
                queries.UPDATE_PROJECT_DESCRIPTION,
                {"projectId": project.id, "shortDescription": description},
                action=f"set description on project {title!r}",
            )
        except ProviderError as exc:
            _LOG.warning("Project %s created without its description: %s", project.id, exc)
            return project
        node = (data.get("updateProjectV2") or {}).get("projectV2")
        return project_from_node(node) if node else project.model_copy(update={"description": description})

    async def list_projects_for_repo(self) -> list[Project]:
        graphql = self._require_graphql()
        projects: list[Project] = []
        cursor: str | None = None
        for _ in range(_MAX_PROJECT_PAGES):
            data = await graphql.execute(
                queries.LIST_REPOSITORY_PROJECTS,
                {"owner": self._config.owner, "name": self._config.repo, "after": cursor},
                action="list repository projects",
            )
            repository = data.get("repository")
            if repository is None:
                raise NotFoundError(f"Repository {self._config.target} not found")
            connection = repository["projectsV2"]
            projects.extend(project_from_node(node) for node in connection.get("nodes") or [] if node)
            page_info = connection.get("pageInfo") or {}
            if not page_info.get("hasNextPage"):
                return projects
            cursor = page_info.get("endCursor")
        raise UnknownError(f"Project pagination for {self._config.target} exceeded {_MAX_PROJECT_PAGES} pages")

    async def add_to_project(self, project_id: str, content_id: str) -> str:
        data = await self._require_graphql().execute(
            queries.ADD_PROJECT_ITEM,
            {"projectId": project_id, "contentId": content_id},
            action="add item to project",
        )
        item = (data.get("addProjectV2ItemById") or {}).get("item")
        if item is None:
            raise UnknownError("addProjectV2ItemById returned no item")
        return str(item["id"])

    # ------------------------------------------------------------------
    # Milestones and issues (REST)
    # ------------------------------------------------------------------

    async def create_milestone(
        self,
        title: str,
        *,
        description: str | None = None,
        due_on: datetime | None = None,
    ) -> Milestone:
        payload: dict[str, Any] = {"title": title, "state": "open"}
        if description:
            payload["description"] = description
        if due_on is not None:
            payload["due_on"] = format_due_on(due_on)
        data = await self._require_rest().request(
            "POST", "/milestones", json=payload, action=f"create milestone {title!r}"
        )
        return milestone_from_payload(data)

    async def create_issue(
        self,
        title: str,
        *,
        body: str | None = None,
        milestone_number: int | None = None,
        labels: Sequence[str] = (),
        assignees: Sequence[str] = (),
    ) -> Issue:
        payload: dict[str, Any] = {"title": title}
        if body:
            payload["body"] = body
        if milestone_number is not None:
            payload["milestone"] = milestone_number
        if labels:
            payload["labels"] = list(labels)
        if assignees:
            payload["assignees"] = list(assignees)
        data = await self._require_rest().request("POST", "/issues", json=payload, action=f"create issue {title!r}")
        return issue_from_payload(data)

    async def get_issue(self, number: int) -> Issue:
        data = await self._require_rest().request("GET", f"/issues/{number}", action=f"get issue #{number}")
        # The issues endpoint also serves pull requests.
        if data.get("pull_request") is not None:
            raise NotFoundError(f"#{number} is a pull request, not an issue", status_code=404)
        return issue_from_payload(data)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _require_graphql(self) -> GitHubGraphQLClient:
        if self._graphql is None:
            raise RuntimeError("Provider is not initialized. Use 'async with'.")
        return self._graphql

    def _require_rest(self) -> GitHubRestClient:
        if self._rest is None:
            raise RuntimeError("Provider is not initialized. Use 'async with'.")
        return self._rest
