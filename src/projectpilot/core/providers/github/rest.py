"""Thin async client for the GitHub REST endpoints (milestones and issues)."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from projectpilot.core.contracts.exceptions import UnknownError
from projectpilot.core.providers.github.errors import classify_response, classify_transport_error

_LOG = logging.getLogger(__name__)


class GitHubRestClient:
    def __init__(self, *, owner: str, repo: str, http_client: httpx.AsyncClient) -> None:
        self._prefix = f"/repos/{owner}/{repo}"
        self._http = http_client

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
        action: str,
    ) -> Any:
        """Issue one repository-scoped REST call and return the decoded JSON body."""
        url = f"{self._prefix}{path}"
        _LOG.debug("REST %s %s (%s)", method, url, action)
        try:
            response = await self._http.request(method, url, json=json)
        except httpx.TransportError as exc:
            raise classify_transport_error(exc, action=action) from exc

        if not response.is_success:
            raise classify_response(response, action=action)
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise UnknownError(f"{action} failed: response was not JSON") from exc
