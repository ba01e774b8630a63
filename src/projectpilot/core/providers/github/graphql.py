"""Thin async client for the GitHub GraphQL endpoint (Projects V2 entities)."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from projectpilot.core.contracts.exceptions import UnknownError
from projectpilot.core.providers.github.errors import (
    classify_graphql_errors,
    classify_response,
    classify_transport_error,
)

_LOG = logging.getLogger(__name__)


class GitHubGraphQLClient:
    def __init__(self, *, url: str, http_client: httpx.AsyncClient) -> None:
        self._url = url
        self._http = http_client

    async def execute(self, query: str, variables: dict[str, Any] | None = None, *, action: str) -> dict[str, Any]:
        """Run one query or mutation and return its ``data`` object.

        Raises:
            ProviderError: Classified HTTP, transport, or GraphQL ``errors`` failure.
        """
        _LOG.debug("GraphQL %s", action)
        try:
            response = await self._http.post(self._url, json={"query": query, "variables": variables or {}})
        except httpx.TransportError as exc:
            raise classify_transport_error(exc, action=action) from exc

        if not response.is_success:
            raise classify_response(response, action=action)

        try:
            payload = response.json()
        except ValueError as exc:
            raise UnknownError(f"{action} failed: response was not JSON") from exc

        errors = payload.get("errors")
        if errors:
            raise classify_graphql_errors(errors, action=action)
        data = payload.get("data")
        if not isinstance(data, dict):
            raise UnknownError(f"{action} failed: response contained no data")
        return data
