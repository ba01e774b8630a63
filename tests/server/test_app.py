from __future__ import annotations

import json

import pytest
from mcp import types

from projectpilot.core.contracts.config import ProjectPilotConfig
from projectpilot.server import build_server
from tests.fakes.provider import FakeProvider


def _call_request(name: str, arguments: dict[str, object]) -> types.CallToolRequest:
    return types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name=name, arguments=arguments),
    )


@pytest.mark.asyncio
async def test_server_lists_both_tools(provider: FakeProvider, config: ProjectPilotConfig) -> None:
    server = build_server(config, lambda: provider)

    result = await server.request_handlers[types.ListToolsRequest](types.ListToolsRequest(method="tools/list"))

    assert sorted(tool.name for tool in result.root.tools) == ["create_roadmap", "plan_sprint"]


@pytest.mark.asyncio
async def test_server_call_tool_returns_text_content(provider: FakeProvider, config: ProjectPilotConfig) -> None:
    server = build_server(config, lambda: provider)

    result = await server.request_handlers[types.CallToolRequest](
        _call_request("create_roadmap", {"project": {"title": "P1"}, "milestones": []})
    )

    assert not result.root.isError
    payload = json.loads(result.root.content[0].text)
    assert payload["project"]["title"] == "P1"
    assert payload["milestones"] == []


@pytest.mark.asyncio
async def test_server_reports_failures_as_tool_errors(provider: FakeProvider, config: ProjectPilotConfig) -> None:
    provider.seed_issue(1)
    server = build_server(config, lambda: provider)

    result = await server.request_handlers[types.CallToolRequest](
        _call_request(
            "plan_sprint",
            {
                "title": "Sprint 1",
                "startDate": "2024-01-01T00:00:00Z",
                "endDate": "2024-01-14T00:00:00Z",
                "issues": [1, 9],
            },
        )
    )

    assert result.root.isError
    assert "#9" in result.root.content[0].text


@pytest.mark.asyncio
async def test_server_accepts_bare_string_titles(provider: FakeProvider, config: ProjectPilotConfig) -> None:
    server = build_server(config, lambda: provider)

    result = await server.request_handlers[types.CallToolRequest](
        _call_request("create_roadmap", {"project": "P1", "milestones": [{"title": "M1", "issues": ["I1"]}]})
    )

    assert not result.root.isError
    payload = json.loads(result.root.content[0].text)
    assert payload["project"]["title"] == "P1"
    assert payload["status"] == "complete"
    milestone = payload["milestones"][0]
    assert milestone["issues"][0]["issue"]["milestoneNumber"] == milestone["milestone"]["number"]


@pytest.mark.asyncio
async def test_server_accepts_snake_case_arguments(provider: FakeProvider, config: ProjectPilotConfig) -> None:
    provider.seed_issue(1)
    server = build_server(config, lambda: provider)

    result = await server.request_handlers[types.CallToolRequest](
        _call_request(
            "plan_sprint",
            {
                "id": "sprint-1",
                "title": "Sprint 1",
                "start_date": "2024-01-01T00:00:00Z",
                "end_date": "2024-01-14T23:59:59Z",
                "issues": [1],
            },
        )
    )

    assert not result.root.isError
    payload = json.loads(result.root.content[0].text)
    assert payload["id"] == "sprint-1"
    assert payload["status"] == "planned"


@pytest.mark.asyncio
async def test_server_reports_invalid_arguments_as_tool_errors(
    provider: FakeProvider, config: ProjectPilotConfig
) -> None:
    server = build_server(config, lambda: provider)

    result = await server.request_handlers[types.CallToolRequest](
        _call_request("plan_sprint", {"title": "Sprint 1"})
    )

    assert result.root.isError
    assert "Invalid arguments for plan_sprint" in result.root.content[0].text
    assert provider.entered == 0
