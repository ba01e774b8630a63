"""Routes tool calls to the roadmap orchestrator or the sprint planner."""

from __future__ import annotations

import logging
from typing import Any

import pydantic
from mcp import types
from pydantic import BaseModel

from projectpilot.core.contracts.config import ProjectPilotConfig
from projectpilot.core.contracts.exceptions import UnknownToolError, ValidationError
from projectpilot.core.contracts.roadmap import RoadmapSpec
from projectpilot.core.contracts.sprint import SprintSpec
from projectpilot.core.engine import RoadmapOrchestrator, SprintPlanner
from projectpilot.core.providers.factory import ProviderFactory
from projectpilot.core.tools.definitions import ToolName

_LOG = logging.getLogger(__name__)


def parse_tool_name(name: str) -> ToolName:
    try:
        return ToolName(name)
    except ValueError:
        raise UnknownToolError(name) from None


def _parse_arguments(model: type[BaseModel], tool: ToolName, arguments: dict[str, Any] | None) -> Any:
    try:
        return model.model_validate(arguments or {})
    except pydantic.ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'arguments'}: {err['msg']}" for err in exc.errors()
        )
        raise ValidationError(f"Invalid arguments for {tool.value}: {problems}") from exc


def to_text_content(result: BaseModel) -> list[types.TextContent]:
    return [types.TextContent(type="text", text=result.model_dump_json(by_alias=True))]


class ToolDispatcher:
    """Runs one tool invocation against a freshly opened provider.

    Errors propagate to the caller (the MCP server turns them into tool
    errors); partial roadmap results are ordinary responses.
    """

    def __init__(self, provider_factory: ProviderFactory, config: ProjectPilotConfig) -> None:
        self._provider_factory = provider_factory
        self._config = config

    async def dispatch(self, name: str, arguments: dict[str, Any] | None) -> list[types.TextContent]:
        tool = parse_tool_name(name)
        _LOG.debug("Dispatching tool %s", tool.value)
        return to_text_content(await self.run(tool, arguments))

    async def run(self, tool: ToolName, arguments: dict[str, Any] | None) -> BaseModel:
        match tool:
            case ToolName.CREATE_ROADMAP:
                roadmap_spec: RoadmapSpec = _parse_arguments(RoadmapSpec, tool, arguments)
                async with self._provider_factory() as provider:
                    return await RoadmapOrchestrator(provider, self._config).create_roadmap(roadmap_spec)
            case ToolName.PLAN_SPRINT:
                sprint_spec: SprintSpec = _parse_arguments(SprintSpec, tool, arguments)
                async with self._provider_factory() as provider:
                    return await SprintPlanner(provider, self._config).plan_sprint(sprint_spec)
