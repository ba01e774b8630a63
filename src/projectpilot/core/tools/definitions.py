"""Tool names and the MCP tool definitions advertised to clients."""

from __future__ import annotations

from enum import StrEnum

from mcp import types
from pydantic import BaseModel

from projectpilot.core.contracts.roadmap import RoadmapSpec
from projectpilot.core.contracts.sprint import SprintSpec


class ToolName(StrEnum):
    CREATE_ROADMAP = "create_roadmap"
    PLAN_SPRINT = "plan_sprint"


ARGUMENT_MODELS: dict[ToolName, type[BaseModel]] = {
    ToolName.CREATE_ROADMAP: RoadmapSpec,
    ToolName.PLAN_SPRINT: SprintSpec,
}

_DESCRIPTIONS: dict[ToolName, str] = {
    ToolName.CREATE_ROADMAP: (
        "Create a GitHub project with milestones and the issues under each milestone. "
        "Issues are added to the new project board. Per-milestone and per-issue failures "
        "are reported in the result; only a failed project aborts the request. "
        "Not idempotent: calling twice creates duplicates."
    ),
    ToolName.PLAN_SPRINT: (
        "Plan a sprint over existing repository issues. Every issue number must exist; "
        "otherwise the request fails and no sprint is produced. Sprints start as 'planned'."
    ),
}


def tool_definitions() -> list[types.Tool]:
    return [
        types.Tool(
            name=name.value,
            description=_DESCRIPTIONS[name],
            inputSchema=ARGUMENT_MODELS[name].model_json_schema(by_alias=True),
        )
        for name in ToolName
    ]
