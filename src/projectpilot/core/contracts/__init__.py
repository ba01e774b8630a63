"""Core contracts-domain exports."""

from projectpilot.core.contracts.config import ProjectPilotConfig
from projectpilot.core.contracts.entities import Issue, Milestone, Project, State
from projectpilot.core.contracts.exceptions import (
    AbortedError,
    AuthError,
    ConfigError,
    NotFoundError,
    PartialFailureError,
    ProjectPilotError,
    ProviderError,
    RateLimitError,
    RoadmapError,
    TransientError,
    UnknownError,
    UnknownToolError,
    ValidationError,
)
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
from projectpilot.core.contracts.sprint import Sprint, SprintSpec, SprintStatus

__all__ = [
    "AbortedError",
    "AuthError",
    "ConfigError",
    "Issue",
    "IssueOutcome",
    "IssueSpec",
    "ItemFailure",
    "Milestone",
    "MilestoneOutcome",
    "MilestoneSpec",
    "NotFoundError",
    "PartialFailureError",
    "Project",
    "ProjectPilotConfig",
    "ProjectPilotError",
    "ProjectSpec",
    "Provider",
    "ProviderError",
    "RateLimitError",
    "RoadmapError",
    "RoadmapResult",
    "RoadmapSpec",
    "Sprint",
    "SprintSpec",
    "SprintStatus",
    "State",
    "TransientError",
    "UnknownError",
    "UnknownToolError",
    "ValidationError",
]
