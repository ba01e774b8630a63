"""Public API surface for projectpilot."""

__version__ = "0.1.0"

from projectpilot.core.config import load_config, load_config_from_env
from projectpilot.core.contracts import (
    AbortedError,
    AuthError,
    ConfigError,
    Issue,
    IssueOutcome,
    IssueSpec,
    ItemFailure,
    Milestone,
    MilestoneOutcome,
    MilestoneSpec,
    NotFoundError,
    PartialFailureError,
    Project,
    ProjectPilotConfig,
    ProjectPilotError,
    ProjectSpec,
    Provider,
    ProviderError,
    RateLimitError,
    RoadmapError,
    RoadmapResult,
    RoadmapSpec,
    Sprint,
    SprintSpec,
    SprintStatus,
    TransientError,
    UnknownError,
    UnknownToolError,
    ValidationError,
)
from projectpilot.core.engine import RoadmapOrchestrator, SprintPlanner
from projectpilot.core.providers import GitHubProvider, create_provider
from projectpilot.core.tools import ToolDispatcher, ToolName

__all__ = [
    "AbortedError",
    "AuthError",
    "ConfigError",
    "GitHubProvider",
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
    "RoadmapOrchestrator",
    "RoadmapResult",
    "RoadmapSpec",
    "Sprint",
    "SprintPlanner",
    "SprintSpec",
    "SprintStatus",
    "ToolDispatcher",
    "ToolName",
    "TransientError",
    "UnknownError",
    "UnknownToolError",
    "ValidationError",
    "__version__",
    "create_provider",
    "load_config",
    "load_config_from_env",
]
