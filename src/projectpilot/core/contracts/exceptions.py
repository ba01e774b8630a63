"""Exception hierarchy for projectpilot."""

from __future__ import annotations


class ProjectPilotError(Exception):
    """Base exception for all projectpilot errors."""


class ConfigError(ProjectPilotError):
    """Configuration loading or validation failure."""


class ProviderError(ProjectPilotError):
    """Base remote operation failure, classified at the provider boundary."""

    kind: str = "unknown"
    retryable: bool = False

    def __init__(self, message: str = "", *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class AuthError(ProviderError):
    """Credential rejected or not authorized for the resource."""

    kind = "auth"


class NotFoundError(ProviderError):
    """Referenced remote resource does not exist."""

    kind = "not_found"


class ValidationError(ProviderError):
    """Input rejected as malformed, either locally or by the remote API."""

    kind = "validation"


class RateLimitError(ProviderError):
    """Remote throttling."""

    kind = "rate_limit"
    retryable = True

    def __init__(
        self,
        message: str = "",
        *,
        status_code: int | None = None,
        retry_after: float | None = None,
    ) -> None:
        super().__init__(message, status_code=status_code)
        self.retry_after = retry_after


class TransientError(ProviderError):
    """Network failure, timeout or 5xx; safe for the caller to retry."""

    kind = "transient"
    retryable = True


class UnknownError(ProviderError):
    """Unclassified remote failure."""


class RoadmapError(ProjectPilotError):
    """Orchestration-level roadmap failure."""


class AbortedError(RoadmapError):
    """Project creation failed, so nothing else was attempted."""

    def __init__(self, message: str, *, spec_title: str, cause: ProviderError) -> None:
        super().__init__(message)
        self.spec_title = spec_title
        self.cause = cause


class PartialFailureError(RoadmapError):
    """The project was created but some milestones or issues were not."""

    def __init__(self, message: str, *, failed_milestones: list[str], failed_issues: list[str]) -> None:
        super().__init__(message)
        self.failed_milestones = failed_milestones
        self.failed_issues = failed_issues


class UnknownToolError(ProjectPilotError):
    """Tool name is not one this server exposes."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown tool: {name!r}")
        self.name = name
