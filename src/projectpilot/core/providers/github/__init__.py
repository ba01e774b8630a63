"""GitHub provider package."""

from projectpilot.core.providers.github.provider import GitHubProvider

__all__ = ["GitHubProvider"]
