"""Core providers-domain exports."""

from projectpilot.core.providers.factory import ProviderFactory, create_provider, provider_factory
from projectpilot.core.providers.github import GitHubProvider

__all__ = ["GitHubProvider", "ProviderFactory", "create_provider", "provider_factory"]
