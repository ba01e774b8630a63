"""Factory for creating provider instances.

Decouples provider selection from provider implementation: the tool
dispatcher receives a zero-argument factory and opens a fresh provider per
invocation.
"""

from __future__ import annotations

from collections.abc import Callable

from projectpilot.core.contracts.config import ProjectPilotConfig
from projectpilot.core.contracts.exceptions import ConfigError
from projectpilot.core.contracts.provider import Provider
from projectpilot.core.providers.github import GitHubProvider

ProviderFactory = Callable[[], Provider]

_REGISTRY: dict[str, Callable[[ProjectPilotConfig], Provider]] = {
    "github": GitHubProvider,
}


def create_provider(config: ProjectPilotConfig, *, name: str = "github") -> Provider:
    """Create a provider instance by name.

    The returned provider is an async context manager::

        async with create_provider(config) as provider:
            issue = await provider.get_issue(1)

    Raises:
        ConfigError: If the provider name is not registered.
    """
    if name not in _REGISTRY:
        available = ", ".join(sorted(_REGISTRY)) or "(none registered)"
        raise ConfigError(f"Unknown provider: {name!r}. Available: {available}")
    return _REGISTRY[name](config)


def provider_factory(config: ProjectPilotConfig, *, name: str = "github") -> ProviderFactory:
    return lambda: create_provider(config, name=name)
