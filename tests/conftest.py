"""Shared test fixtures for projectpilot tests."""

from __future__ import annotations

import pytest

from projectpilot.core.contracts.config import ProjectPilotConfig
from tests.fakes.provider import FakeProvider


def make_config(**overrides: object) -> ProjectPilotConfig:
    values: dict[str, object] = {"token": "test-token", "owner": "test-owner", "repo": "test-repo"}
    values.update(overrides)
    return ProjectPilotConfig.model_validate(values)


@pytest.fixture
def config() -> ProjectPilotConfig:
    return make_config()


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()
