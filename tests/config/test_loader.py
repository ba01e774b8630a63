from __future__ import annotations

import json
from pathlib import Path

import pydantic
import pytest

from projectpilot.core.config import load_config, load_config_from_env
from projectpilot.core.contracts.config import ProjectPilotConfig
from projectpilot.core.contracts.exceptions import ConfigError

BASE_ENV = {"GITHUB_TOKEN": "test-token", "GITHUB_OWNER": "test-owner", "GITHUB_REPO": "test-repo"}


def test_load_config_from_env_reads_required_values() -> None:
    config = load_config_from_env(BASE_ENV)

    assert config.token == "test-token"
    assert config.target == "test-owner/test-repo"
    assert config.api_url == "https://api.github.com"
    assert config.resolved_graphql_url == "https://api.github.com/graphql"
    assert config.max_concurrent == 4
    assert config.add_issues_to_project is True


def test_load_config_from_env_reads_optional_values() -> None:
    env = {
        **BASE_ENV,
        "GITHUB_API_URL": "https://ghe.example.com/api/v3",
        "GITHUB_GRAPHQL_URL": "https://ghe.example.com/api/graphql",
        "PROJECTPILOT_MAX_CONCURRENT": "2",
        "PROJECTPILOT_ADD_TO_PROJECT": "false",
        "PROJECTPILOT_TIMEOUT": "5.5",
        "PROJECTPILOT_MAX_RETRIES": "0",
    }

    config = load_config_from_env(env)

    assert config.api_url == "https://ghe.example.com/api/v3"
    assert config.resolved_graphql_url == "https://ghe.example.com/api/graphql"
    assert config.max_concurrent == 2
    assert config.add_issues_to_project is False
    assert config.timeout == 5.5
    assert config.max_retries == 0


@pytest.mark.parametrize("missing", ["GITHUB_TOKEN", "GITHUB_OWNER", "GITHUB_REPO"])
def test_load_config_from_env_requires_credentials_and_target(missing: str) -> None:
    env = {**BASE_ENV, missing: "  "}

    with pytest.raises(ConfigError, match=missing):
        load_config_from_env(env)


def test_load_config_from_env_rejects_invalid_values() -> None:
    with pytest.raises(ConfigError, match="max_concurrent"):
        load_config_from_env({**BASE_ENV, "PROJECTPILOT_MAX_CONCURRENT": "50"})


def test_load_config_from_env_uses_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name, value in BASE_ENV.items():
        monkeypatch.setenv(name, value)

    assert load_config_from_env().repo == "test-repo"


def test_load_config_reads_json_and_falls_back_to_env_token(tmp_path: Path) -> None:
    path = tmp_path / "projectpilot.json"
    path.write_text(json.dumps({"owner": "o", "repo": "r", "max_concurrent": 1}), encoding="utf-8")

    config = load_config(path, environ={"GITHUB_TOKEN": "env-token"})

    assert config.token == "env-token"
    assert config.target == "o/r"
    assert config.max_concurrent == 1


def test_load_config_reports_bad_json(tmp_path: Path) -> None:
    path = tmp_path / "projectpilot.json"
    path.write_text("{", encoding="utf-8")

    with pytest.raises(ConfigError, match="invalid JSON"):
        load_config(path, environ={})


def test_load_config_reports_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="failed reading"):
        load_config(tmp_path / "absent.json", environ={})


def test_load_config_requires_object(tmp_path: Path) -> None:
    path = tmp_path / "projectpilot.json"
    path.write_text("[]", encoding="utf-8")

    with pytest.raises(ConfigError, match="JSON object"):
        load_config(path, environ={})


def test_config_is_frozen_and_hides_token() -> None:
    config = ProjectPilotConfig(token="secret-token", owner="o", repo="r")

    assert "secret-token" not in repr(config)
    with pytest.raises(pydantic.ValidationError):
        config.owner = "other"  # type: ignore[misc]


def test_config_rejects_slash_in_owner() -> None:
    with pytest.raises(pydantic.ValidationError, match="must not contain"):
        ProjectPilotConfig(token="t", owner="o/x", repo="r")
