"""Config loading from the process environment or a JSON file.

This is the only place that reads ambient process state; everything below
receives a :class:`ProjectPilotConfig` explicitly.
"""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from projectpilot.core.contracts.config import ProjectPilotConfig
from projectpilot.core.contracts.exceptions import ConfigError

_ENV_FIELDS: dict[str, str] = {
    "GITHUB_TOKEN": "token",
    "GITHUB_OWNER": "owner",
    "GITHUB_REPO": "repo",
    "GITHUB_API_URL": "api_url",
    "GITHUB_GRAPHQL_URL": "graphql_url",
    "PROJECTPILOT_MAX_CONCURRENT": "max_concurrent",
    "PROJECTPILOT_ADD_TO_PROJECT": "add_issues_to_project",
    "PROJECTPILOT_TIMEOUT": "timeout",
    "PROJECTPILOT_MAX_RETRIES": "max_retries",
}
_REQUIRED_ENV = ("GITHUB_TOKEN", "GITHUB_OWNER", "GITHUB_REPO")


def _validate(payload: dict[str, Any], *, source: str) -> ProjectPilotConfig:
    try:
        return ProjectPilotConfig.model_validate(payload)
    except ValidationError as exc:
        fields = ", ".join(".".join(str(part) for part in err["loc"]) or "config" for err in exc.errors())
        raise ConfigError(f"invalid config from {source}: {fields}") from exc


def load_config_from_env(environ: Mapping[str, str] | None = None) -> ProjectPilotConfig:
    env = os.environ if environ is None else environ

    missing = [name for name in _REQUIRED_ENV if not (env.get(name) or "").strip()]
    if missing:
        raise ConfigError(f"missing required environment variable(s): {', '.join(missing)}")

    payload: dict[str, Any] = {}
    for name, field in _ENV_FIELDS.items():
        value = (env.get(name) or "").strip()
        if value:
            payload[field] = value
    return _validate(payload, source="environment")


def load_config(path: str | Path, environ: Mapping[str, str] | None = None) -> ProjectPilotConfig:
    """Load config from a JSON file; ``token`` falls back to ``GITHUB_TOKEN``."""
    env = os.environ if environ is None else environ
    config_path = Path(path).expanduser().resolve()

    try:
        raw_payload: Any = json.loads(config_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"failed reading config file: {config_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in config file: {config_path}") from exc

    if not isinstance(raw_payload, dict):
        raise ConfigError(f"config file must contain a JSON object: {config_path}")
    if not raw_payload.get("token"):
        token = (env.get("GITHUB_TOKEN") or "").strip()
        if token:
            raw_payload["token"] = token
    return _validate(raw_payload, source=str(config_path))
