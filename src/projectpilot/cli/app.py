"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any

from projectpilot.cli.parser import build_parser
from projectpilot.core.config import load_config, load_config_from_env
from projectpilot.core.contracts.config import ProjectPilotConfig
from projectpilot.core.contracts.exceptions import (
    ConfigError,
    ProviderError,
    RoadmapError,
    ValidationError,
)
from projectpilot.core.contracts.roadmap import RoadmapResult
from projectpilot.core.providers.factory import provider_factory
from projectpilot.core.tools import ToolDispatcher, ToolName
from projectpilot.server import serve_stdio


def _load_config(args: argparse.Namespace) -> ProjectPilotConfig:
    if args.config:
        return load_config(args.config)
    return load_config_from_env()


def _read_spec(path: str) -> Any:
    spec_path = Path(path).expanduser()
    try:
        return json.loads(spec_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"failed reading spec file: {spec_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in spec file: {spec_path}") from exc


async def _run_tool(tool: ToolName, args: argparse.Namespace, config: ProjectPilotConfig) -> None:
    dispatcher = ToolDispatcher(provider_factory(config), config)
    result = await dispatcher.run(tool, _read_spec(args.file))
    print(result.model_dump_json(indent=2, by_alias=True))
    if isinstance(result, RoadmapResult) and getattr(args, "strict", False):
        result.raise_for_failures()


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        config = _load_config(args)
        if args.command == "serve":
            asyncio.run(serve_stdio(config))
        elif args.command == "roadmap":
            asyncio.run(_run_tool(ToolName.CREATE_ROADMAP, args, config))
        elif args.command == "sprint":
            asyncio.run(_run_tool(ToolName.PLAN_SPRINT, args, config))
        return 0
    except (ConfigError, ValidationError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except ProviderError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except RoadmapError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 5
    except Exception as exc:  # pragma: no cover
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]
