"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version


def _package_version() -> str:
    try:
        return version("projectpilot")
    except PackageNotFoundError:
        return "0.0.0"


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a JSON config file (default: read GITHUB_TOKEN/GITHUB_OWNER/GITHUB_REPO from the environment)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="projectpilot")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the MCP server over stdio")
    _add_common(serve_parser)

    roadmap_parser = subparsers.add_parser("roadmap", help="Create a roadmap from a JSON spec file")
    roadmap_parser.add_argument("--file", "-f", required=True, help="Path to the roadmap spec JSON")
    roadmap_parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit non-zero when any milestone or issue failed",
    )
    _add_common(roadmap_parser)

    sprint_parser = subparsers.add_parser("sprint", help="Plan a sprint from a JSON spec file")
    sprint_parser.add_argument("--file", "-f", required=True, help="Path to the sprint spec JSON")
    _add_common(sprint_parser)

    return parser


__all__ = ["build_parser"]
