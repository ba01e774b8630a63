"""Command line interface."""

from projectpilot.cli.app import main
from projectpilot.cli.parser import build_parser

__all__ = ["build_parser", "main"]
