"""Core config-domain exports."""

from projectpilot.core.config.loader import load_config, load_config_from_env

__all__ = ["load_config", "load_config_from_env"]
