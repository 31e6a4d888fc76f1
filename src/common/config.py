"""Shared configuration utilities."""

import os
from pathlib import Path

import yaml


def resolve_config_path(
    config_path: str | None,
    default_path: Path,
    env_var: str | None = None,
) -> Path:
    """Pick the config file to read.

    Args:
        config_path: Explicit path (e.g. from a --config flag), wins if set
        default_path: Path used when nothing else is given
        env_var: Environment variable checked before the default

    Returns:
        Path to the config file, with ~ and environment variables expanded
    """
    if not config_path and env_var:
        config_path = os.environ.get(env_var)
    if not config_path:
        return default_path
    return Path(os.path.expandvars(config_path)).expanduser()


def load_yaml(path: Path) -> dict:
    """Load YAML file and return dict (empty dict for an empty file)."""
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}
