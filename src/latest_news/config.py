"""Loading the sources configuration document."""

import logging
from pathlib import Path

import yaml

from common.config import load_yaml, resolve_config_path
from latest_news.errors import ConfigLoadError
from latest_news.registry import SourceRegistry

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".latest.yaml"
DEFAULT_CONFIG_PATH = Path.home() / CONFIG_FILENAME
CONFIG_ENV_VAR = "LATEST_CONFIG"
ENTRIES_KEY = "entries"


def get_config_path(config_path: str | None = None) -> Path:
    """Config path from the flag, then $LATEST_CONFIG, then ~/.latest.yaml."""
    return resolve_config_path(config_path, DEFAULT_CONFIG_PATH, CONFIG_ENV_VAR)


def load_entries(path: Path) -> list:
    """Read the raw `entries` list from a YAML config file.

    Raises:
        ConfigLoadError: the file is missing, unreadable, not UTF-8, not YAML,
            or has no `entries` list.
    """
    try:
        data = load_yaml(path)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        raise ConfigLoadError(str(path), e) from e

    if not isinstance(data, dict):
        raise ConfigLoadError(str(path), "top level must be a mapping")

    entries = data.get(ENTRIES_KEY)
    if entries is None:
        raise ConfigLoadError(str(path), f"no {ENTRIES_KEY!r} list found")
    if not isinstance(entries, list):
        raise ConfigLoadError(str(path), f"{ENTRIES_KEY!r} must be a list")

    logger.info("Loaded %d entries from %s", len(entries), path)
    return entries


def load_registry(config_path: str | None = None) -> SourceRegistry:
    """Build the source registry from the config file.

    A config that cannot be loaded is logged and gives an empty registry.
    """
    path = get_config_path(config_path)
    try:
        entries = load_entries(path)
    except ConfigLoadError as e:
        logger.error("%s", e)
        entries = []
    return SourceRegistry.register(entries)
