"""Registry of configured sources, keyed by command name."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

from latest_news.errors import EntryValidationError
from latest_news.models import ConfigEntry
from latest_news.validate import validate_entry

logger = logging.getLogger(__name__)


@dataclass
class SourceRegistry:
    """
    Validated sources in the order they were configured.

    Built once at startup with `register` and only read afterwards.
    """

    _sources: dict[str, ConfigEntry] = field(default_factory=dict)
    errors: list[tuple[Any, EntryValidationError]] = field(default_factory=list)

    @classmethod
    def register(cls, entries: Iterable[Any]) -> SourceRegistry:
        """Validate raw entries and build a registry from the valid ones.

        Invalid entries are logged, recorded in `errors` and skipped. When two
        entries share a command the later one replaces the earlier.
        """
        registry = cls()
        for raw in entries:
            try:
                entry = validate_entry(raw)
            except EntryValidationError as e:
                logger.error("Error in config for entry:\n\t%s\n\t%s", raw, e)
                registry.errors.append((raw, e))
                continue

            if entry.command in registry._sources:
                logger.warning(
                    "Duplicate command %r in config, replacing %s with %s",
                    entry.command,
                    registry._sources[entry.command].url,
                    entry.url,
                )
            registry._sources[entry.command] = entry

        logger.info(
            "Registered %d sources (%d invalid entries skipped)",
            len(registry._sources),
            len(registry.errors),
        )
        return registry

    def lookup(self, command: str) -> Optional[ConfigEntry]:
        """Get a source by command name."""
        return self._sources.get(command)

    def all(self) -> list[ConfigEntry]:
        """All sources in registration order."""
        return list(self._sources.values())

    def commands(self) -> list[str]:
        return list(self._sources.keys())

    def __len__(self) -> int:
        return len(self._sources)

    def __contains__(self, command: object) -> bool:
        return command in self._sources
