"""Data models for sources and their fetch results."""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class ConfigEntry:
    """One validated source: where to fetch and what to extract."""
    url: str
    query: str
    name: str
    command: str
    short_description: Optional[str] = None
    long_description: Optional[str] = None

    @property
    def short_help(self) -> str:
        return self.short_description or self.name

    @property
    def long_help(self) -> str:
        return self.long_description or self.short_help


@dataclass
class FetchedDocument:
    """Parsed document for a URL, or the reason it could not be retrieved."""
    url: str
    document: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.document is not None and self.error is None


@dataclass
class FetchResult:
    """Latest items of one source, or the error that replaced them."""
    command: str
    name: str
    url: str
    items: list[str] = field(default_factory=list)
    error: Optional[str] = None
    index: int = 0

    @property
    def ok(self) -> bool:
        return self.error is None
