"""Tests for latest_news.registry module."""

import logging

from latest_news.errors import MissingRequiredField
from latest_news.registry import SourceRegistry


def _entry(command: str, url: str = "http://x") -> dict:
    return {"command": command, "url": url, "query": "p", "name": command.upper()}


class TestRegister:
    def test_drops_invalid_entry_and_reports_it(self, caplog) -> None:
        with caplog.at_level(logging.ERROR, logger="latest_news.registry"):
            registry = SourceRegistry.register([
                {"command": "a", "url": "http://x", "query": "p", "name": "A"},
                {"command": "b"},
            ])

        assert registry.commands() == ["a"]
        assert "b" not in registry
        assert len(registry.errors) == 1
        raw, error = registry.errors[0]
        assert raw == {"command": "b"}
        assert isinstance(error, MissingRequiredField)

        messages = [r.getMessage() for r in caplog.records]
        assert len(messages) == 1
        assert "'command': 'b'" in messages[0]
        assert "url is a required config value" in messages[0]

    def test_continues_after_invalid_entries(self) -> None:
        registry = SourceRegistry.register([
            {"name": "no command"},
            _entry("a"),
            None,
            _entry("b"),
        ])
        assert registry.commands() == ["a", "b"]
        assert len(registry.errors) == 2

    def test_preserves_insertion_order(self) -> None:
        registry = SourceRegistry.register([_entry("z"), _entry("a"), _entry("m")])
        assert [e.command for e in registry.all()] == ["z", "a", "m"]

    def test_duplicate_command_last_write_wins(self, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="latest_news.registry"):
            registry = SourceRegistry.register([
                _entry("a", url="http://first"),
                _entry("a", url="http://second"),
            ])

        assert len(registry) == 1
        assert registry.lookup("a").url == "http://second"
        assert any("Duplicate command 'a'" in r.getMessage() for r in caplog.records)

    def test_empty(self) -> None:
        registry = SourceRegistry.register([])
        assert len(registry) == 0
        assert registry.all() == []


class TestLookup:
    def test_found(self) -> None:
        registry = SourceRegistry.register([_entry("a")])
        assert registry.lookup("a").name == "A"

    def test_not_found(self) -> None:
        registry = SourceRegistry.register([_entry("a")])
        assert registry.lookup("missing") is None
