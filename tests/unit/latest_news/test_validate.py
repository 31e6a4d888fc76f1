"""Tests for latest_news.validate module."""

import pytest

from latest_news.errors import InvalidFieldType, MissingRequiredField
from latest_news.models import ConfigEntry
from latest_news.validate import validate_entry


def _raw(**overrides) -> dict:
    raw = {
        "url": "https://news.ycombinator.com",
        "query": ".titleline > a",
        "name": "Hacker News",
        "command": "hn",
    }
    raw.update(overrides)
    return raw


class TestValidateEntry:
    def test_valid_entry(self) -> None:
        entry = validate_entry(_raw())
        assert entry == ConfigEntry(
            url="https://news.ycombinator.com",
            query=".titleline > a",
            name="Hacker News",
            command="hn",
        )

    def test_descriptions_default_to_name(self) -> None:
        entry = validate_entry(_raw())
        assert entry.short_help == "Hacker News"
        assert entry.long_help == "Hacker News"

    def test_long_description_defaults_to_short(self) -> None:
        entry = validate_entry(_raw(shortDescription="HN front page"))
        assert entry.short_help == "HN front page"
        assert entry.long_help == "HN front page"

    def test_explicit_descriptions(self) -> None:
        entry = validate_entry(_raw(shortDescription="short", longDescription="long"))
        assert entry.short_help == "short"
        assert entry.long_help == "long"

    @pytest.mark.parametrize("key", ["url", "query", "name", "command"])
    def test_missing_required_field(self, key) -> None:
        raw = _raw()
        del raw[key]
        with pytest.raises(MissingRequiredField) as exc_info:
            validate_entry(raw)
        assert exc_info.value.key == key
        assert str(exc_info.value) == f"{key} is a required config value"

    def test_null_counts_as_missing(self) -> None:
        with pytest.raises(MissingRequiredField) as exc_info:
            validate_entry(_raw(query=None))
        assert exc_info.value.key == "query"

    def test_reports_first_missing_field_in_fixed_order(self) -> None:
        with pytest.raises(MissingRequiredField) as exc_info:
            validate_entry({"command": "b"})
        assert exc_info.value.key == "url"

        with pytest.raises(MissingRequiredField) as exc_info:
            validate_entry({"url": "http://x", "command": "b"})
        assert exc_info.value.key == "query"

    def test_wrong_type_rejected(self) -> None:
        with pytest.raises(InvalidFieldType) as exc_info:
            validate_entry(_raw(command=42))
        assert exc_info.value.key == "command"

    def test_wrong_type_optional_field_rejected(self) -> None:
        with pytest.raises(InvalidFieldType) as exc_info:
            validate_entry(_raw(shortDescription=["a"]))
        assert exc_info.value.key == "shortDescription"

    def test_non_mapping_rejected(self) -> None:
        with pytest.raises(InvalidFieldType) as exc_info:
            validate_entry("hn")
        assert exc_info.value.key == "entry"
