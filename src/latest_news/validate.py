"""Validation of raw configuration entries."""

from collections.abc import Mapping
from typing import Any

from latest_news.errors import InvalidFieldType, MissingRequiredField
from latest_news.models import ConfigEntry

URL_KEY = "url"
QUERY_KEY = "query"
NAME_KEY = "name"
COMMAND_KEY = "command"
SHORT_DESC_KEY = "shortDescription"
LONG_DESC_KEY = "longDescription"

# Checked in this order; the first missing key is the one reported.
REQUIRED_FIELDS = (URL_KEY, QUERY_KEY, NAME_KEY, COMMAND_KEY)
OPTIONAL_FIELDS = (SHORT_DESC_KEY, LONG_DESC_KEY)


def _require_str(key: str, value: Any) -> str:
    if not isinstance(value, str):
        raise InvalidFieldType(key, value)
    return value


def validate_entry(raw: Any) -> ConfigEntry:
    """Turn a raw config mapping into a ConfigEntry.

    Raises:
        MissingRequiredField: a required key is absent or null.
        InvalidFieldType: the entry is not a mapping, or a field is not a string.
    """
    if not isinstance(raw, Mapping):
        raise InvalidFieldType("entry", raw)

    for key in REQUIRED_FIELDS:
        if raw.get(key) is None:
            raise MissingRequiredField(key)

    values = {key: _require_str(key, raw[key]) for key in REQUIRED_FIELDS}
    for key in OPTIONAL_FIELDS:
        if raw.get(key) is not None:
            values[key] = _require_str(key, raw[key])

    return ConfigEntry(
        url=values[URL_KEY],
        query=values[QUERY_KEY],
        name=values[NAME_KEY],
        command=values[COMMAND_KEY],
        short_description=values.get(SHORT_DESC_KEY),
        long_description=values.get(LONG_DESC_KEY),
    )
