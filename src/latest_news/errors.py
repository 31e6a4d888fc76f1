"""Exceptions raised while loading sources and fetching their latest items."""

from typing import Any


class LatestError(Exception):
    """Base class for all latest_news errors."""


class ConfigLoadError(LatestError):
    """The configuration document is missing, unreadable or unparsable."""

    def __init__(self, path: str, cause: Any):
        self.path = path
        self.cause = cause
        super().__init__(f"Error reading config file {path}: {cause}")


class EntryValidationError(LatestError):
    """A configuration entry cannot be turned into a source."""

    def __init__(self, key: str, message: str):
        self.key = key
        super().__init__(message)


class MissingRequiredField(EntryValidationError):
    def __init__(self, key: str):
        super().__init__(key, f"{key} is a required config value")


class InvalidFieldType(EntryValidationError):
    def __init__(self, key: str, value: Any):
        self.value = value
        super().__init__(
            key, f"{key} must be a string, got {type(value).__name__}: {value!r}"
        )


class FetchError(LatestError):
    """A document could not be retrieved or parsed."""

    def __init__(self, url: str, cause: Any):
        self.url = url
        self.cause = cause
        super().__init__(f"Error reaching {url}: {cause}")


class ExtractError(LatestError):
    """A selector query could not be evaluated against a document."""

    def __init__(self, query: str, cause: Any):
        self.query = query
        self.cause = cause
        super().__init__(f"Invalid query {query!r}: {cause}")


class FlagReadError(LatestError):
    """A declared command flag could not be read from the parsed arguments."""

    def __init__(self, flag: str, cause: Any):
        self.flag = flag
        self.cause = cause
        super().__init__(f"Error reading {flag} flag: {cause}")


class LaunchError(LatestError):
    """A URL could not be opened with the host's default handler."""

    def __init__(self, url: str, cause: Any):
        self.url = url
        self.cause = cause
        super().__init__(f"Error running command:\n\topen {url}\n\t{cause}")
