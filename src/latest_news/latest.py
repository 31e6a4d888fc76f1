"""Latest items of a single source."""

import logging
import sys
import webbrowser
from typing import Callable, Optional, TextIO

from latest_news.errors import ExtractError, LaunchError
from latest_news.extract import extract_items
from latest_news.fetch import fetch_document
from latest_news.models import ConfigEntry, FetchedDocument, FetchResult
from latest_news.render import render_result

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], FetchedDocument]


def failed_result(entry: ConfigEntry, error: Exception, index: int = 0) -> FetchResult:
    """Result for a source whose fetch raised instead of returning."""
    return FetchResult(
        command=entry.command,
        name=entry.name,
        url=entry.url,
        error=f"{type(error).__name__}: {error}",
        index=index,
    )


def get_latest(
    entry: ConfigEntry,
    limit: int,
    fetch: Fetcher = fetch_document,
    index: int = 0,
) -> FetchResult:
    """Fetch a source and extract its first `limit` items.

    Fetch and query failures are returned as a FetchResult with `error` set.
    """
    result = FetchResult(command=entry.command, name=entry.name, url=entry.url, index=index)

    fetched = fetch(entry.url)
    if not fetched.ok:
        result.error = fetched.error or "no document returned"
        return result

    try:
        result.items = extract_items(fetched.document, entry.query, limit)
    except ExtractError as e:
        logger.warning("Extraction failed for %s: %s", entry.command, e)
        result.error = str(e)
        return result

    logger.info("Got %d items from %s", len(result.items), entry.command)
    return result


def open_source(entry: ConfigEntry) -> bool:
    """Open the source URL with the default handler. Returns False on failure."""
    try:
        opened = webbrowser.open(entry.url)
    except webbrowser.Error as e:
        error = LaunchError(entry.url, e)
    else:
        if opened:
            return True
        error = LaunchError(entry.url, "no browser could handle the URL")

    logger.warning("%s", error)
    return False


def print_latest(
    entry: ConfigEntry,
    limit: int,
    open_url: bool = False,
    out: Optional[TextIO] = None,
    fetch: Fetcher = fetch_document,
) -> None:
    """Print the latest items of one source, or open it instead."""
    if open_url:
        open_source(entry)
        return

    out = out or sys.stdout
    try:
        result = get_latest(entry, limit, fetch=fetch)
    except Exception as e:
        logger.error("Unexpected error fetching %s: %s", entry.command, e)
        result = failed_result(entry, e)
    print(render_result(result), file=out)
