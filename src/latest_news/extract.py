"""Extracting the latest items from a fetched document."""

import logging
from typing import Optional

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag
from soupsieve import SelectorSyntaxError

from latest_news.errors import ExtractError

logger = logging.getLogger(__name__)

TRIM_CHARS = " \n\t\r"


def direct_text(node: Tag) -> str:
    """Text of the node's first direct text child, trimmed.

    Comments and similar markup strings are skipped; a node with no text
    child gives an empty string.
    """
    first = _first_text_child(node)
    if first is None:
        return ""
    return str(first).strip(TRIM_CHARS)


def _first_text_child(node: Tag) -> Optional[NavigableString]:
    for child in node.children:
        if isinstance(child, NavigableString) and not isinstance(child, PreformattedString):
            return child
    return None


def extract_items(document: BeautifulSoup, query: str, limit: int) -> list[str]:
    """Trimmed text of the first `limit` nodes matching a CSS selector.

    Matches are returned in document order.

    Raises:
        ValueError: limit is negative.
        ExtractError: the query is not a valid selector.
    """
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")
    if limit == 0:
        return []

    try:
        nodes = document.select(query, limit=limit)
    except (SelectorSyntaxError, NotImplementedError) as e:
        raise ExtractError(query, e) from e

    items = [direct_text(node) for node in nodes]
    logger.debug("Query %r matched %d nodes (limit %d)", query, len(items), limit)
    return items
