"""Retrieving source pages and parsing them into documents."""

import logging
from typing import Optional

import requests
from bs4 import BeautifulSoup

from latest_news.errors import FetchError
from latest_news.models import FetchedDocument

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 30
USER_AGENT = "latest-news/1.0 (news reader)"


def fetch_document(
    url: str, session: Optional[requests.Session] = None
) -> FetchedDocument:
    """
    Fetch a URL and parse it as HTML.

    Never raises: a failed request or parse comes back as a
    FetchedDocument with `error` set and no document.
    """
    try:
        document = download_and_parse(url, session)
    except Exception as e:
        error = FetchError(url, e)
        logger.warning("%s", error)
        return FetchedDocument(url=url, error=str(e))

    return FetchedDocument(url=url, document=document)


def download_and_parse(
    url: str, session: Optional[requests.Session] = None
) -> BeautifulSoup:
    http = session or requests
    response = http.get(
        url,
        timeout=REQUEST_TIMEOUT,
        headers={"User-Agent": USER_AGENT},
    )
    response.raise_for_status()

    logger.info("Fetched %s (%d bytes)", url, len(response.content))
    return BeautifulSoup(response.content, "lxml")
