"""
Fetch every registered source in parallel and collect the results.

One task per source is submitted to a thread pool and results are consumed
as they complete, so the report order follows completion order and changes
from run to run. Only the count is guaranteed: one block per source.
"""

import logging
import sys
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Iterator, Optional, TextIO

from latest_news.fetch import fetch_document
from latest_news.latest import Fetcher, failed_result, get_latest
from latest_news.models import FetchResult
from latest_news.registry import SourceRegistry
from latest_news.render import render_result

logger = logging.getLogger(__name__)


def fetch_all(
    registry: SourceRegistry,
    limit: int,
    max_workers: Optional[int] = None,
    fetch: Fetcher = fetch_document,
) -> Iterator[FetchResult]:
    """Yield one FetchResult per source, in completion order.

    Args:
        registry: Sources to fetch
        limit: Items to extract per source
        max_workers: Concurrency bound; None runs every source at once
        fetch: Fetcher used for each source URL
    """
    sources = registry.all()
    if not sources:
        logger.warning("No sources configured")
        return

    workers = max_workers or len(sources)
    logger.info("Fetching %d sources with %d workers", len(sources), workers)

    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = {
            executor.submit(get_latest, entry, limit, fetch, index): (index, entry)
            for index, entry in enumerate(sources)
        }
        for future in as_completed(futures):
            index, entry = futures[future]
            try:
                result = future.result()
            except Exception as e:
                logger.error("Unexpected error fetching %s: %s", entry.command, e)
                result = failed_result(entry, e, index)
            yield result


def run_all(
    registry: SourceRegistry,
    limit: int,
    max_workers: Optional[int] = None,
    fetch: Fetcher = fetch_document,
    ordered: bool = False,
) -> Iterator[str]:
    """Yield a rendered block per source.

    Blocks come in completion order, or in registration order when `ordered`
    is set (which waits for every source before yielding anything).
    """
    results = fetch_all(registry, limit, max_workers=max_workers, fetch=fetch)
    if ordered:
        results = iter(sorted(results, key=lambda r: r.index))
    for result in results:
        yield render_result(result)


def print_all(
    registry: SourceRegistry,
    limit: int,
    out: Optional[TextIO] = None,
    max_workers: Optional[int] = None,
    fetch: Fetcher = fetch_document,
    ordered: bool = False,
) -> int:
    """Print the latest items of every source. Returns the number of blocks."""
    out = out or sys.stdout
    count = 0
    for block in run_all(registry, limit, max_workers=max_workers, fetch=fetch, ordered=ordered):
        out.write(block)
        out.flush()
        count += 1
    return count
