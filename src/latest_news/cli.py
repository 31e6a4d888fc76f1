"""CLI for printing the latest items of configured sources."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from dotenv import load_dotenv

from common.cli_helpers import setup_logging
from latest_news.aggregate import print_all
from latest_news.completion import write_completion_file
from latest_news.config import load_registry
from latest_news.errors import FlagReadError
from latest_news.helpers import (
    GEN_AUTOCOMPLETE_FLAG,
    NUM_RESULTS_FLAG,
    OPEN_FLAG,
    build_parser,
    parse_global_args,
    read_flag,
)
from latest_news.latest import print_latest
from latest_news.registry import SourceRegistry

logger = logging.getLogger(__name__)


def run_all_sources(
    parser: argparse.ArgumentParser, args: argparse.Namespace, registry: SourceRegistry
) -> None:
    try:
        gen_autocomplete = read_flag(args, GEN_AUTOCOMPLETE_FLAG, bool)
        if gen_autocomplete:
            write_completion_file(parser.prog, registry.commands())
            return
        num = read_flag(args, NUM_RESULTS_FLAG, int)
    except FlagReadError as e:
        logger.error("%s", e)
        return

    count = print_all(registry, num, max_workers=args.workers, ordered=args.ordered)
    logger.info("Printed %d of %d sources", count, len(registry))


def run_source(args: argparse.Namespace, registry: SourceRegistry) -> None:
    try:
        open_url = read_flag(args, OPEN_FLAG, bool)
        num = read_flag(args, NUM_RESULTS_FLAG, int)
    except FlagReadError as e:
        logger.error("%s", e)
        return

    entry = registry.lookup(args.source)
    if entry is None:
        logger.error("Unknown command: %s", args.source)
        return
    print_latest(entry, num, open_url=open_url)


def main(argv: Sequence[str] | None = None) -> int:
    load_dotenv()

    global_args = parse_global_args(argv)
    setup_logging(logging.INFO if global_args.verbose else logging.WARNING)

    registry = load_registry(global_args.config)

    try:
        parser = build_parser(registry)
    except argparse.ArgumentError as e:
        logger.error("Failed to build commands: %s", e)
        return 1

    args = parser.parse_args(argv)
    if args.source:
        run_source(args, registry)
    else:
        run_all_sources(parser, args, registry)
    return 0


if __name__ == "__main__":
    sys.exit(main())
