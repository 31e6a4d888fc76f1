"""Argument parsing for the latest CLI."""

from __future__ import annotations

import argparse
from functools import partial
from typing import Any, Sequence

from common.cli_helpers import parse_non_negative_int, parse_positive_int
from latest_news.config import DEFAULT_CONFIG_PATH
from latest_news.errors import FlagReadError
from latest_news.registry import SourceRegistry

PROG = "latest"

GEN_AUTOCOMPLETE_FLAG = "gen_autocomplete"
NUM_RESULTS_FLAG = "num"
OPEN_FLAG = "open"

ROOT_NUM_DEFAULT = 1
SOURCE_NUM_DEFAULT = 5


def parse_global_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    '''Parse only the options needed before the sources are known.'''

    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument("--config", default=None)
    parser.add_argument("-v", "--verbose", action="store_true")
    args, _ = parser.parse_known_args(argv)
    return args


def _global_options(suppress_defaults: bool = False) -> argparse.ArgumentParser:
    '''Options accepted before or after a sub-command.

    Sub-commands suppress the defaults so they never overwrite a value given
    before the sub-command name.
    '''

    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument(
        "--config",
        default=argparse.SUPPRESS if suppress_defaults else None,
        help=f"config file (default is {DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=argparse.SUPPRESS if suppress_defaults else False,
        help="Log progress to stderr",
    )
    return parser


def build_parser(registry: SourceRegistry) -> argparse.ArgumentParser:
    '''Root parser plus one sub-command per registered source.'''

    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Get the latest news from all of your favorite sites! Fetched in parallel!",
        parents=[_global_options()],
    )
    parser.add_argument(
        "-n", "--num",
        type=partial(parse_non_negative_int, field_name="--num"),
        default=ROOT_NUM_DEFAULT,
        help="Number of results to display per source",
    )
    parser.add_argument(
        "--gen-autocomplete",
        action="store_true",
        help="Generate autocomplete shell script",
    )
    parser.add_argument(
        "--workers",
        type=partial(parse_positive_int, field_name="--workers"),
        default=None,
        help="Maximum sources fetched at once (default: all)",
    )
    parser.add_argument(
        "--ordered",
        action="store_true",
        help="Print sources in config order instead of as they arrive",
    )

    subparsers = parser.add_subparsers(dest="source", metavar="COMMAND")
    source_options = _global_options(suppress_defaults=True)
    for entry in registry.all():
        sub = subparsers.add_parser(
            entry.command,
            help=entry.short_help,
            description=entry.long_help,
            parents=[source_options],
        )
        sub.add_argument(
            "-o", "--open",
            action="store_true",
            help=f"Open {entry.url} link",
        )
        sub.add_argument(
            "-n", "--num",
            type=partial(parse_non_negative_int, field_name="--num"),
            default=SOURCE_NUM_DEFAULT,
            help="Number of results to display",
        )
    return parser


def read_flag(args: argparse.Namespace, name: str, expected: type) -> Any:
    '''Read a declared flag from parsed args, checking its type.'''

    if not hasattr(args, name):
        raise FlagReadError(name, "flag not declared")
    value = getattr(args, name)
    # bool is an int subclass; never accept one for the other
    if type(value) is not expected:
        raise FlagReadError(name, f"expected {expected.__name__}, got {type(value).__name__}")
    return value
