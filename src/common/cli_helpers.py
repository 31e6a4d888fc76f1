"""Common CLI helper utilities."""

from __future__ import annotations

import argparse
import logging


def setup_logging(level: int = logging.INFO) -> None:
    """Configure standard logging format for CLI tools (logs go to stderr)."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def parse_non_negative_int(value: str, field_name: str = "value") -> int:
    """Parse a non-negative integer for argparse arguments.

    Raises:
        argparse.ArgumentTypeError: If the value is not an integer >= 0.
    """
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"{field_name} must be an integer") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError(f"{field_name} must be >= 0")
    return parsed


def parse_positive_int(value: str, field_name: str = "value") -> int:
    """Parse an integer >= 1 for argparse arguments."""
    parsed = parse_non_negative_int(value, field_name)
    if parsed == 0:
        raise argparse.ArgumentTypeError(f"{field_name} must be >= 1")
    return parsed
