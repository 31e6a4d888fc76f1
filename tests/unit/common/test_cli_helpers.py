"""Tests for common.cli_helpers module."""

import argparse

import pytest

from common.cli_helpers import parse_non_negative_int, parse_positive_int


class TestParseNonNegativeInt:
    def test_valid(self) -> None:
        assert parse_non_negative_int("0") == 0
        assert parse_non_negative_int("12") == 12

    def test_negative_rejected(self) -> None:
        with pytest.raises(argparse.ArgumentTypeError, match="--num must be >= 0"):
            parse_non_negative_int("-1", "--num")

    def test_non_integer_rejected(self) -> None:
        with pytest.raises(argparse.ArgumentTypeError, match="must be an integer"):
            parse_non_negative_int("five")


class TestParsePositiveInt:
    def test_valid(self) -> None:
        assert parse_positive_int("3") == 3

    def test_zero_rejected(self) -> None:
        with pytest.raises(argparse.ArgumentTypeError, match=">= 1"):
            parse_positive_int("0")
