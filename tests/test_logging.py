"""Tests for log sanitizing helpers"""
import pytest

from storefront.logging import get_logger, sanitize_id_for_logging, sanitize_string_for_logging


def test_get_logger_cached():
    assert get_logger("storefront.test") is get_logger("storefront.test")


@pytest.mark.parametrize("value", [None, ""])
def test_missing_id(value):
    assert sanitize_id_for_logging(value) == "N/A"


def test_id_truncated():
    assert sanitize_id_for_logging("abcdefghijkl") == "abcdefgh"
    assert sanitize_id_for_logging(42) == "42"


def test_newlines_cannot_forge_lines():
    assert "\n" not in sanitize_string_for_logging("a@b.c\nINFO fake entry")
    assert "\n" not in sanitize_id_for_logging("1\n2")


def test_long_string_cut():
    assert sanitize_string_for_logging("x" * 60, max_length=10) == "x" * 10 + "..."
    assert sanitize_string_for_logging(None) == "N/A"
