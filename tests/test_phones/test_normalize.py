"""Tests for phone normalization."""

import pytest

from hawksoft_sync.phones.normalize import normalize_phone


def test_ten_digits():
    assert normalize_phone("5037777777") == "(503) 777-7777"


def test_eleven_digits_with_country_code():
    assert normalize_phone("15037777777") == "(503) 777-7777"


def test_punctuation_is_stripped():
    assert normalize_phone("+1 (503) 777-7777") == "(503) 777-7777"
    assert normalize_phone("503.777.7777") == "(503) 777-7777"


def test_unparseable_returned_unchanged():
    assert normalize_phone("123") == "123"
    assert normalize_phone("25037777777") == "25037777777"
    assert normalize_phone("503-777-7777 x12") == "503-777-7777 x12"


@pytest.mark.parametrize("raw", [None, "", "   ", "\t\n"])
def test_blank_is_none(raw):
    assert normalize_phone(raw) is None


def test_non_ascii_digits_are_not_digits():
    raw = "٥٠٣٧٧٧٧٧٧٧"
    assert normalize_phone(raw) == raw
