"""Tests for phone number normalization (E.164) used in duplicate detection."""

import pytest

from addressbook.infrastructure.phone import comparable_phone, normalize_phone


@pytest.mark.parametrize(
    "raw, region, expected",
    [
        ("+1 202 555 1234", None, "+12025551234"),
        ("  +12025551234  ", None, "+12025551234"),
        ("+12025551234", "IT", "+12025551234"),
        ("2025551234", "US", "+12025551234"),
        ("312 345 6789", "IT", "+393123456789"),
    ],
)
def test_normalize_valid_numbers(raw, region, expected):
    assert normalize_phone(raw, default_region=region) == expected


@pytest.mark.parametrize(
    "raw, region",
    [
        ("", None),
        ("   ", None),
        ("abc", None),
        ("+1", None),
        ("123", "US"),
        ("2025551234", None),
    ],
)
def test_normalize_invalid_returns_none(raw, region):
    assert normalize_phone(raw, default_region=region) is None


def test_comparable_phone_falls_back_to_raw_digits():
    assert comparable_phone("2025551234", default_region="US") == "+12025551234"
    assert comparable_phone("98765432", default_region=None) == "98765432"
    assert comparable_phone(" 123 ", default_region="US") == "123"
