"""Tests for text, id, and date display helpers."""

from datetime import UTC, datetime, timedelta
from uuid import UUID

import pytest

from recipekit.domain.dates import display_format, relative_format, short_date_format
from recipekit.domain.ids import ZERO_UUID, format_uuid, parse_uuid
from recipekit.domain.text import is_blank, is_valid_email, trimmed
from recipekit.domain.wire import parse_utc


class TestText:
    @pytest.mark.parametrize("value,expected", [("", True), ("  \n\t", True), (" a ", False)])
    def test_is_blank(self, value: str, expected: bool) -> None:
        assert is_blank(value) is expected

    def test_trimmed(self) -> None:
        assert trimmed("  Soup \n") == "Soup"

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("john.doe@example.com", True),
            ("a+tag@sub.domain.org", True),
            ("no-at-sign.com", False),
            ("missing@tld", False),
            ("", False),
        ],
    )
    def test_is_valid_email(self, value: str, expected: bool) -> None:
        assert is_valid_email(value) is expected


class TestIds:
    def test_parse_valid(self) -> None:
        assert parse_uuid("550e8400-e29b-41d4-a716-446655440000") == UUID(
            "550e8400-e29b-41d4-a716-446655440000"
        )

    def test_parse_invalid(self) -> None:
        assert parse_uuid("not-a-uuid") is None

    def test_zero(self) -> None:
        assert str(ZERO_UUID) == "00000000-0000-0000-0000-000000000000"

    def test_format_upper(self) -> None:
        value = UUID("550e8400-e29b-41d4-a716-446655440000")
        assert format_uuid(value) == "550E8400-E29B-41D4-A716-446655440000"


class TestDates:
    stamp = datetime(2024, 1, 14, 10, 30, tzinfo=UTC)

    def test_short_date(self) -> None:
        assert short_date_format(self.stamp) == "Jan 14, 2024"

    def test_display(self) -> None:
        assert display_format(self.stamp) == "Jan 14, 2024 at 10:30 AM"

    def test_display_pm_and_midnight(self) -> None:
        assert display_format(self.stamp.replace(hour=15, minute=5)).endswith("3:05 PM")
        assert display_format(self.stamp.replace(hour=0, minute=0)).endswith("12:00 AM")

    @pytest.mark.parametrize(
        "delta,expected",
        [
            (timedelta(seconds=0), "just now"),
            (timedelta(seconds=30), "30 seconds ago"),
            (timedelta(minutes=1), "1 minute ago"),
            (timedelta(minutes=5), "5 minutes ago"),
            (timedelta(hours=1), "1 hour ago"),
            (timedelta(days=3), "3 days ago"),
            (timedelta(days=14), "2 weeks ago"),
            (timedelta(days=60), "2 months ago"),
            (timedelta(days=365), "1 year ago"),
            (timedelta(days=800), "2 years ago"),
        ],
    )
    def test_relative(self, delta: timedelta, expected: str) -> None:
        assert relative_format(self.stamp - delta, now=self.stamp) == expected

    def test_relative_naive_treated_as_utc(self) -> None:
        naive = datetime(2024, 1, 14, 10, 0)
        assert relative_format(naive, now=self.stamp) == "30 minutes ago"


class TestParseUtc:
    def test_offset_normalized(self) -> None:
        assert parse_utc("2024-01-01T02:00:00.5+02:00") == datetime(2024, 1, 1, tzinfo=UTC)

    @pytest.mark.parametrize("value", ["0001-01-01T00:00:00+01:00", "9999-12-31T23:59:59-01:00"])
    def test_out_of_range_after_conversion(self, value: str) -> None:
        with pytest.raises(ValueError, match="out of range"):
            parse_utc(value)
