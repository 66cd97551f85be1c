"""Date and time input handling tests."""

import logging
from datetime import date, datetime, timedelta, timezone

import pytest

from solar_zenith.controls import (
    combine,
    format_date_value,
    format_time_value,
    now,
    parse_date,
    parse_time,
    shift_days,
    with_date,
    with_time,
)

UTC = timezone.utc


class TestParseDate:
    def test_valid(self):
        assert parse_date("2026-03-21") == date(2026, 3, 21)

    def test_surrounding_whitespace(self):
        assert parse_date(" 2024-02-29 ") == date(2024, 2, 29)

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "2026/03/21",
            "21-03-2026",
            "2026-02-29",
            "2026-13-01",
            "tomorrow",
            "2026-3-5",
            # Arabic-Indic digits
            "\u0662\u0660\u0662\u0666-\u0660\u0663-\u0662\u0661",
        ],
    )
    def test_invalid(self, text):
        with pytest.raises(ValueError, match="Invalid date"):
            parse_date(text)

    def test_invalid_is_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="solar_zenith.controls"):
            with pytest.raises(ValueError):
                parse_date("not a date")
        assert "rejected date input" in caplog.text


class TestParseTime:
    @pytest.mark.parametrize(
        "text,expected",
        [("00:00", (0, 0)), ("12:30", (12, 30)), ("23:59", (23, 59)), ("7:05", (7, 5))],
    )
    def test_valid(self, text, expected):
        assert parse_time(text) == expected

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "24:00",
            "12:60",
            "12",
            "12:5",
            "noon",
            "12:00:00",
            "-1:00",
            # Arabic-Indic digits
            "\u0661\u0662:\u0663\u0660",
        ],
    )
    def test_invalid(self, text):
        with pytest.raises(ValueError, match="Invalid time"):
            parse_time(text)


class TestCombine:
    def test_builds_utc_instant(self):
        assert combine("2026-06-21", "03:45") == datetime(2026, 6, 21, 3, 45, tzinfo=UTC)

    def test_rejects_bad_half(self):
        with pytest.raises(ValueError):
            combine("2026-06-21", "3pm")


class TestWithDateAndTime:
    def test_with_date_keeps_time(self):
        instant = datetime(2026, 1, 1, 18, 20, tzinfo=UTC)
        assert with_date(instant, "2026-07-04") == datetime(2026, 7, 4, 18, 20, tzinfo=UTC)

    def test_with_time_keeps_date(self):
        instant = datetime(2026, 1, 1, 18, 20, 42, tzinfo=UTC)
        assert with_time(instant, "06:05") == datetime(2026, 1, 1, 6, 5, tzinfo=UTC)

    def test_with_time_uses_utc_date(self):
        # 22:00 at UTC-3 is 01:00 the next day in UTC
        local = datetime(2026, 5, 1, 22, 0, tzinfo=timezone(timedelta(hours=-3)))
        assert with_time(local, "12:00") == datetime(2026, 5, 2, 12, 0, tzinfo=UTC)


class TestShiftDays:
    def test_next_day(self):
        instant = datetime(2026, 12, 31, 23, 30, tzinfo=UTC)
        assert shift_days(instant, 1) == datetime(2027, 1, 1, 23, 30, tzinfo=UTC)

    def test_previous_day(self):
        instant = datetime(2024, 3, 1, 10, 0, tzinfo=UTC)
        assert shift_days(instant, -1) == datetime(2024, 2, 29, 10, 0, tzinfo=UTC)


class TestNow:
    def test_truncated_utc(self):
        current = now()
        assert current.tzinfo == UTC
        assert current.second == 0
        assert current.microsecond == 0


class TestFormatValues:
    def test_round_trip_through_combine(self):
        instant = datetime(2026, 9, 22, 4, 7, tzinfo=UTC)
        assert combine(format_date_value(instant), format_time_value(instant)) == instant

    def test_formats_utc_fields(self):
        local = datetime(2026, 5, 1, 22, 0, tzinfo=timezone(timedelta(hours=-3)))
        assert format_date_value(local) == "2026-05-02"
        assert format_time_value(local) == "01:00"

    @pytest.mark.parametrize(
        "instant",
        [
            datetime(999, 5, 1, 6, 30, tzinfo=UTC),
            datetime(1, 1, 1, 0, 0, tzinfo=UTC),
            datetime(9999, 12, 31, 23, 59, tzinfo=UTC),
        ],
    )
    def test_round_trip_at_range_edges(self, instant):
        assert combine(format_date_value(instant), format_time_value(instant)) == instant

    def test_early_year_is_zero_padded(self):
        assert format_date_value(datetime(999, 5, 1, tzinfo=UTC)) == "0999-05-01"
