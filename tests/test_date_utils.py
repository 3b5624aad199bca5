"""
Tests for datesequence/utils/date.py

Critical paths: strict YYYY-MM-DD grammar, round trips, shared formatter lifecycle
"""
import threading
from datetime import date, datetime, timedelta, timezone

import pandas as pd
import pytest

from datesequence.conventions import CalendarDate
from datesequence.conventions import CalendarDate
from datesequence.errors import InvalidStringError
from datesequence.utils import date as date_utils
from datesequence.utils.date import (
    DashedDateFormatter,
    format_date,
    parse_date,
    set_shared_formatter,
    shared_formatter,
    to_date,
)


class TestParseDate:
    """Test parsing of dashed date strings"""

    def test_parses_valid_date(self):
        assert parse_date("2018-05-12") == date(2018, 5, 12)

    def test_parses_leap_day(self):
        assert parse_date("2016-02-29") == date(2016, 2, 29)

    @pytest.mark.parametrize(
        "text",
        [
            "2018-13-40",
            "not-a-date",
            "2018-02-30",
            "2017-02-29",
            "2018-00-10",
            "2018-01-00",
            "2018/01/01",
            "20180101",
            "2018-1-1",
            "18-01-01",
            "2018-01-01T00:00:00",
            " 2018-01-01",
            "2018-01-01\n",
            "2018-W01-1",
            "2018-001",
            "",
        ],
    )
    def test_rejects_malformed_text(self, text):
        with pytest.raises(InvalidStringError) as exc_info:
            parse_date(text)
        assert exc_info.value.text == text

    def test_rejects_non_ascii_digits(self):
        with pytest.raises(InvalidStringError):
            parse_date("٢٠١٨-01-01")

    def test_rejects_non_string(self):
        with pytest.raises(InvalidStringError):
            parse_date(20180101)

    def test_invalid_string_is_value_error(self):
        with pytest.raises(ValueError):
            parse_date("2018-13-40")


class TestFormatDate:
    """Test formatting back to dashed strings"""

    def test_formats_zero_padded(self):
        assert format_date(date(2018, 1, 8)) == "2018-01-08"

    def test_formats_small_years_with_four_digits(self):
        assert format_date(date(33, 3, 3)) == "0033-03-03"

    def test_formats_datetime_as_date(self):
        assert format_date(datetime(2018, 1, 8, 23, 59)) == "2018-01-08"

    @pytest.mark.parametrize("text", ["2018-01-01", "2000-02-29", "9999-12-31", "0001-01-01"])
    def test_text_round_trip(self, text):
        assert format_date(parse_date(text)) == text

    def test_date_round_trip_over_a_leap_year(self):
        d = date(2016, 1, 1)
        while d.year == 2016:
            assert parse_date(format_date(d)) == d
            d += timedelta(days=1)


class TestToDate:
    """Test coercion of date-like values"""

    def test_date_passthrough(self):
        assert to_date(date(2018, 1, 1)) == date(2018, 1, 1)

    def test_naive_datetime_drops_time(self):
        assert to_date(datetime(2018, 1, 1, 12, 30)) == date(2018, 1, 1)

    def test_aware_datetime_converted_to_utc(self):
        tz = timezone(timedelta(hours=9))
        assert to_date(datetime(2018, 1, 2, 5, 0, tzinfo=tz)) == date(2018, 1, 1)

    def test_pandas_timestamp(self):
        assert to_date(pd.Timestamp("2018-01-01")) == date(2018, 1, 1)

    def test_aware_pandas_timestamp_converted_to_utc(self):
        ts = pd.Timestamp("2018-01-01 01:00", tz=timezone(timedelta(hours=9)))
        assert to_date(ts) == date(2017, 12, 31)

    def test_string_is_parsed(self):
        assert to_date("2018-01-01") == date(2018, 1, 1)

    def test_calendar_date(self):
        assert to_date(CalendarDate(2018, 1, 1)) == date(2018, 1, 1)

    def test_calendar_date_past_9999(self):
        with pytest.raises(OverflowError):
            to_date(CalendarDate(10000, 1, 1))

    def test_unsupported_type(self):
        with pytest.raises(TypeError):
            to_date(1.5)


class TestSharedFormatter:
    """Test the process-wide formatter"""

    @pytest.fixture(autouse=True)
    def reset_shared(self, monkeypatch):
        monkeypatch.setattr(date_utils, "_SHARED_FORMATTER", None)

    def test_built_lazily_once(self):
        assert date_utils._SHARED_FORMATTER is None
        first = shared_formatter()
        assert isinstance(first, DashedDateFormatter)
        assert shared_formatter() is first

    def test_concurrent_first_use_builds_one_instance(self):
        results = []
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            results.append(shared_formatter())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 8
        assert all(r is results[0] for r in results)

    def test_set_shared_formatter(self, formatter):
        set_shared_formatter(formatter)
        assert shared_formatter() is formatter

    def test_injected_formatter_is_used(self):
        class CountingFormatter(DashedDateFormatter):
            calls = 0

            def format(self, dt):
                CountingFormatter.calls += 1
                return super().format(dt)

        assert format_date(date(2018, 1, 1), CountingFormatter()) == "2018-01-01"
        assert CountingFormatter.calls == 1


class TestDashedDateFormatter:
    """Test formatter instances"""

    def test_format_is_not_configurable(self):
        with pytest.raises(TypeError):
            DashedDateFormatter("{day:02d}/{month:02d}/{year:04d}")

    def test_fresh_instance_round_trips(self):
        fmt = DashedDateFormatter()
        d = date(2018, 1, 2)
        assert fmt.format(d) == "2018-01-02"
        assert fmt.parse(fmt.format(d)) == d

    def test_instances_agree(self, formatter):
        assert formatter.format(date(2018, 1, 2)) == shared_formatter().format(date(2018, 1, 2))

    def test_formats_calendar_date_past_9999(self, formatter):
        assert formatter.format(CalendarDate(12018, 1, 1)) == "12018-01-01"
        assert format_date(CalendarDate(12018, 1, 1)) == "12018-01-01"

    def test_five_digit_years_do_not_parse(self, formatter):
        with pytest.raises(InvalidStringError):
            formatter.parse("12018-01-01")
