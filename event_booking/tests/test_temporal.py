"""
Test date and time normalization.
"""
import locale

import pytest

from event_booking.core.errors import FormatError
from event_booking.services.temporal import normalize_date, normalize_time


class TestNormalizeTime:
    """Test the HH:mm time normalizer."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("21:30", "21:30"),
            ("9:00", "09:00"),
            ("00:05", "00:05"),
            ("  23:59 ", "23:59"),
        ],
    )
    def test_24_hour_input(self, value: str, expected: str):
        assert normalize_time(value) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("9:00 AM", "09:00"),
            ("12:00 AM", "00:00"),
            ("12:00 PM", "12:00"),
            ("12:30am", "00:30"),
            ("9:05pm", "21:05"),
            ("11:59 Pm", "23:59"),
        ],
    )
    def test_12_hour_input(self, value: str, expected: str):
        assert normalize_time(value) == expected

    def test_falls_back_to_iso_time_parsing(self):
        assert normalize_time("09:15:30") == "09:15"
        assert normalize_time("18:45:00.000") == "18:45"

    def test_fallback_keeps_wall_clock_time_when_offset_given(self):
        assert normalize_time("10:00+02:00") == "10:00"
        assert normalize_time("23:30:00Z") == "23:30"

    def test_fallback_accepts_compact_iso_times(self):
        assert normalize_time("0900") == "09:00"
        assert normalize_time("09") == "09:00"
        assert normalize_time("1745") == "17:45"

    @pytest.mark.parametrize("value", ["13:00 AM", "24:00", "noon", "", "9 o'clock", "0:00 PM"])
    def test_invalid_time_raises(self, value: str):
        with pytest.raises(FormatError):
            normalize_time(value)


class TestNormalizeDate:
    """Test the ISO date normalizer."""

    def test_iso_date(self):
        result = normalize_date("2026-06-10")
        assert result == "2026-06-10T00:00:00.000Z"
        assert result.split("T")[0] == "2026-06-10"

    def test_iso_timestamp_with_offset_converted_to_utc(self):
        assert normalize_date("2026-06-10T09:30:00+02:00") == "2026-06-10T07:30:00.000Z"

    def test_zulu_timestamp(self):
        assert normalize_date("2026-06-10T09:30:00.250Z") == "2026-06-10T09:30:00.250Z"

    @pytest.mark.parametrize(
        "value",
        [
            "June 10, 2026",
            "Jun 10, 2026",
            "june 10 2026",
            "JUN. 10, 2026",
            "10 June 2026",
            "06/10/2026",
            "2026/06/10",
        ],
    )
    def test_written_forms(self, value: str):
        assert normalize_date(value) == "2026-06-10T00:00:00.000Z"

    def test_written_forms_ignore_process_locale(self):
        previous = locale.setlocale(locale.LC_TIME)
        try:
            locale.setlocale(locale.LC_TIME, "de_DE.UTF-8")
        except locale.Error:
            pytest.skip("de_DE.UTF-8 locale not installed")
        try:
            assert normalize_date("June 10, 2026") == "2026-06-10T00:00:00.000Z"
            assert normalize_date("Sept 3 2026") == "2026-09-03T00:00:00.000Z"
        finally:
            locale.setlocale(locale.LC_TIME, previous)

    @pytest.mark.parametrize(
        "value",
        [
            "not-a-date",
            "2026-02-30",
            "June 10-12, 2026",
            "",
            "February 30, 2026",
            "Juneteenth 10, 2026",
            "0001-01-01T00:00:00+01:00",
            "9999-12-31T23:59:00-01:00",
        ],
    )
    def test_invalid_date_raises(self, value: str):
        with pytest.raises(FormatError):
            normalize_date(value)
