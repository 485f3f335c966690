"""
Tests for time conversion helpers.
"""

import pytest

from app.utils.time_converter import (
    InvalidScheduleSlot,
    InvalidTimeFormat,
    convert_hour_to_minutes,
    convert_minutes_to_hour,
    convert_schedule_slot,
)


class TestConvertHourToMinutes:
    """Tests for convert_hour_to_minutes."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("00:00", 0),
            ("08:00", 480),
            ("9:30", 570),
            ("23:59", 1439),
            (" 10:15 ", 615),
        ],
    )
    def test_valid_times(self, value, expected):
        assert convert_hour_to_minutes(value) == expected

    @pytest.mark.parametrize("value", ["", "8", "8h", "08:5", "24:00", "12:60", "25:00", "-1:00", "ab:cd"])
    def test_invalid_times(self, value):
        with pytest.raises(InvalidTimeFormat):
            convert_hour_to_minutes(value)

    def test_non_ascii_digits_are_rejected(self):
        with pytest.raises(InvalidTimeFormat):
            convert_hour_to_minutes("\u0660\u0669:\u0663\u0660")

    def test_non_string_is_rejected(self):
        with pytest.raises(InvalidTimeFormat):
            convert_hour_to_minutes(480)

    def test_end_of_day_only_when_allowed(self):
        assert convert_hour_to_minutes("24:00", allow_end_of_day=True) == 1440
        with pytest.raises(InvalidTimeFormat):
            convert_hour_to_minutes("24:01", allow_end_of_day=True)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            convert_hour_to_minutes("noon")


def test_convert_minutes_to_hour():
    assert convert_minutes_to_hour(0) == "00:00"
    assert convert_minutes_to_hour(570) == "09:30"
    assert convert_minutes_to_hour(1440) == "24:00"


class TestConvertScheduleSlot:
    """Tests for convert_schedule_slot."""

    def test_converts_to_row(self):
        assert convert_schedule_slot(1, "08:00", "10:00") == {"week_day": 1, "from_": 480, "to": 600}

    def test_accepts_numeric_string_week_day(self):
        assert convert_schedule_slot("6", "22:00", "24:00") == {"week_day": 6, "from_": 1320, "to": 1440}

    @pytest.mark.parametrize("week_day", [-1, 7, "x", None, True, "\u0661"])
    def test_week_day_out_of_range(self, week_day):
        with pytest.raises(InvalidScheduleSlot):
            convert_schedule_slot(week_day, "08:00", "10:00")

    @pytest.mark.parametrize("time_from, time_to", [("10:00", "10:00"), ("11:00", "10:00")])
    def test_empty_or_inverted_interval(self, time_from, time_to):
        with pytest.raises(InvalidScheduleSlot):
            convert_schedule_slot(1, time_from, time_to)

    def test_start_cannot_be_end_of_day(self):
        with pytest.raises(InvalidTimeFormat):
            convert_schedule_slot(1, "24:00", "24:00")
