"""Funkcje czasu: zegar 12h, tygodnie, strefy i terminy przypomnień."""
from datetime import date, datetime

import pytest
import pytz

from apps.core.domain.time_functions import (
    calculate_work_minutes,
    convert_to_12_hour,
    convert_to_24_hour,
    format_week_range,
    get_days_in_month,
    get_local_date,
    get_next_weekly_reminder_utc,
    get_timezone_offset,
    get_week_days_info,
    get_week_range,
    get_week_start,
    is_date_editable,
    is_valid_date,
    parse_iso_date,
)


class TestClock:

    @pytest.mark.parametrize("hour, am_pm, expected", [
        (12, 'AM', 0),
        (1, 'AM', 1),
        (12, 'PM', 12),
        (5, 'PM', 17),
    ])
    def test_convert_to_24_hour(self, hour, am_pm, expected):
        assert convert_to_24_hour(hour, am_pm) == expected

    def test_convert_to_12_hour(self):
        assert convert_to_12_hour(0) == (12, 'AM')
        assert convert_to_12_hour(12) == (12, 'PM')
        assert convert_to_12_hour(17) == (5, 'PM')

    def test_work_minutes_same_day(self):
        assert calculate_work_minutes(9, 0, 'AM', 5, 30, 'PM') == 510

    def test_work_minutes_past_midnight(self):
        assert calculate_work_minutes(10, 0, 'PM', 2, 0, 'AM') == 240


class TestCalendar:

    def test_days_in_february(self):
        assert get_days_in_month(2024, 2) == 29
        assert get_days_in_month(2023, 2) == 28
        assert get_days_in_month(2024, 13) == 31

    def test_is_valid_date(self):
        assert is_valid_date(2024, 2, 29)
        assert not is_valid_date(2023, 2, 29)
        assert not is_valid_date(1899, 1, 1)

    def test_parse_iso_date(self):
        assert parse_iso_date('2024-01-08') == date(2024, 1, 8)
        with pytest.raises(ValueError):
            parse_iso_date('not a date')


class TestWeeks:

    def test_week_starts_on_monday(self):
        assert get_week_start(date(2024, 1, 10)) == date(2024, 1, 8)
        # Niedziela należy do tygodnia, który zaczął się w poniedziałek
        assert get_week_start(date(2024, 1, 14)) == date(2024, 1, 8)

    def test_week_range(self):
        assert get_week_range(date(2024, 1, 10)) == (date(2024, 1, 8), date(2024, 1, 14))

    def test_week_start_uses_local_date(self):
        # Poniedziałek 02:00 UTC to jeszcze niedziela w Nowym Jorku
        moment = pytz.UTC.localize(datetime(2024, 1, 8, 2, 0))
        assert get_week_start(moment, 'UTC') == date(2024, 1, 8)
        assert get_week_start(moment, 'America/New_York') == date(2024, 1, 1)

    def test_week_days_info(self):
        days = get_week_days_info(date(2024, 1, 10), today=date(2024, 1, 10))
        assert [d['day_name_short'] for d in days][:2] == ['Mon', 'Tue']
        assert days[2]['is_today']
        assert days[0]['is_past'] and days[6]['is_future']

    def test_format_week_range(self):
        assert format_week_range(date(2024, 1, 8), date(2024, 1, 14)) == "Jan 8 - Jan 14, 2024"

    def test_is_date_editable(self):
        today = date(2024, 1, 10)
        assert is_date_editable(date(2024, 1, 10), today=today)
        assert not is_date_editable(date(2024, 1, 11), today=today)


class TestTimezones:

    def test_local_date(self):
        moment = pytz.UTC.localize(datetime(2024, 1, 8, 2, 0))
        assert get_local_date(moment, 'Asia/Tokyo') == date(2024, 1, 8)
        assert get_local_date(moment, 'America/Los_Angeles') == date(2024, 1, 7)

    def test_offset_in_minutes(self):
        winter = pytz.UTC.localize(datetime(2024, 1, 15, 12, 0))
        assert get_timezone_offset('America/New_York', winter) == -300
        assert get_timezone_offset('Not/AZone', winter) == 0


class TestNextWeeklyReminder:

    def test_later_this_week(self):
        now = pytz.UTC.localize(datetime(2024, 1, 10, 12, 0))  # środa
        result = get_next_weekly_reminder_utc('friday', 16, 0, 'UTC', now=now)
        assert result == pytz.UTC.localize(datetime(2024, 1, 12, 16, 0))

    def test_converted_to_utc(self):
        now = pytz.UTC.localize(datetime(2024, 1, 10, 12, 0))
        result = get_next_weekly_reminder_utc('friday', 16, 0, 'America/New_York', now=now)
        assert result == pytz.UTC.localize(datetime(2024, 1, 12, 21, 0))

    def test_exact_moment_moves_to_next_week(self):
        now = pytz.UTC.localize(datetime(2024, 1, 12, 16, 0))
        result = get_next_weekly_reminder_utc('friday', 16, 0, 'UTC', now=now)
        assert result == pytz.UTC.localize(datetime(2024, 1, 19, 16, 0))

    def test_same_local_time_across_dst(self):
        # 8 marca 2024 (EST) -> 15 marca 2024 (EDT)
        first = get_next_weekly_reminder_utc(
            'friday', 9, 0, 'America/New_York', now=pytz.UTC.localize(datetime(2024, 3, 7, 12, 0)))
        second = get_next_weekly_reminder_utc('friday', 9, 0, 'America/New_York', now=first)
        assert first.hour == 14
        assert second.hour == 13

    def test_invalid_day(self):
        with pytest.raises(ValueError):
            get_next_weekly_reminder_utc('someday', 9, 0, 'UTC')
