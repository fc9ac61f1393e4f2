import pytz

from apps.core.domain.timezones import TIMEZONE_CHOICES, TIMEZONES, find_timezone


def test_all_timezones_are_known_to_pytz():
    unknown = [tz.value for tz in TIMEZONES if tz.value not in pytz.all_timezones_set]
    assert unknown == []


def test_values_are_unique():
    values = [tz.value for tz in TIMEZONES]
    assert len(values) == len(set(values))


def test_choices_follow_table():
    assert len(TIMEZONE_CHOICES) == len(TIMEZONES)
    assert ('UTC', find_timezone('UTC').label) in TIMEZONE_CHOICES


def test_find_timezone():
    assert find_timezone('Europe/Warsaw') is not None
    assert find_timezone('Mars/Olympus_Mons') is None
