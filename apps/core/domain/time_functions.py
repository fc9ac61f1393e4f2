# apps/core/domain/time_functions.py
import calendar
import logging
from datetime import date, datetime, time, timedelta
from typing import List, Optional, Tuple

import pytz
from dateutil import parser as date_parser
from dateutil.rrule import rrule, WEEKLY, MO, TU, WE, TH, FR, SA, SU

logger = logging.getLogger(__name__)

MONTH_NAMES = [
    'January', 'February', 'March', 'April', 'May', 'June',
    'July', 'August', 'September', 'October', 'November', 'December',
]
DAY_NAMES = ['Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday', 'Sunday']

# Mapowanie nazw dni na obiekty dateutil
WEEKDAY_MAP = {
    'monday': MO, 'tuesday': TU, 'wednesday': WE, 'thursday': TH,
    'friday': FR, 'saturday': SA, 'sunday': SU,
}

MIN_YEAR = 1900
MAX_YEAR = 2100


# ---------------------------------------------------------------------------
# Zegar 12/24h
# ---------------------------------------------------------------------------

def convert_to_24_hour(hour: int, am_pm: str) -> int:
    """12 AM -> 0, 12 PM -> 12, 1 PM -> 13."""
    if am_pm == 'AM':
        return 0 if hour == 12 else hour
    return 12 if hour == 12 else hour + 12


def convert_to_12_hour(hour24: int) -> Tuple[int, str]:
    if hour24 == 0:
        return 12, 'AM'
    if hour24 == 12:
        return 12, 'PM'
    if hour24 > 12:
        return hour24 - 12, 'PM'
    return hour24, 'AM'


def calculate_work_minutes(start_hour: int, start_minute: int, start_am_pm: str,
                           end_hour: int, end_minute: int, end_am_pm: str) -> int:
    """Minuty między startem a końcem. Koniec przed startem = praca przez północ."""
    start = convert_to_24_hour(start_hour, start_am_pm) * 60 + start_minute
    end = convert_to_24_hour(end_hour, end_am_pm) * 60 + end_minute

    total = end - start
    if total < 0:
        total += 24 * 60
    return max(0, total)


# ---------------------------------------------------------------------------
# Kalendarz
# ---------------------------------------------------------------------------

def is_leap_year(year: int) -> bool:
    return calendar.isleap(year)


def get_days_in_month(year: int, month: int) -> int:
    if month < 1 or month > 12:
        return 31
    return calendar.monthrange(year, month)[1]


def is_valid_date(year: int, month: int, day: int) -> bool:
    if year < MIN_YEAR or year > MAX_YEAR:
        return False
    if month < 1 or month > 12:
        return False
    return 1 <= day <= get_days_in_month(year, month)


def get_year_options(start_year: int = MIN_YEAR, end_year: Optional[int] = None) -> List[dict]:
    """Lata malejąco (najnowszy pierwszy), domyślnie do bieżącego roku + 10."""
    if end_year is None:
        end_year = date.today().year + 10
    return [{'value': y, 'label': str(y)} for y in range(end_year, start_year - 1, -1)]


def get_month_options() -> List[dict]:
    return [{'value': i, 'label': name} for i, name in enumerate(MONTH_NAMES, start=1)]


def get_day_options(year: int, month: int) -> List[dict]:
    return [{'value': d, 'label': str(d)} for d in range(1, get_days_in_month(year, month) + 1)]


def parse_iso_date(value) -> date:
    """'2024-01-08' -> date. Rzuca ValueError dla złego formatu."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date_parser.isoparse(str(value)).date()
    except (ValueError, OverflowError):
        raise ValueError(f"Invalid date: {value!r}")


# ---------------------------------------------------------------------------
# Strefy czasowe
# ---------------------------------------------------------------------------

def resolve_timezone(tz_name: Optional[str]):
    """Zwraca strefę pytz; nieznana lub pusta nazwa -> UTC."""
    if not tz_name:
        return pytz.UTC
    try:
        return pytz.timezone(tz_name)
    except pytz.UnknownTimeZoneError:
        logger.warning("Unknown timezone %r, falling back to UTC", tz_name)
        return pytz.UTC


def _aware(moment: Optional[datetime]) -> datetime:
    if moment is None:
        return datetime.now(pytz.UTC)
    if moment.tzinfo is None:
        return pytz.UTC.localize(moment)
    return moment


def get_timezone_offset(tz_name: str, at: Optional[datetime] = None) -> int:
    """Przesunięcie strefy względem UTC w minutach (0 dla nieznanej strefy)."""
    try:
        tz = pytz.timezone(tz_name)
    except pytz.UnknownTimeZoneError:
        return 0
    offset = _aware(at).astimezone(tz).utcoffset()
    return int(offset.total_seconds() // 60)


def get_local_date(moment: Optional[datetime] = None, tz_name: Optional[str] = None) -> date:
    return _aware(moment).astimezone(resolve_timezone(tz_name)).date()


def get_start_of_day_in_timezone(moment: datetime, tz_name: Optional[str]) -> datetime:
    tz = resolve_timezone(tz_name)
    local_day = _aware(moment).astimezone(tz).date()
    return tz.localize(datetime.combine(local_day, time.min))


def get_end_of_day_in_timezone(moment: datetime, tz_name: Optional[str]) -> datetime:
    tz = resolve_timezone(tz_name)
    local_day = _aware(moment).astimezone(tz).date()
    return tz.localize(datetime.combine(local_day, time.max))


def get_today_in_timezone(tz_name: Optional[str], now: Optional[datetime] = None) -> datetime:
    return get_start_of_day_in_timezone(_aware(now), tz_name)


def get_tomorrow_in_timezone(tz_name: Optional[str], now: Optional[datetime] = None) -> datetime:
    tz = resolve_timezone(tz_name)
    tomorrow = get_local_date(now, tz_name) + timedelta(days=1)
    return tz.localize(datetime.combine(tomorrow, time.min))


def is_same_day(first: datetime, second: datetime, tz_name: Optional[str] = None) -> bool:
    return get_local_date(first, tz_name) == get_local_date(second, tz_name)


def is_date_before(first: datetime, second: datetime) -> bool:
    return _aware(first) < _aware(second)


def is_date_after(first: datetime, second: datetime) -> bool:
    return _aware(first) > _aware(second)


# ---------------------------------------------------------------------------
# Tygodnie (poniedziałek - niedziela)
# ---------------------------------------------------------------------------

def _as_day(moment, tz_name: Optional[str] = None) -> date:
    if isinstance(moment, datetime):
        if moment.tzinfo is None and not tz_name:
            return moment.date()
        return get_local_date(moment, tz_name)
    if isinstance(moment, date):
        return moment
    return get_local_date(None, tz_name)


def get_week_start(moment=None, tz_name: Optional[str] = None) -> date:
    """Poniedziałek tygodnia, w którym wypada `moment` (w strefie użytkownika)."""
    day = _as_day(moment, tz_name)
    return day - timedelta(days=day.weekday())


def get_week_range(moment=None, tz_name: Optional[str] = None) -> Tuple[date, date]:
    start = get_week_start(moment, tz_name)
    return start, start + timedelta(days=6)


def get_week_end(week_start: date) -> date:
    return week_start + timedelta(days=6)


def get_current_week(moment=None, tz_name: Optional[str] = None) -> dict:
    start, end = get_week_range(moment, tz_name)
    return {
        'start_date': start,
        'end_date': end,
        'week_days': [start + timedelta(days=i) for i in range(7)],
    }


def get_week_days_info(moment=None, today: Optional[date] = None, tz_name: Optional[str] = None) -> List[dict]:
    if today is None:
        today = get_local_date(None, tz_name)

    days = []
    for day in get_current_week(moment, tz_name)['week_days']:
        days.append({
            'date': day,
            'day_name': DAY_NAMES[day.weekday()],
            'day_name_short': DAY_NAMES[day.weekday()][:3],
            'date_string': format_date_for_db(day),
            'is_today': day == today,
            'is_past': day < today,
            'is_future': day > today,
        })
    return days


def format_date_for_db(day) -> str:
    return _as_day(day).isoformat()


def format_date_for_display(day) -> str:
    day = _as_day(day)
    return f"{MONTH_NAMES[day.month - 1][:3]} {day.day}"


def format_week_range(start, end) -> str:
    end_day = _as_day(end)
    return f"{format_date_for_display(start)} - {format_date_for_display(end_day)}, {end_day.year}"


def is_date_editable(day, today: Optional[date] = None) -> bool:
    """Można edytować dziś i przeszłość, przyszłości nie."""
    if today is None:
        today = date.today()
    return _as_day(day) <= today


# ---------------------------------------------------------------------------
# Przypomnienia tygodniowe
# ---------------------------------------------------------------------------

def get_next_weekly_reminder_utc(day: str, hour: int, minute: int, tz_name: Optional[str],
                                 now: Optional[datetime] = None) -> datetime:
    """
    Najbliższe wystąpienie (ściśle po `now`) dnia tygodnia o godzinie hour:minute
    czasu lokalnego użytkownika, zwrócone w UTC.
    """
    weekday = WEEKDAY_MAP.get(str(day).lower())
    if weekday is None:
        raise ValueError(f"Invalid weekday: {day!r}")

    tz = resolve_timezone(tz_name)
    local_now = _aware(now).astimezone(tz).replace(tzinfo=None, microsecond=0)

    rule = rrule(
        WEEKLY,
        byweekday=weekday,
        byhour=hour,
        byminute=minute,
        bysecond=0,
        dtstart=local_now,
    )
    next_local = rule.after(local_now, inc=False)
    return tz.localize(next_local).astimezone(pytz.UTC)
