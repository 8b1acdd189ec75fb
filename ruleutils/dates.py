from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Dict, Optional, Tuple

from .utils.time import align, now_like, start_of_week

logger = logging.getLogger(__name__)

LABELS: Dict[str, Dict[str, object]] = {
    "en": {
        "today": "today at {time}",
        "tomorrow": "tomorrow at {time}",
        "within_six_days": "on {weekday} at {time}",
        "next_week": "next week on {weekday} at {time}",
        "fallback": "on {weekday}, {date} at {time}",
        "weekdays": ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"),
    },
    "de": {
        "today": "heute um {time}",
        "tomorrow": "morgen um {time}",
        "within_six_days": "am {weekday} um {time}",
        "next_week": "nächste Woche am {weekday} um {time}",
        "fallback": "am {weekday}, {date} um {time}",
        "weekdays": ("Montag", "Dienstag", "Mittwoch", "Donnerstag", "Freitag", "Samstag", "Sonntag"),
    },
}


def log_format_datetime(date: Optional[datetime] = None) -> str:
    """Return ``date`` as ``[YYYY-MM-DD hh:mm:ss]`` (24-hour clock)."""
    date = date or datetime.now()
    return f"[{date.year:04d}-{date.month:02d}-{date.day:02d} {date.hour:02d}:{date.minute:02d}:{date.second:02d}]"


def _resolve(date: Optional[datetime], now: Optional[datetime]) -> Tuple[datetime, datetime]:
    if date is None:
        date = now or datetime.now()
    if now is None:
        now = now_like(date)
    return align(date, now), now


def _day_offset(date: Optional[datetime], now: Optional[datetime]) -> int:
    date, now = _resolve(date, now)
    return (date.date() - now.date()).days


def is_today(date: Optional[datetime] = None, now: Optional[datetime] = None) -> bool:
    return _day_offset(date, now) == 0


def is_tomorrow(date: Optional[datetime] = None, now: Optional[datetime] = None) -> bool:
    return _day_offset(date, now) == 1


def is_within_next_six_days(date: Optional[datetime] = None, now: Optional[datetime] = None) -> bool:
    """True when ``date`` falls between today 00:00 and the end of the sixth day after today."""
    return 0 <= _day_offset(date, now) <= 6


def is_next_week(date: Optional[datetime] = None, now: Optional[datetime] = None) -> bool:
    """True when ``date`` falls in the Monday-to-Sunday week after the current one."""
    date, now = _resolve(date, now)
    begin = start_of_week(now) + timedelta(days=7)
    end = begin + timedelta(days=7)
    return begin.date() <= date.date() < end.date()


def _labels(locale: Optional[str]) -> Dict[str, object]:
    lang = (locale or "en").replace("_", "-").split("-")[0].lower()
    if lang not in LABELS:
        logger.debug("No date labels for locale %r; using en", locale)
        return LABELS["en"]
    return LABELS[lang]


def human_friendly_format_date(
    date: Optional[datetime] = None,
    locale: Optional[str] = None,
    now: Optional[datetime] = None,
) -> str:
    """Describe ``date`` relative to now, e.g. ``tomorrow at 07:30``.

    The first matching phrasing wins: today, tomorrow, within the next six days,
    next week, and finally weekday plus ISO date.
    """
    date, now = _resolve(date, now)
    labels = _labels(locale)
    weekday = labels["weekdays"][date.weekday()]  # type: ignore[index]
    values = {
        "time": f"{date.hour:02d}:{date.minute:02d}",
        "weekday": weekday,
        "date": date.strftime("%Y-%m-%d"),
    }

    if is_today(date, now):
        key = "today"
    elif is_tomorrow(date, now):
        key = "tomorrow"
    elif is_within_next_six_days(date, now):
        key = "within_six_days"
    elif is_next_week(date, now):
        key = "next_week"
    else:
        key = "fallback"
    return str(labels[key]).format(**values)


def get_time_of_day_string(date: Optional[datetime] = None, delay_sec: Optional[float] = None) -> str:
    date = date or datetime.now()
    if delay_sec is not None and delay_sec > 0:
        date = date + timedelta(seconds=delay_sec)
    return f"{date.hour:02d}:{date.minute:02d}"


def _parse_time_of_day(value: object) -> Optional[Tuple[int, int]]:
    if not isinstance(value, str):
        return None
    parts = value.split(":")
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def time_of_day_string_comp(time_string1: str, time_string2: str) -> int:
    """Compare two ``hh:mm`` strings: -1 if the first is earlier, 1 if later, 0 if equal.

    Unparseable input never compares equal or earlier, so it yields 1.
    """
    t1 = _parse_time_of_day(time_string1)
    t2 = _parse_time_of_day(time_string2)
    if t1 is None or t2 is None:
        logger.warning("Cannot compare time of day strings %r and %r", time_string1, time_string2)
        return 1
    if t1 == t2:
        return 0
    return -1 if t1 < t2 else 1


def time_of_day_is_in_period(period: Optional[str], date: Optional[datetime] = None) -> bool:
    """True when the hour:minute of ``date`` lies within ``hh:mm-hh:mm``, bounds included."""
    if period is None:
        return False
    bounds = period.split("-")
    if len(bounds) != 2:
        return False
    start = _parse_time_of_day(bounds[0])
    end = _parse_time_of_day(bounds[1])
    if start is None or end is None:
        return False

    date = date or datetime.now()
    current = (date.hour, date.minute)
    return start <= current <= end
