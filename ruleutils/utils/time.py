from __future__ import annotations

from datetime import datetime, timedelta


def now_like(reference: datetime) -> datetime:
    """Current time with the same awareness (and zone) as ``reference``."""
    if reference.tzinfo is None:
        return datetime.now()
    return datetime.now(tz=reference.tzinfo)


def align(date: datetime, now: datetime) -> datetime:
    if date.tzinfo is not None and now.tzinfo is not None:
        return date.astimezone(now.tzinfo)
    if date.tzinfo is not None:
        return date.astimezone().replace(tzinfo=None)
    if now.tzinfo is not None:
        return date.replace(tzinfo=now.tzinfo)
    return date


def midnight(dt: datetime) -> datetime:
    return dt.replace(hour=0, minute=0, second=0, microsecond=0)


def start_of_week(dt: datetime) -> datetime:
    return midnight(dt) - timedelta(days=dt.weekday())
