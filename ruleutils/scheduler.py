from __future__ import annotations

import logging
import math
from datetime import datetime, timedelta
from typing import Callable, Protocol

from apscheduler.executors.pool import ThreadPoolExecutor
from apscheduler.schedulers.background import BackgroundScheduler

from .settings import AppSettings

logger = logging.getLogger(__name__)

MAX_DELAY_SECONDS = 10 * 365 * 24 * 3600.0


class Deferrer(Protocol):
    """Runs an action once, no earlier than ``delay_seconds`` from now."""

    def after(self, delay_seconds: float, action: Callable[[], None]) -> None:
        ...


def coerce_delay(value: object) -> float:
    """Seconds to wait; non-numeric, NaN and negative values mean "now"."""
    try:
        delay = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        logger.warning("Non-numeric delay %r treated as 0", value)
        return 0.0
    if math.isnan(delay) or delay < 0:
        return 0.0
    return min(delay, MAX_DELAY_SECONDS)


class ApschedulerDeferrer:
    """One-shot ``date`` jobs on an APScheduler background scheduler.

    Jobs are fire-and-forget: ids are generated by APScheduler, no handle is
    returned and a late job still runs (``misfire_grace_time=None``) instead of
    being dropped.
    """

    def __init__(self, scheduler: BackgroundScheduler) -> None:
        self.scheduler = scheduler

    def after(self, delay_seconds: float, action: Callable[[], None]) -> None:
        delay = coerce_delay(delay_seconds)
        run_date = datetime.now(tz=self.scheduler.timezone) + timedelta(seconds=delay)
        job = self.scheduler.add_job(action, "date", run_date=run_date, misfire_grace_time=None)
        logger.debug("Deferred job %s by %.3fs", job.id, delay)


def build_scheduler(settings: AppSettings) -> BackgroundScheduler:
    executors = {"default": ThreadPoolExecutor(settings.scheduler_max_workers)}
    return BackgroundScheduler(timezone=settings.tz, executors=executors)
