from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Hashable, Optional

from apscheduler.schedulers.background import BackgroundScheduler

from . import dates
from .scheduler import ApschedulerDeferrer, Deferrer, build_scheduler
from .settings import AppSettings, load_settings
from .storage.barrier_store import BarrierStore
from .storage.cache import Cache, InMemoryCache
from .utils.env import load_environment
from .utils.logging import configure_logging
from .utils.throttle import ThrottleBarrier

logger = logging.getLogger(__name__)


class Runtime:
    """Wires the barrier to its cache and deferrer for embedding rule scripts.

    Without an injected deferrer the runtime owns a background scheduler, which
    must be started before deferred clears fire.
    """

    def __init__(
        self,
        settings: AppSettings,
        cache: Optional[Cache] = None,
        deferrer: Optional[Deferrer] = None,
    ) -> None:
        self.settings = settings
        self.cache: Cache = cache if cache is not None else InMemoryCache()
        self.scheduler: BackgroundScheduler | None = None
        if deferrer is None:
            self.scheduler = build_scheduler(settings)
            deferrer = ApschedulerDeferrer(self.scheduler)
        self.deferrer = deferrer
        self.store = BarrierStore(self.cache)
        self.barrier = ThrottleBarrier(self.store, self.deferrer)

    def start(self) -> None:
        if self.scheduler is not None and not self.scheduler.running:
            self.scheduler.start()
            logger.info("Runtime scheduler started in %s", self.settings.tz)

    def shutdown(self, wait: bool = False) -> None:
        if self.scheduler is not None and self.scheduler.running:
            self.scheduler.shutdown(wait=wait)
            logger.info("Runtime scheduler stopped")

    def throttle_barrier(self, map_name: Hashable, name: Hashable, limit_sec: Optional[float] = None) -> bool:
        if limit_sec is None:
            limit_sec = self.settings.default_throttle_seconds
        return self.barrier.acquire(map_name, name, limit_sec)

    def throttle_barrier_cancel(self, map_name: Hashable, name: Hashable) -> None:
        self.barrier.cancel(map_name, name)

    def human_friendly_format_date(self, date: Optional[datetime] = None, now: Optional[datetime] = None) -> str:
        if now is None:
            now = datetime.now(tz=self.settings.zone)
        return dates.human_friendly_format_date(date, self.settings.locale, now)


def bootstrap(dotenv_path: Optional[str] = None) -> Runtime:
    load_environment(dotenv_path)
    settings = load_settings()
    Path("logs").mkdir(exist_ok=True)
    configure_logging(settings.log_cfg)
    runtime = Runtime(settings)
    runtime.start()
    return runtime
