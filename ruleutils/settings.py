from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)


@dataclass
class AppSettings:
    tz: str = "Europe/Berlin"
    locale: str = "en"
    log_cfg: str = "config/logging.yaml"
    scheduler_max_workers: int = 4
    default_throttle_seconds: float = 60.0

    def __post_init__(self) -> None:
        env = os.getenv
        self.tz = env("TZ", self.tz)
        try:
            ZoneInfo(self.tz)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"TZ must be an IANA zone name, got {self.tz!r}") from exc

        self.locale = env("LOCALE", self.locale)
        self.log_cfg = env("LOG_CFG", self.log_cfg)

        self.scheduler_max_workers = int(env("SCHEDULER_MAX_WORKERS", str(self.scheduler_max_workers)))
        if self.scheduler_max_workers < 1:
            raise ValueError("SCHEDULER_MAX_WORKERS must be >= 1")

        self.default_throttle_seconds = float(
            env("DEFAULT_THROTTLE_SECONDS", str(self.default_throttle_seconds))
        )
        if self.default_throttle_seconds < 0:
            raise ValueError("DEFAULT_THROTTLE_SECONDS must be >= 0")

    @property
    def zone(self) -> ZoneInfo:
        return ZoneInfo(self.tz)


def load_settings() -> AppSettings:
    return AppSettings()
