from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterator, List

import pytest

from ruleutils.settings import AppSettings
from ruleutils.storage.barrier_store import BarrierStore
from ruleutils.storage.cache import InMemoryCache
from ruleutils.utils.env import load_environment
from ruleutils.utils.throttle import ThrottleBarrier


@pytest.fixture(autouse=True)
def _configure_env(tmp_path: Path) -> Iterator[None]:
    env_path = tmp_path / ".env"
    env_path.write_text(
        """
TZ=Europe/Berlin
LOCALE=en
LOG_CFG={log_cfg}
SCHEDULER_MAX_WORKERS=2
DEFAULT_THROTTLE_SECONDS=30
""".strip().format(log_cfg=tmp_path / "missing-logging.yaml"),
        encoding="utf-8",
    )
    load_environment(str(env_path))
    yield


@dataclass
class DeferredCall:
    delay: float
    action: Callable[[], None]


class ManualDeferrer:
    """Records deferred actions; tests decide when they run."""

    def __init__(self) -> None:
        self.calls: List[DeferredCall] = []

    def after(self, delay_seconds: float, action: Callable[[], None]) -> None:
        self.calls.append(DeferredCall(delay_seconds, action))

    def run(self, index: int) -> None:
        self.calls[index].action()

    def run_all(self) -> None:
        for call in list(self.calls):
            call.action()


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings()


@pytest.fixture
def cache() -> InMemoryCache:
    return InMemoryCache()


@pytest.fixture
def deferrer() -> ManualDeferrer:
    return ManualDeferrer()


@pytest.fixture
def barrier(cache: InMemoryCache, deferrer: ManualDeferrer) -> ThrottleBarrier:
    return ThrottleBarrier(BarrierStore(cache), deferrer)
