from __future__ import annotations

import logging
from threading import Lock
from typing import Dict, Hashable

from .cache import Cache
from .models import BarrierMap

logger = logging.getLogger(__name__)


class BarrierStore:
    """Named barrier maps kept in an external cache, one cache key per map."""

    def __init__(self, cache: Cache) -> None:
        self.cache = cache
        self._locks: Dict[Hashable, Lock] = {}
        self._locks_guard = Lock()

    def lock_for(self, map_name: Hashable) -> Lock:
        with self._locks_guard:
            lock = self._locks.get(map_name)
            if lock is None:
                lock = self._locks[map_name] = Lock()
            return lock

    def fetch(self, map_name: Hashable) -> BarrierMap | None:
        return self.cache.get(map_name)

    def fetch_or_create(self, map_name: Hashable) -> BarrierMap:
        barrier_map = self.cache.get(map_name)
        if barrier_map is None:
            logger.debug("Creating barrier map %r", map_name)
            barrier_map = BarrierMap()
            self.cache.put(map_name, barrier_map)
        return barrier_map

    def save(self, map_name: Hashable, barrier_map: BarrierMap) -> None:
        self.cache.put(map_name, barrier_map)
