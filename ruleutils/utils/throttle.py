from __future__ import annotations

import logging
from typing import Callable, Hashable

from ..scheduler import Deferrer, coerce_delay
from ..storage.barrier_store import BarrierStore

logger = logging.getLogger(__name__)


class ThrottleBarrier:
    """Named cooldown flags that block repeated triggering within a window.

    ``acquire`` returns True and opens a window when the flag is clear, False
    while a window is open. A deferred clear closes the window after the limit;
    ``cancel`` closes it early. The flag alone decides, so a late clear only
    lengthens the window.
    """

    def __init__(self, store: BarrierStore, deferrer: Deferrer) -> None:
        self.store = store
        self.deferrer = deferrer

    def acquire(self, map_name: Hashable, name: Hashable, limit_seconds: float) -> bool:
        limit = coerce_delay(limit_seconds)
        with self.store.lock_for(map_name):
            barrier_map = self.store.fetch_or_create(map_name)
            if barrier_map.is_active(name):
                logger.debug("Barrier %r/%r still active", map_name, name)
                return False
            generation = barrier_map.activate(name)
            self.store.save(map_name, barrier_map)

        try:
            self.deferrer.after(limit, self._clear_later(map_name, name, generation))
        except Exception:
            # Without a pending clear the flag would never reset.
            logger.exception("Scheduling clear of barrier %r/%r failed; releasing it", map_name, name)
            self._clear(map_name, name, generation)
            raise
        logger.debug("Barrier %r/%r acquired for %ss (generation %d)", map_name, name, limit, generation)
        return True

    def cancel(self, map_name: Hashable, name: Hashable) -> None:
        with self.store.lock_for(map_name):
            barrier_map = self.store.fetch(map_name)
            if barrier_map is None:
                logger.debug("Cancel on unknown barrier map %r ignored", map_name)
                return
            barrier_map.deactivate(name)
            self.store.save(map_name, barrier_map)
        logger.debug("Barrier %r/%r cancelled", map_name, name)

    def _clear_later(self, map_name: Hashable, name: Hashable, generation: int) -> Callable[[], None]:
        def clear() -> None:
            try:
                self._clear(map_name, name, generation)
            except Exception:
                logger.exception("Deferred clear of barrier %r/%r failed", map_name, name)
                raise

        return clear

    def _clear(self, map_name: Hashable, name: Hashable, generation: int) -> None:
        with self.store.lock_for(map_name):
            # Looked up by name: the cached map may have been replaced since acquire.
            barrier_map = self.store.fetch(map_name)
            if barrier_map is None:
                return
            if barrier_map.generation(name) != generation:
                logger.debug("Skipping stale clear of %r/%r (generation %d)", map_name, name, generation)
                return
            barrier_map.deactivate(name)
            self.store.save(map_name, barrier_map)
        logger.debug("Barrier %r/%r expired", map_name, name)
