from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Hashable


@dataclass(slots=True)
class BarrierMap:
    flags: Dict[Hashable, bool] = field(default_factory=dict)
    generations: Dict[Hashable, int] = field(default_factory=dict)

    def is_active(self, name: Hashable) -> bool:
        return bool(self.flags.get(name, False))

    def activate(self, name: Hashable) -> int:
        generation = self.generations.get(name, 0) + 1
        self.generations[name] = generation
        self.flags[name] = True
        return generation

    def deactivate(self, name: Hashable) -> None:
        self.flags[name] = False

    def generation(self, name: Hashable) -> int:
        return self.generations.get(name, 0)
