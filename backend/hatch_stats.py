"""Running hatch statistics fed by the generator's observer hook."""

import threading
from collections import Counter, deque
from typing import Any, Deque, Dict, List

from hatchery.telemetry.events import CreatureGeneratedEvent

DEFAULT_RECENT_LIMIT = 20


class HatchStatsRecorder:
    """Counts hatches by species, rarity, personality and cosmic element.

    Instances are callable so they can be passed directly as a generator
    ``observer``. Recording is guarded by a lock; generators may be shared
    across request threads.
    """

    def __init__(self, recent_limit: int = DEFAULT_RECENT_LIMIT) -> None:
        self._lock = threading.Lock()
        self.total = 0
        self.by_species: Counter = Counter()
        self.by_rarity: Counter = Counter()
        self.by_personality: Counter = Counter()
        self.by_element: Counter = Counter()
        self._recent: Deque[CreatureGeneratedEvent] = deque(maxlen=recent_limit)

    def __call__(self, event: CreatureGeneratedEvent) -> None:
        self.record(event)

    def record(self, event: CreatureGeneratedEvent) -> None:
        with self._lock:
            self.total += 1
            self.by_species[event.species] += 1
            self.by_rarity[event.rarity] += 1
            self.by_personality[event.personality] += 1
            self.by_element[event.cosmic_element] += 1
            self._recent.append(event)

    @property
    def recent(self) -> List[CreatureGeneratedEvent]:
        """Most recent hatches, oldest first."""
        with self._lock:
            return list(self._recent)

    def snapshot(self) -> Dict[str, Any]:
        """Plain-dict copy of the counters for JSON responses."""
        with self._lock:
            return {
                "total": self.total,
                "by_species": dict(self.by_species),
                "by_rarity": dict(self.by_rarity),
                "by_personality": dict(self.by_personality),
                "by_element": dict(self.by_element),
                "recent": [event.to_dict() for event in self._recent],
            }

    def reset(self) -> None:
        with self._lock:
            self.total = 0
            self.by_species.clear()
            self.by_rarity.clear()
            self.by_personality.clear()
            self.by_element.clear()
            self._recent.clear()
