"""Telemetry event definitions emitted by the genetics generator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict


@dataclass(frozen=True)
class CreatureGeneratedEvent:
    """Summary of one successful generation, for observers and stats."""

    profile_id: str
    species: str
    rarity: str
    personality: str
    cosmic_element: str
    generated_at: int  # epoch milliseconds

    def to_dict(self) -> Dict[str, Any]:
        return {
            "profile_id": self.profile_id,
            "species": self.species,
            "rarity": self.rarity,
            "personality": self.personality,
            "cosmic_element": self.cosmic_element,
            "generated_at": self.generated_at,
        }


GenerationObserver = Callable[[CreatureGeneratedEvent], None]
