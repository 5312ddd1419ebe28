"""Cosmic affinity definitions keyed by element name."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple


@dataclass(frozen=True)
class CosmicAffinityDef:
    """Static data for one cosmic element.

    Attributes:
        element: Element name (star, moon, nebula, crystal, void)
        description: Flavour text shown in the UI
        power_range: Inclusive (min, max) base power level
        visual_effects: Effect tags consumed by the renderer
        special_abilities: Ability pool, drawn without replacement
        palette: Colors blended into eyes under cosmic influence
    """

    element: str
    description: str
    power_range: Tuple[float, float]
    visual_effects: Tuple[str, ...]
    special_abilities: Tuple[str, ...]
    palette: Tuple[int, ...]


COSMIC_AFFINITIES: Mapping[str, CosmicAffinityDef] = MappingProxyType(
    {
        affinity.element: affinity
        for affinity in (
            CosmicAffinityDef(
                element="star",
                description="Connected to stellar energy",
                power_range=(0.4, 0.9),
                visual_effects=("golden_shimmer", "star_sparkles"),
                special_abilities=("light_generation", "warmth_sharing"),
                palette=(0xFFD54F, 0xFFF176, 0xFFE082),
            ),
            CosmicAffinityDef(
                element="moon",
                description="Attuned to lunar cycles",
                power_range=(0.3, 0.8),
                visual_effects=("silver_glow", "crescent_markings"),
                special_abilities=("dream_weaving", "night_vision"),
                palette=(0xE1F5FE, 0xB3E5FC, 0x81D4FA),
            ),
            CosmicAffinityDef(
                element="nebula",
                description="Flowing with cosmic mists",
                power_range=(0.5, 1.0),
                visual_effects=("color_shifting", "mist_trail"),
                special_abilities=("emotion_sensing", "color_changing"),
                palette=(0xF48FB1, 0xE1BEE7, 0xCE93D8),
            ),
            CosmicAffinityDef(
                element="crystal",
                description="Resonates with crystalline structures",
                power_range=(0.4, 0.8),
                visual_effects=("crystal_growth", "harmonic_vibration"),
                special_abilities=("healing_resonance", "memory_storing"),
                palette=(0xB39DDB, 0xD1C4E9, 0xE8EAF6),
            ),
            CosmicAffinityDef(
                element="void",
                description="Touched by the deep cosmos",
                power_range=(0.6, 1.0),
                visual_effects=("shadow_dance", "star_field"),
                special_abilities=("space_sensing", "portal_creation"),
                palette=(0x4A148C, 0x6A1B99, 0x8E24AA),
            ),
        )
    }
)
