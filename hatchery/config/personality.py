"""Personality trait definitions keyed by core trait name."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple


@dataclass(frozen=True)
class PersonalityTraitDef:
    """Static data for one core personality.

    ``emotion_modifiers`` and ``care_preferences`` are read-only mappings that
    generated profiles share by reference.
    """

    name: str
    description: str
    emotion_modifiers: Mapping[str, float]
    care_preferences: Mapping[str, float]
    quirks: Tuple[str, ...]


def _trait(
    name: str,
    description: str,
    emotion_modifiers: dict,
    care_preferences: dict,
    quirks: Tuple[str, ...],
) -> PersonalityTraitDef:
    return PersonalityTraitDef(
        name=name,
        description=description,
        emotion_modifiers=MappingProxyType(dict(emotion_modifiers)),
        care_preferences=MappingProxyType(dict(care_preferences)),
        quirks=quirks,
    )


PERSONALITY_TRAITS: Mapping[str, PersonalityTraitDef] = MappingProxyType(
    {
        trait.name: trait
        for trait in (
            _trait(
                "curious",
                "Loves to explore and discover new things",
                {"bored": -0.3, "excited": 0.2},
                {"photo": 1.2, "play": 1.1, "rest": 0.8},
                ("head_tilter", "star_gazer", "crystal_investigator"),
            ),
            _trait(
                "playful",
                "Full of energy and loves games",
                {"happy": 0.2, "bored": -0.2},
                {"play": 1.3, "feed": 1.0, "rest": 0.7},
                ("bounce_dancer", "chase_lights", "giggle_singer"),
            ),
            _trait(
                "gentle",
                "Calm and affectionate, loves quiet moments",
                {"stressed": -0.3, "content": 0.2},
                {"pet": 1.3, "clean": 1.1, "play": 0.8},
                ("soft_hummer", "gentle_nuzzler", "peace_bringer"),
            ),
            _trait(
                "wise",
                "Thoughtful and perceptive",
                {"confused": -0.2, "contemplative": 0.3},
                {"rest": 1.2, "pet": 1.1, "play": 0.9},
                ("constellation_reader", "ancient_singer", "wisdom_sharer"),
            ),
            _trait(
                "energetic",
                "Always active and enthusiastic",
                {"excited": 0.3, "sleepy": -0.2},
                {"play": 1.4, "feed": 1.1, "rest": 0.6},
                ("rainbow_flutter", "sparkle_dancer", "energy_burst"),
            ),
        )
    }
)
