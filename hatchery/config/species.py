"""Species templates for the Space-Mythic creature line.

Templates are kept in an ordered tuple: that order is the iteration order of
the cumulative-weight species draw.
"""

from dataclasses import dataclass
from typing import Tuple

# Space-Mythic base palette
STAR_GOLD = 0xFFD54F
STELLAR_WHITE = 0xF5F5F5
AURORA_TEAL = 0x80CBC4
COMET_BLUE = 0x64B5F6
CRYSTAL_LILAC = 0xB39DDB
COSMIC_GREEN = 0x81C784
NEBULA_PINK = 0xF48FB1


@dataclass(frozen=True)
class ColorPalettes:
    """Candidate base colors for each body region."""

    body: Tuple[int, ...]
    wings: Tuple[int, ...]
    eyes: Tuple[int, ...]


@dataclass(frozen=True)
class BodyShapePreference:
    preferred: str
    variance: float


@dataclass(frozen=True)
class SpeciesTemplate:
    """Static description of one species."""

    species_id: str
    palettes: ColorPalettes
    body_shape: BodyShapePreference
    wing_type: str
    personality_tendencies: Tuple[str, ...]
    cosmic_affinities: Tuple[str, ...]
    weight: float


SPECIES_TEMPLATES: Tuple[SpeciesTemplate, ...] = (
    SpeciesTemplate(
        species_id="stellarWyrm",
        palettes=ColorPalettes(
            body=(STAR_GOLD, STELLAR_WHITE, AURORA_TEAL),
            wings=(COMET_BLUE, CRYSTAL_LILAC, STAR_GOLD),
            eyes=(STAR_GOLD, AURORA_TEAL, COMET_BLUE),
        ),
        body_shape=BodyShapePreference(preferred="balanced", variance=0.3),
        wing_type="feathered",
        personality_tendencies=("curious", "wise", "gentle"),
        cosmic_affinities=("star", "nebula"),
        weight=0.40,
    ),
    SpeciesTemplate(
        species_id="crystalDrake",
        palettes=ColorPalettes(
            body=(CRYSTAL_LILAC, COSMIC_GREEN, AURORA_TEAL),
            wings=(CRYSTAL_LILAC, STAR_GOLD, COMET_BLUE),
            eyes=(COSMIC_GREEN, STAR_GOLD, NEBULA_PINK),
        ),
        body_shape=BodyShapePreference(preferred="sturdy", variance=0.2),
        wing_type="crystal",
        personality_tendencies=("gentle", "wise", "playful"),
        cosmic_affinities=("crystal", "moon"),
        weight=0.35,
    ),
    SpeciesTemplate(
        species_id="nebulaSprite",
        palettes=ColorPalettes(
            body=(NEBULA_PINK, COMET_BLUE, CRYSTAL_LILAC),
            wings=(NEBULA_PINK, AURORA_TEAL, STAR_GOLD),
            eyes=(STAR_GOLD, NEBULA_PINK, COMET_BLUE),
        ),
        body_shape=BodyShapePreference(preferred="slender", variance=0.4),
        wing_type="ethereal",
        personality_tendencies=("playful", "energetic", "curious"),
        cosmic_affinities=("nebula", "void"),
        weight=0.25,
    ),
)
