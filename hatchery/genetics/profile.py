"""Immutable value objects that make up a generated genetic profile.

A ``GeneticProfile`` is plain data: no engine references and no behaviour
beyond construction. Colors are packed ``0xRRGGBB`` ints; sequences are tuples
and shared tables are read-only mappings, so a profile can be handed to
rendering, UI and dialogue code as-is.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Mapping, Optional, Tuple

from hatchery.config.rarity import Rarity


@dataclass(frozen=True)
class Gradient:
    type: str
    start_color: int
    end_color: int
    intensity: float
    angle: float


@dataclass(frozen=True)
class ColorGenome:
    """Synthesized colors plus derived descriptors.

    Attributes:
        primary: Body color after mixing, mutation and enhancement
        secondary: Wing color after mixing, mutation and enhancement
        accent: Eye color after cosmic influence and enhancement
        gradient: Gradient between the unenhanced primary and secondary
        shimmer_intensity: Rarity-scaled shimmer
        color_complexity: Normalised pairwise RGB spread, in [0, 1]
        harmonic_resonance: Color-wheel harmony score, in [0, 1]
        mixing_pattern: Rarity-gated mixing vocabulary tag
        dominant_hue: Rounded hue of the primary color, in [0, 360)
        saturation_level: Mean HSL saturation of the three colors, in [0, 1]
        mutation_flags: Rarity-gated mutation tags
    """

    primary: int
    secondary: int
    accent: int
    gradient: Gradient
    shimmer_intensity: float
    color_complexity: float
    harmonic_resonance: float
    mixing_pattern: str
    dominant_hue: int
    saturation_level: float
    mutation_flags: FrozenSet[str] = frozenset()


@dataclass(frozen=True)
class BodyShape:
    type: str
    intensity: float


@dataclass(frozen=True)
class Eyes:
    size: str
    color: int
    glow: float


@dataclass(frozen=True)
class Wings:
    type: str
    span: float
    shimmer: float


@dataclass(frozen=True)
class MarkingAnimation:
    type: str
    speed: float
    intensity: float
    sync_mode: str


@dataclass(frozen=True)
class Markings:
    """Body markings; ``pattern == "none"`` means the creature has none."""

    pattern: str
    intensity: float
    distribution: str
    color_variant: str
    scale: float = 0.0
    opacity: float = 0.0
    animation: Optional[MarkingAnimation] = None

    @property
    def present(self) -> bool:
        return self.pattern != "none"


NO_MARKINGS = Markings(pattern="none", intensity=0.0, distribution="none", color_variant="none")


@dataclass(frozen=True)
class FeatureAnimation:
    type: str
    duration_ms: float
    easing: str
    loop: bool


@dataclass(frozen=True)
class SpecialFeature:
    type: str
    intensity: float
    variant: str
    animation: Optional[FeatureAnimation] = None


@dataclass(frozen=True)
class Features:
    eyes: Eyes
    wings: Wings
    markings: Markings
    special_features: Tuple[SpecialFeature, ...] = ()


@dataclass(frozen=True)
class Expression:
    """Rarity-scaled expression intensities; ``color_intensity`` feeds the profile id."""

    color_intensity: float
    feature_complexity: float
    effect_strength: float


@dataclass(frozen=True)
class Traits:
    body_shape: BodyShape
    color_genome: ColorGenome
    features: Features
    expression: Expression


@dataclass(frozen=True)
class Personality:
    core: str
    description: str
    quirks: Tuple[str, ...]
    social_level: float
    independence: float
    emotion_modifiers: Mapping[str, float]
    care_preferences: Mapping[str, float]


@dataclass(frozen=True)
class CosmicAffinity:
    element: str
    description: str
    power_level: float
    visual_effects: Tuple[str, ...]
    special_abilities: Tuple[str, ...]


@dataclass(frozen=True)
class BreedingData:
    """Placeholder for future breeding; never mutated by the generator."""

    can_breed: bool = True
    breeding_cooldown: int = 0
    times_bred: int = 0
    max_breeding_times: int = 5
    compatible_species: Tuple[str, ...] = ()
    fertility_rate: float = 1.0


@dataclass(frozen=True)
class Lineage:
    """Placeholder for future lineage tracking; hatched creatures are generation 0."""

    parent1: Optional[str] = None
    parent2: Optional[str] = None
    generation: int = 0
    family_tree: Tuple[str, ...] = ()


@dataclass(frozen=True)
class GenerationMetadata:
    generation_time_ms: float
    version: str
    generated_at: int


@dataclass(frozen=True)
class GeneticProfile:
    """The complete, immutable genetic record of one creature."""

    id: str
    species: str
    rarity: Rarity
    traits: Traits
    personality: Personality
    cosmic_affinity: CosmicAffinity
    metadata: GenerationMetadata
    breeding_data: BreedingData = field(default_factory=BreedingData)
    lineage: Lineage = field(default_factory=Lineage)
