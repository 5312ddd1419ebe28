"""Rarity tiers and their tier-specific tables.

Tiers are listed in ascending order; the position of a tier in
``RARITY_ORDER`` is its rank, which gates rarity-dependent rolls such as
mutation flags.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Rarity(str, Enum):
    """Rarity tier of a hatched creature."""

    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    LEGENDARY = "legendary"

    @property
    def rank(self) -> int:
        return RARITY_ORDER.index(self)

    def __str__(self) -> str:
        return self.value


RARITY_ORDER: Tuple[Rarity, ...] = (
    Rarity.COMMON,
    Rarity.UNCOMMON,
    Rarity.RARE,
    Rarity.LEGENDARY,
)


@dataclass(frozen=True)
class RarityProfile:
    """Selection weight and enhancement tables for one tier.

    Attributes:
        tier: The tier these tables belong to
        weight: Selection weight (all tiers sum to 1.0)
        mutation_strength: Strength passed to color mutation
        enhancement_intensity: Brightness boost applied to all genome colors
        shimmer_range: Range the genome shimmer intensity is drawn from
        gradient_types: Gradient types this tier may roll
        mixing_patterns: Mixing-pattern vocabulary for this tier
        wing_shimmer_range: Range the wing shimmer is drawn from
        marking_chance: Probability of having markings at all
        marking_patterns: Marking pattern pool
        marking_animation_chance: Probability that present markings animate
        feature_chance: Probability of having special features at all
        feature_count: Inclusive (min, max) number of special features
        feature_pool: Special feature pool, drawn without replacement
        feature_animation_chance: Probability a dynamic feature animates
        power_bonus: Added to the cosmic power level before clamping
        expression_multiplier: Scales the expression intensity draws
    """

    tier: Rarity
    weight: float
    mutation_strength: float
    enhancement_intensity: float
    shimmer_range: Tuple[float, float]
    gradient_types: Tuple[str, ...]
    mixing_patterns: Tuple[str, ...]
    wing_shimmer_range: Tuple[float, float]
    marking_chance: float
    marking_patterns: Tuple[str, ...]
    marking_animation_chance: float
    feature_chance: float
    feature_count: Tuple[int, int]
    feature_pool: Tuple[str, ...]
    feature_animation_chance: float
    power_bonus: float
    expression_multiplier: float


RARITY_PROFILES: Tuple[RarityProfile, ...] = (
    RarityProfile(
        tier=Rarity.COMMON,
        weight=0.70,
        mutation_strength=0.10,
        enhancement_intensity=0.0,
        shimmer_range=(0.3, 0.6),
        gradient_types=("linear",),
        mixing_patterns=("solid", "subtle_blend"),
        wing_shimmer_range=(0.0, 0.5),
        marking_chance=0.4,
        marking_patterns=("spots", "stripes", "simple_sparkles"),
        marking_animation_chance=0.0,
        feature_chance=0.0,
        feature_count=(0, 0),
        feature_pool=(),
        feature_animation_chance=0.0,
        power_bonus=0.0,
        expression_multiplier=1.0,
    ),
    RarityProfile(
        tier=Rarity.UNCOMMON,
        weight=0.20,
        mutation_strength=0.20,
        enhancement_intensity=0.1,
        shimmer_range=(0.5, 0.8),
        gradient_types=("linear", "radial"),
        mixing_patterns=("gradient", "color_shift", "subtle_blend"),
        wing_shimmer_range=(0.2, 1.0),
        marking_chance=0.7,
        marking_patterns=("spots", "stripes", "sparkles", "swirls", "crescents"),
        marking_animation_chance=0.0,
        feature_chance=0.3,
        feature_count=(1, 1),
        feature_pool=("soft_glow", "gentle_shimmer", "color_shift_wings", "twinkling_eyes"),
        feature_animation_chance=0.3,
        power_bonus=0.1,
        expression_multiplier=1.2,
    ),
    RarityProfile(
        tier=Rarity.RARE,
        weight=0.08,
        mutation_strength=0.30,
        enhancement_intensity=0.2,
        shimmer_range=(0.7, 1.0),
        gradient_types=("linear", "radial", "spiral"),
        mixing_patterns=("complex_gradient", "color_morph", "harmonic_blend"),
        wing_shimmer_range=(0.2, 1.0),
        marking_chance=0.9,
        marking_patterns=(
            "complex_spots",
            "galaxy_swirls",
            "constellation_dots",
            "aurora_stripes",
            "crystal_facets",
        ),
        marking_animation_chance=0.5,
        feature_chance=0.8,
        feature_count=(1, 2),
        feature_pool=(
            "crystal_growth",
            "bioluminescent_spots",
            "shimmer_wings",
            "aurora_wing_tips",
            "constellation_eyes",
            "prismatic_scales",
        ),
        feature_animation_chance=0.6,
        power_bonus=0.2,
        expression_multiplier=1.5,
    ),
    RarityProfile(
        tier=Rarity.LEGENDARY,
        weight=0.02,
        mutation_strength=0.50,
        enhancement_intensity=0.3,
        shimmer_range=(0.8, 1.0),
        gradient_types=("radial", "spiral"),
        mixing_patterns=("aurora_flow", "cosmic_weave", "stellar_burst"),
        wing_shimmer_range=(0.2, 1.0),
        marking_chance=1.0,
        marking_patterns=(
            "stellar_mandala",
            "cosmic_fractals",
            "reality_rifts",
            "time_spirals",
            "void_portals",
        ),
        marking_animation_chance=1.0,
        feature_chance=1.0,
        feature_count=(1, 3),
        feature_pool=(
            "aurora_aura",
            "constellation_markings",
            "nebula_trail",
            "star_dust_emanation",
            "reality_distortion",
            "cosmic_resonance",
            "stellar_core",
            "void_wings",
            "time_ripples",
            "dimensional_shadows",
        ),
        feature_animation_chance=0.9,
        power_bonus=0.3,
        expression_multiplier=2.0,
    ),
)
