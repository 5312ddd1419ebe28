"""Lookup tables for body shapes, eyes, markings, special features and mutation flags.

Adding a shape, feature variant, animation or flag is a data change here; the
composers in ``hatchery.genetics`` only ever index these tables.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import FrozenSet, Mapping, Tuple

from hatchery.config.rarity import Rarity


class ShapeClass(Enum):
    """Whether a body shape belongs to the common or the unique pool."""

    COMMON = "common"
    UNIQUE = "unique"


@dataclass(frozen=True)
class BodyShapeCatalog:
    """Body shape tags and the three-way preferred/common/unique split.

    A single draw below ``preferred_chance`` keeps the species' preferred
    shape, below ``preferred_chance + alternative_chance`` picks another
    common shape, and anything above picks a unique shape.
    """

    shapes: Mapping[str, ShapeClass]
    preferred_chance: float = 0.6
    alternative_chance: float = 0.3
    intensity_range: Tuple[float, float] = (0.3, 0.7)

    def of_class(self, shape_class: ShapeClass) -> Tuple[str, ...]:
        return tuple(name for name, kind in self.shapes.items() if kind is shape_class)


@dataclass(frozen=True)
class EyeCatalog:
    sizes: Tuple[Tuple[str, float], ...] = (("small", 0.2), ("medium", 0.6), ("large", 0.2))
    glow_range: Tuple[float, float] = (0.2, 1.0)


@dataclass(frozen=True)
class WingCatalog:
    span_range: Tuple[float, float] = (0.8, 1.2)


@dataclass(frozen=True)
class MarkingCatalog:
    """Attribute vocabularies for markings and their animations."""

    distributions: Tuple[str, ...] = ("scattered", "clustered", "symmetrical", "flowing")
    color_variants: Tuple[str, ...] = ("darker", "lighter", "complementary", "cosmic")
    intensity_range: Tuple[float, float] = (0.3, 0.9)
    scale_range: Tuple[float, float] = (0.2, 1.0)
    opacity_range: Tuple[float, float] = (0.4, 0.8)
    animation_types: Tuple[str, ...] = ("pulse", "sparkle", "flow", "shimmer", "rotation", "wave")
    animation_speed_range: Tuple[float, float] = (0.3, 0.8)
    animation_intensity_range: Tuple[float, float] = (0.2, 0.8)
    sync_modes: Tuple[str, ...] = ("synchronized", "cascading")


@dataclass(frozen=True)
class FeatureCatalog:
    """Variant and animation tables for special features.

    Features missing from ``variants`` / ``animations`` use the defaults.
    Only features listed in ``dynamic`` can receive an animation.
    """

    variants: Mapping[str, Tuple[str, ...]]
    animations: Mapping[str, Tuple[str, ...]]
    dynamic: FrozenSet[str]
    default_variants: Tuple[str, ...] = ("standard", "enhanced", "unique")
    default_animations: Tuple[str, ...] = ("pulse", "glow", "fade")
    easings: Tuple[str, ...] = ("linear", "ease-in-out", "bounce", "elastic")
    intensity_range: Tuple[float, float] = (0.2, 1.0)
    duration_range_ms: Tuple[float, float] = (1000.0, 3000.0)
    loop_chance: float = 0.8

    def variants_for(self, feature: str) -> Tuple[str, ...]:
        return self.variants.get(feature, self.default_variants)

    def animations_for(self, feature: str) -> Tuple[str, ...]:
        return self.animations.get(feature, self.default_animations)


@dataclass(frozen=True)
class MutationFlagRule:
    """A flag rolled independently with ``probability`` at ``min_tier`` and above."""

    flag: str
    min_tier: Rarity
    probability: float


BODY_SHAPES = BodyShapeCatalog(
    shapes=MappingProxyType(
        {
            "slender": ShapeClass.COMMON,
            "balanced": ShapeClass.COMMON,
            "sturdy": ShapeClass.COMMON,
            "fish": ShapeClass.UNIQUE,
            "cyclops": ShapeClass.UNIQUE,
            "serpentine": ShapeClass.UNIQUE,
        }
    )
)

EYES = EyeCatalog()

WINGS = WingCatalog()

MARKINGS = MarkingCatalog()

FEATURES = FeatureCatalog(
    variants=MappingProxyType(
        {
            "crystal_growth": ("small_clusters", "large_formations", "spiral_patterns", "geometric"),
            "bioluminescent_spots": ("steady_glow", "pulsing", "breathing", "twinkling"),
            "aurora_aura": ("flowing", "static", "rippling", "cascading"),
            "nebula_trail": ("wispy", "dense", "colorful", "ethereal"),
            "stellar_core": ("bright", "pulsing", "rotating", "expanding"),
            "void_wings": ("translucent", "shadow", "rippling", "portal-like"),
        }
    ),
    animations=MappingProxyType(
        {
            "aurora_aura": ("flow", "pulse", "wave", "shimmer"),
            "nebula_trail": ("drift", "swirl", "fade", "expand"),
            "stellar_core": ("pulse", "rotate", "flicker", "bloom"),
            "bioluminescent_spots": ("pulse", "twinkle", "breathe", "cascade"),
            "reality_distortion": ("warp", "ripple", "phase", "twist"),
            "time_ripples": ("expand", "contract", "flow", "spiral"),
        }
    ),
    dynamic=frozenset(
        {
            "aurora_aura",
            "nebula_trail",
            "stellar_core",
            "reality_distortion",
            "time_ripples",
            "dimensional_shadows",
            "bioluminescent_spots",
        }
    ),
)

MUTATION_FLAG_RULES: Tuple[MutationFlagRule, ...] = (
    MutationFlagRule("chromatic_shift", Rarity.UNCOMMON, 0.3),
    MutationFlagRule("luminance_boost", Rarity.UNCOMMON, 0.2),
    MutationFlagRule("prismatic_effect", Rarity.RARE, 0.4),
    MutationFlagRule("cosmic_resonance", Rarity.RARE, 0.3),
    MutationFlagRule("stellar_core", Rarity.LEGENDARY, 0.5),
    MutationFlagRule("reality_flux", Rarity.LEGENDARY, 0.3),
)
