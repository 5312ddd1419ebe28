"""The complete set of static tables a generator reads, plus validation.

Tables are loaded once by the host and passed to the generator; nothing in the
genetics pipeline mutates them. ``GeneticsTables.validate`` reports every
problem it finds; ``GeneticsTables.require_valid`` raises ``ConfigurationError``
so a bad table set fails before any profile is built.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Tuple

from hatchery.config.cosmic import COSMIC_AFFINITIES, CosmicAffinityDef
from hatchery.config.features import (
    BODY_SHAPES,
    EYES,
    FEATURES,
    MARKINGS,
    MUTATION_FLAG_RULES,
    WINGS,
    BodyShapeCatalog,
    EyeCatalog,
    FeatureCatalog,
    MarkingCatalog,
    MutationFlagRule,
    ShapeClass,
    WingCatalog,
)
from hatchery.config.personality import PERSONALITY_TRAITS, PersonalityTraitDef
from hatchery.config.rarity import RARITY_ORDER, RARITY_PROFILES, Rarity, RarityProfile
from hatchery.config.species import SPECIES_TEMPLATES, SpeciesTemplate
from hatchery.exceptions import ConfigurationError
from hatchery.util.selection import WEIGHT_SUM_TOLERANCE, weights_sum_to_one


def _is_probability(value: float) -> bool:
    return math.isfinite(value) and 0.0 <= value <= 1.0


def _is_unit_range(bounds: Tuple[float, float]) -> bool:
    low, high = bounds
    return _is_probability(low) and _is_probability(high) and low <= high


@dataclass(frozen=True)
class GeneticsTables:
    """Read-only static tables consumed by the genetics generator."""

    species: Tuple[SpeciesTemplate, ...] = SPECIES_TEMPLATES
    rarities: Tuple[RarityProfile, ...] = RARITY_PROFILES
    personalities: Mapping[str, PersonalityTraitDef] = field(default_factory=lambda: PERSONALITY_TRAITS)
    affinities: Mapping[str, CosmicAffinityDef] = field(default_factory=lambda: COSMIC_AFFINITIES)
    body_shapes: BodyShapeCatalog = BODY_SHAPES
    eyes: EyeCatalog = EYES
    wings: WingCatalog = WINGS
    markings: MarkingCatalog = MARKINGS
    features: FeatureCatalog = FEATURES
    mutation_flags: Tuple[MutationFlagRule, ...] = MUTATION_FLAG_RULES
    _rarity_index: Dict[Rarity, RarityProfile] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "_rarity_index", {profile.tier: profile for profile in self.rarities}
        )

    # =========================================================================
    # Lookups
    # =========================================================================

    @property
    def rarity_weights(self) -> Tuple[Tuple[Rarity, float], ...]:
        """Ordered ``(tier, weight)`` pairs."""
        return tuple((profile.tier, profile.weight) for profile in self.rarities)

    def rarity(self, tier: Rarity) -> RarityProfile:
        try:
            return self._rarity_index[tier]
        except KeyError:
            raise ConfigurationError(f"No rarity tables configured for tier {tier!s}") from None

    def personality(self, name: str) -> PersonalityTraitDef:
        try:
            return self.personalities[name]
        except KeyError:
            raise ConfigurationError(f"Unknown personality trait {name!r}") from None

    def affinity(self, element: str) -> CosmicAffinityDef:
        try:
            return self.affinities[element]
        except KeyError:
            raise ConfigurationError(f"Unknown cosmic affinity {element!r}") from None

    def cosmic_palette(self, elements: Tuple[str, ...]) -> Tuple[int, ...]:
        """Concatenated palettes of *elements*, in order."""
        colors: List[int] = []
        for element in elements:
            colors.extend(self.affinity(element).palette)
        return tuple(colors)

    # =========================================================================
    # Validation
    # =========================================================================

    def validate(self) -> List[str]:
        """Check table consistency; returns human-readable issues (empty means valid)."""
        issues: List[str] = []
        issues.extend(self._validate_weights())
        issues.extend(self._validate_species())
        issues.extend(self._validate_rarities())
        issues.extend(self._validate_personalities())
        issues.extend(self._validate_affinities())
        return issues

    def require_valid(self) -> "GeneticsTables":
        """Raise ConfigurationError listing every issue, or return self."""
        issues = self.validate()
        if issues:
            raise ConfigurationError("Invalid genetics tables:\n" + "\n".join(issues))
        return self

    def _validate_weights(self) -> List[str]:
        issues: List[str] = []
        named_tables = (
            ("species", [template.weight for template in self.species]),
            ("rarity", [profile.weight for profile in self.rarities]),
            ("eye_size", [weight for _, weight in self.eyes.sizes]),
        )
        for name, weights in named_tables:
            if not weights:
                issues.append(f"tables.{name}: empty weight table")
            elif any(w < 0 or not math.isfinite(w) for w in weights):
                issues.append(f"tables.{name}: weights must be finite and non-negative")
            elif not weights_sum_to_one(weights):
                issues.append(
                    f"tables.{name}: weights sum to {sum(weights):.6f}, "
                    f"expected 1.0 +/- {WEIGHT_SUM_TOLERANCE}"
                )
        return issues

    def _validate_species(self) -> List[str]:
        issues: List[str] = []
        common_shapes = self.body_shapes.of_class(ShapeClass.COMMON)
        seen = set()
        for template in self.species:
            path = f"tables.species.{template.species_id}"
            if template.species_id in seen:
                issues.append(f"{path}: duplicate species id")
            seen.add(template.species_id)
            if len(template.species_id) < 3:
                issues.append(f"{path}: species id must have at least 3 characters")
            for region in ("body", "wings", "eyes"):
                palette = getattr(template.palettes, region)
                if not palette:
                    issues.append(f"{path}.palettes.{region}: empty palette")
                elif any(not 0 <= color <= 0xFFFFFF for color in palette):
                    issues.append(f"{path}.palettes.{region}: color outside 0x000000-0xFFFFFF")
            if template.body_shape.preferred not in common_shapes:
                issues.append(
                    f"{path}.body_shape: preferred shape {template.body_shape.preferred!r} "
                    "is not a common shape"
                )
            if not template.personality_tendencies:
                issues.append(f"{path}.personality_tendencies: empty")
            for trait in template.personality_tendencies:
                if trait not in self.personalities:
                    issues.append(f"{path}.personality_tendencies: unknown trait {trait!r}")
            if not template.cosmic_affinities:
                issues.append(f"{path}.cosmic_affinities: empty")
            for element in template.cosmic_affinities:
                if element not in self.affinities:
                    issues.append(f"{path}.cosmic_affinities: unknown element {element!r}")
        return issues

    def _validate_rarities(self) -> List[str]:
        issues: List[str] = []
        tiers = [profile.tier for profile in self.rarities]
        if sorted(tiers, key=RARITY_ORDER.index) != list(RARITY_ORDER):
            issues.append(
                "tables.rarity: expected exactly one profile per tier "
                f"({', '.join(t.value for t in RARITY_ORDER)})"
            )
        for profile in self.rarities:
            path = f"tables.rarity.{profile.tier.value}"
            for name in (
                "mutation_strength",
                "enhancement_intensity",
                "marking_chance",
                "marking_animation_chance",
                "feature_chance",
                "feature_animation_chance",
                "power_bonus",
            ):
                if not _is_probability(getattr(profile, name)):
                    issues.append(f"{path}.{name}: {getattr(profile, name)} not in [0, 1]")
            for name in ("shimmer_range", "wing_shimmer_range"):
                if not _is_unit_range(getattr(profile, name)):
                    issues.append(f"{path}.{name}: {getattr(profile, name)} is not a range in [0, 1]")
            if not profile.gradient_types:
                issues.append(f"{path}.gradient_types: empty")
            if not profile.mixing_patterns:
                issues.append(f"{path}.mixing_patterns: empty")
            if profile.marking_chance > 0 and not profile.marking_patterns:
                issues.append(f"{path}.marking_patterns: empty but marking_chance > 0")
            if profile.feature_chance > 0:
                low, high = profile.feature_count
                if not profile.feature_pool:
                    issues.append(f"{path}.feature_pool: empty but feature_chance > 0")
                if low < 1 or high < low:
                    issues.append(f"{path}.feature_count: invalid range {profile.feature_count}")
            if profile.expression_multiplier < 0:
                issues.append(f"{path}.expression_multiplier: negative")
        return issues

    def _validate_personalities(self) -> List[str]:
        issues: List[str] = []
        for name, trait in self.personalities.items():
            if len(name) < 3:
                issues.append(f"tables.personality.{name}: name must have at least 3 characters")
            if not trait.quirks:
                issues.append(f"tables.personality.{name}.quirks: empty quirk pool")
        return issues

    def _validate_affinities(self) -> List[str]:
        issues: List[str] = []
        for element, affinity in self.affinities.items():
            path = f"tables.affinity.{element}"
            if not _is_unit_range(affinity.power_range):
                issues.append(f"{path}.power_range: {affinity.power_range} is not a range in [0, 1]")
            if not affinity.palette:
                issues.append(f"{path}.palette: empty cosmic palette")
        return issues


DEFAULT_TABLES = GeneticsTables()
