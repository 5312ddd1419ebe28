"""Validation helpers for generated genetic profiles.

These functions are intended for tests, debugging and host-side safety checks,
not the generation hot path. They catch out-of-range scalars, colors outside
24 bits and rarity-inconsistent data close to the source.
"""

from __future__ import annotations

import math
from typing import List, Optional

from hatchery.config.tables import DEFAULT_TABLES, GeneticsTables
from hatchery.genetics.profile import GeneticProfile


def _check_unit(value: float, path: str, issues: List[str]) -> None:
    if not math.isfinite(float(value)):
        issues.append(f"{path}: not finite ({value})")
    elif not 0.0 <= value <= 1.0:
        issues.append(f"{path}: {value} not in [0, 1]")


def _check_color(value: int, path: str, issues: List[str]) -> None:
    if not isinstance(value, int) or not 0 <= value <= 0xFFFFFF:
        issues.append(f"{path}: {value!r} is not a 0xRRGGBB color")


def _check_non_empty(value: str, path: str, issues: List[str]) -> None:
    if not value:
        issues.append(f"{path}: empty")


def validate_profile(
    profile: GeneticProfile, tables: Optional[GeneticsTables] = None, *, path: str = "profile"
) -> List[str]:
    """Validate a generated profile against its tables.

    Returns a list of human-readable issues; empty means valid.
    """
    tables = tables if tables is not None else DEFAULT_TABLES
    issues: List[str] = []

    _check_non_empty(profile.id, f"{path}.id", issues)
    species_ids = {template.species_id for template in tables.species}
    if profile.species not in species_ids:
        issues.append(f"{path}.species: unknown species {profile.species!r}")

    traits = profile.traits
    genome = traits.color_genome
    gpath = f"{path}.traits.color_genome"
    _check_color(genome.primary, f"{gpath}.primary", issues)
    _check_color(genome.secondary, f"{gpath}.secondary", issues)
    _check_color(genome.accent, f"{gpath}.accent", issues)
    _check_color(genome.gradient.start_color, f"{gpath}.gradient.start_color", issues)
    _check_color(genome.gradient.end_color, f"{gpath}.gradient.end_color", issues)
    _check_unit(genome.gradient.intensity, f"{gpath}.gradient.intensity", issues)
    if not 0.0 <= genome.gradient.angle < 360.0:
        issues.append(f"{gpath}.gradient.angle: {genome.gradient.angle} not in [0, 360)")
    for name in ("shimmer_intensity", "color_complexity", "harmonic_resonance", "saturation_level"):
        _check_unit(getattr(genome, name), f"{gpath}.{name}", issues)
    if not 0 <= genome.dominant_hue < 360:
        issues.append(f"{gpath}.dominant_hue: {genome.dominant_hue} not in [0, 360)")
    _check_non_empty(genome.mixing_pattern, f"{gpath}.mixing_pattern", issues)

    tier = tables.rarity(profile.rarity)
    low, high = tier.shimmer_range
    if not low <= genome.shimmer_intensity <= high:
        issues.append(
            f"{gpath}.shimmer_intensity: {genome.shimmer_intensity} outside "
            f"{profile.rarity.value} range [{low}, {high}]"
        )
    if genome.gradient.type not in tier.gradient_types:
        issues.append(f"{gpath}.gradient.type: {genome.gradient.type!r} not allowed at {profile.rarity.value}")
    if genome.mixing_pattern not in tier.mixing_patterns:
        issues.append(f"{gpath}.mixing_pattern: {genome.mixing_pattern!r} not allowed at {profile.rarity.value}")
    unlocked = {
        rule.flag for rule in tables.mutation_flags if profile.rarity.rank >= rule.min_tier.rank
    }
    for flag in sorted(genome.mutation_flags - unlocked):
        issues.append(f"{gpath}.mutation_flags: {flag!r} is locked at {profile.rarity.value}")

    _check_non_empty(traits.body_shape.type, f"{path}.traits.body_shape.type", issues)
    _check_unit(traits.body_shape.intensity, f"{path}.traits.body_shape.intensity", issues)

    features = traits.features
    fpath = f"{path}.traits.features"
    _check_non_empty(features.eyes.size, f"{fpath}.eyes.size", issues)
    _check_color(features.eyes.color, f"{fpath}.eyes.color", issues)
    _check_unit(features.eyes.glow, f"{fpath}.eyes.glow", issues)
    _check_non_empty(features.wings.type, f"{fpath}.wings.type", issues)
    _check_unit(features.wings.shimmer, f"{fpath}.wings.shimmer", issues)
    if features.wings.span <= 0 or not math.isfinite(features.wings.span):
        issues.append(f"{fpath}.wings.span: {features.wings.span} must be positive")
    _check_non_empty(features.markings.pattern, f"{fpath}.markings.pattern", issues)
    _check_unit(features.markings.intensity, f"{fpath}.markings.intensity", issues)

    low_count, high_count = tier.feature_count
    count = len(features.special_features)
    if count and not low_count <= count <= high_count:
        issues.append(
            f"{fpath}.special_features: {count} features outside "
            f"{profile.rarity.value} range [{low_count}, {high_count}]"
        )
    feature_types = [feature.type for feature in features.special_features]
    if len(set(feature_types)) != len(feature_types):
        issues.append(f"{fpath}.special_features: duplicate feature types {feature_types}")
    for index, feature in enumerate(features.special_features):
        if feature.type not in tier.feature_pool:
            issues.append(
                f"{fpath}.special_features[{index}]: {feature.type!r} not in "
                f"{profile.rarity.value} pool"
            )
        _check_unit(feature.intensity, f"{fpath}.special_features[{index}].intensity", issues)

    for name in ("color_intensity", "feature_complexity", "effect_strength"):
        _check_unit(getattr(traits.expression, name), f"{path}.traits.expression.{name}", issues)

    personality = profile.personality
    _check_non_empty(personality.core, f"{path}.personality.core", issues)
    if not personality.quirks:
        issues.append(f"{path}.personality.quirks: empty")
    elif len(set(personality.quirks)) != len(personality.quirks):
        issues.append(f"{path}.personality.quirks: duplicate quirks {list(personality.quirks)}")
    _check_unit(personality.social_level, f"{path}.personality.social_level", issues)
    _check_unit(personality.independence, f"{path}.personality.independence", issues)

    cosmic = profile.cosmic_affinity
    _check_non_empty(cosmic.element, f"{path}.cosmic_affinity.element", issues)
    _check_unit(cosmic.power_level, f"{path}.cosmic_affinity.power_level", issues)

    _check_non_empty(profile.metadata.version, f"{path}.metadata.version", issues)
    if profile.metadata.generation_time_ms < 0:
        issues.append(f"{path}.metadata.generation_time_ms: negative")

    return issues
