"""Trait composition: body shape, eyes, wings, markings and special features.

Every branch on rarity reads a ``RarityProfile`` field; every branch on a
shape, feature or pattern tag reads a catalog in ``hatchery.config.features``.
"""

from typing import List, Optional, Tuple

from hatchery.config.features import ShapeClass
from hatchery.config.rarity import Rarity
from hatchery.config.species import SpeciesTemplate
from hatchery.config.tables import GeneticsTables
from hatchery.genetics.profile import (
    NO_MARKINGS,
    BodyShape,
    Expression,
    Eyes,
    FeatureAnimation,
    Features,
    MarkingAnimation,
    Markings,
    SpecialFeature,
    Wings,
)
from hatchery.util.rng import RandomSource, uniform
from hatchery.util.selection import choice, pick_key, sample


def compose_body_shape(
    template: SpeciesTemplate, tables: GeneticsTables, rng: RandomSource
) -> BodyShape:
    """Preferred shape, another common shape, or a unique shape from one draw."""
    catalog = tables.body_shapes
    preferred = template.body_shape.preferred
    roll = rng.random()
    if roll < catalog.preferred_chance:
        shape = preferred
    elif roll < catalog.preferred_chance + catalog.alternative_chance:
        alternatives = tuple(
            name for name in catalog.of_class(ShapeClass.COMMON) if name != preferred
        )
        shape = choice(alternatives, rng) if alternatives else preferred
    else:
        shape = choice(catalog.of_class(ShapeClass.UNIQUE), rng)
    return BodyShape(type=shape, intensity=uniform(rng, *catalog.intensity_range))


def compose_eyes(template: SpeciesTemplate, tables: GeneticsTables, rng: RandomSource) -> Eyes:
    return Eyes(
        size=pick_key(tables.eyes.sizes, rng),
        color=choice(template.palettes.eyes, rng),
        glow=uniform(rng, *tables.eyes.glow_range),
    )


def compose_wings(
    template: SpeciesTemplate, rarity: Rarity, tables: GeneticsTables, rng: RandomSource
) -> Wings:
    tier = tables.rarity(rarity)
    return Wings(
        type=template.wing_type,
        span=uniform(rng, *tables.wings.span_range),
        shimmer=uniform(rng, *tier.wing_shimmer_range),
    )


def compose_markings(rarity: Rarity, tables: GeneticsTables, rng: RandomSource) -> Markings:
    """Roll for markings; absent markings are the explicit ``NO_MARKINGS`` record."""
    tier = tables.rarity(rarity)
    catalog = tables.markings
    if not tier.marking_patterns or rng.random() >= tier.marking_chance:
        return NO_MARKINGS

    pattern = choice(tier.marking_patterns, rng)
    distribution = choice(catalog.distributions, rng)
    color_variant = choice(catalog.color_variants, rng)
    intensity = uniform(rng, *catalog.intensity_range)
    scale = uniform(rng, *catalog.scale_range)
    opacity = uniform(rng, *catalog.opacity_range)

    animation: Optional[MarkingAnimation] = None
    if tier.marking_animation_chance >= 1.0 or (
        tier.marking_animation_chance > 0 and rng.random() < tier.marking_animation_chance
    ):
        animation = MarkingAnimation(
            type=choice(catalog.animation_types, rng),
            speed=uniform(rng, *catalog.animation_speed_range),
            intensity=uniform(rng, *catalog.animation_intensity_range),
            sync_mode=choice(catalog.sync_modes, rng),
        )

    return Markings(
        pattern=pattern,
        intensity=intensity,
        distribution=distribution,
        color_variant=color_variant,
        scale=scale,
        opacity=opacity,
        animation=animation,
    )


def _feature_count(count_range: Tuple[int, int], rng: RandomSource) -> int:
    low, high = count_range
    if high <= low:
        return low
    return low + min(int(rng.random() * (high - low + 1)), high - low)


def compose_special_features(
    rarity: Rarity, tables: GeneticsTables, rng: RandomSource
) -> Tuple[SpecialFeature, ...]:
    """Draw rarity-scoped special features without replacement.

    Common creatures never roll; uncommon get one at 30%, rare one or two at
    80%, legendary one to three always (see ``RarityProfile``).
    """
    tier = tables.rarity(rarity)
    catalog = tables.features
    if tier.feature_chance <= 0 or not tier.feature_pool:
        return ()
    if tier.feature_chance < 1.0 and rng.random() >= tier.feature_chance:
        return ()

    count = _feature_count(tier.feature_count, rng)
    selected: List[SpecialFeature] = []
    for feature in sample(tier.feature_pool, count, rng):
        intensity = uniform(rng, *catalog.intensity_range)
        variant = choice(catalog.variants_for(feature), rng)
        animation: Optional[FeatureAnimation] = None
        if feature in catalog.dynamic and rng.random() < tier.feature_animation_chance:
            animation = FeatureAnimation(
                type=choice(catalog.animations_for(feature), rng),
                duration_ms=uniform(rng, *catalog.duration_range_ms),
                easing=choice(catalog.easings, rng),
                loop=rng.random() < catalog.loop_chance,
            )
        selected.append(
            SpecialFeature(type=feature, intensity=intensity, variant=variant, animation=animation)
        )
    return tuple(selected)


def compose_features(
    template: SpeciesTemplate, rarity: Rarity, tables: GeneticsTables, rng: RandomSource
) -> Features:
    return Features(
        eyes=compose_eyes(template, tables, rng),
        wings=compose_wings(template, rarity, tables, rng),
        markings=compose_markings(rarity, tables, rng),
        special_features=compose_special_features(rarity, tables, rng),
    )


def compose_expression(rarity: Rarity, tables: GeneticsTables, rng: RandomSource) -> Expression:
    """Rarity-scaled expression intensities, each capped at 1.0."""
    multiplier = tables.rarity(rarity).expression_multiplier
    return Expression(
        color_intensity=min(1.0, rng.random() * multiplier),
        feature_complexity=min(1.0, rng.random() * multiplier),
        effect_strength=min(1.0, rng.random() * multiplier),
    )
