"""Color genome synthesis.

Builds the primary (body), secondary (wing) and accent (eye) colors of a
creature from its species palettes, then derives the descriptors that rendering
and UI code read: gradient, shimmer, complexity, harmony, mixing pattern,
dominant hue, saturation and mutation flags.

Derived scores and the gradient endpoints use the colors *before* the rarity
brightness enhancement; only the stored primary/secondary/accent carry the
boost.
"""

import logging
from typing import FrozenSet

from hatchery import color
from hatchery.config.genetics_config import GeneticsConfig
from hatchery.config.rarity import Rarity
from hatchery.config.species import SpeciesTemplate
from hatchery.config.tables import GeneticsTables
from hatchery.genetics.profile import ColorGenome, Gradient
from hatchery.util.rng import RandomSource, uniform
from hatchery.util.selection import choice

logger = logging.getLogger(__name__)

FULL_TURN_DEGREES = 360.0


def roll_mutation_flags(
    tables: GeneticsTables, rarity: Rarity, rng: RandomSource
) -> FrozenSet[str]:
    """Roll every flag rule unlocked at *rarity*; locked rules consume no draw."""
    flags = set()
    for rule in tables.mutation_flags:
        if rarity.rank < rule.min_tier.rank:
            continue
        if rng.random() < rule.probability:
            flags.add(rule.flag)
    return frozenset(flags)


def synthesize_color_genome(
    template: SpeciesTemplate,
    rarity: Rarity,
    tables: GeneticsTables,
    config: GeneticsConfig,
    rng: RandomSource,
) -> ColorGenome:
    """Synthesize a fully populated ``ColorGenome`` for one creature."""
    tier = tables.rarity(rarity)
    palettes = template.palettes

    base_body = choice(palettes.body, rng)
    base_wing = choice(palettes.wings, rng)
    base_eye = choice(palettes.eyes, rng)

    mixing_strength = uniform(rng, *config.color_mixing_range)

    primary = base_body
    if rng.random() < mixing_strength:
        primary = color.blend(base_body, choice(palettes.body, rng), config.body_mix_ratio)

    secondary = base_wing
    if rng.random() < mixing_strength:
        secondary = color.blend(base_wing, choice(palettes.wings, rng), config.wing_mix_ratio)

    accent = base_eye
    if rng.random() < config.cosmic_eye_chance:
        cosmic_palette = tables.cosmic_palette(template.cosmic_affinities)
        if cosmic_palette:
            accent = color.blend(base_eye, choice(cosmic_palette, rng), config.cosmic_eye_ratio)

    if rng.random() < config.mutation_chance:
        primary = color.mutate(primary, tier.mutation_strength, rng)
    if rng.random() < config.mutation_chance * config.wing_mutation_factor:
        secondary = color.mutate(secondary, tier.mutation_strength, rng)

    shimmer = uniform(rng, *tier.shimmer_range)
    gradient = Gradient(
        type=choice(tier.gradient_types, rng),
        start_color=primary,
        end_color=secondary,
        intensity=uniform(rng, *config.gradient_intensity_range),
        angle=uniform(rng, 0.0, FULL_TURN_DEGREES),
    )
    mixing_pattern = choice(tier.mixing_patterns, rng)
    mutation_flags = roll_mutation_flags(tables, rarity, rng)

    palette = (primary, secondary, accent)
    genome = ColorGenome(
        primary=color.enhance(primary, tier.enhancement_intensity),
        secondary=color.enhance(secondary, tier.enhancement_intensity),
        accent=color.enhance(accent, tier.enhancement_intensity),
        gradient=gradient,
        shimmer_intensity=shimmer,
        color_complexity=color.color_complexity(*palette),
        harmonic_resonance=color.harmonic_resonance(palette),
        mixing_pattern=mixing_pattern,
        dominant_hue=color.dominant_hue(primary),
        saturation_level=min(1.0, max(0.0, color.saturation_level(palette))),
        mutation_flags=mutation_flags,
    )
    logger.debug(
        "Color genome for %s/%s: primary=%s secondary=%s accent=%s flags=%s",
        template.species_id,
        rarity.value,
        color.to_hex(genome.primary),
        color.to_hex(genome.secondary),
        color.to_hex(genome.accent),
        sorted(mutation_flags),
    )
    return genome
