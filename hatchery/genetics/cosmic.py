"""Cosmic affinity assignment."""

from hatchery.config.rarity import Rarity
from hatchery.config.species import SpeciesTemplate
from hatchery.config.tables import GeneticsTables
from hatchery.genetics.profile import CosmicAffinity
from hatchery.util.rng import RandomSource, uniform
from hatchery.util.selection import choice, sample

# (power threshold, ability count) checked from the top down
_ABILITY_THRESHOLDS = ((0.8, 2), (0.5, 1))


def ability_count(power_level: float) -> int:
    """2 abilities above 0.8 power, 1 above 0.5, none otherwise."""
    for threshold, count in _ABILITY_THRESHOLDS:
        if power_level > threshold:
            return count
    return 0


def assign_cosmic_affinity(
    template: SpeciesTemplate,
    rarity: Rarity,
    tables: GeneticsTables,
    rng: RandomSource,
) -> CosmicAffinity:
    element = choice(template.cosmic_affinities, rng)
    affinity = tables.affinity(element)

    base_power = uniform(rng, *affinity.power_range)
    power_level = min(1.0, base_power + tables.rarity(rarity).power_bonus)
    abilities = sample(affinity.special_abilities, ability_count(power_level), rng)

    return CosmicAffinity(
        element=element,
        description=affinity.description,
        power_level=power_level,
        visual_effects=affinity.visual_effects,
        special_abilities=tuple(abilities),
    )
