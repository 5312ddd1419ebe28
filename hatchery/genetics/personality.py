"""Personality assignment from species tendencies."""

from hatchery.config.genetics_config import GeneticsConfig
from hatchery.config.species import SpeciesTemplate
from hatchery.config.tables import GeneticsTables
from hatchery.genetics.profile import Personality
from hatchery.util.rng import RandomSource, uniform
from hatchery.util.selection import choice, sample


def assign_personality(
    template: SpeciesTemplate,
    tables: GeneticsTables,
    config: GeneticsConfig,
    rng: RandomSource,
) -> Personality:
    """Pick a core trait and quirks for a creature of *template*'s species.

    The core trait is uniform over the species' tendencies (each listed
    tendency counts once). One quirk is always attached and a second with
    ``second_quirk_chance``, without replacement. Emotion modifiers and care
    preferences are the trait table's own read-only mappings.
    """
    core = choice(template.personality_tendencies, rng)
    trait = tables.personality(core)

    quirk_count = 2 if rng.random() < config.second_quirk_chance else 1
    quirks = tuple(sample(trait.quirks, quirk_count, rng))

    return Personality(
        core=core,
        description=trait.description,
        quirks=quirks,
        social_level=uniform(rng, *config.social_range),
        independence=uniform(rng, *config.social_range),
        emotion_modifiers=trait.emotion_modifiers,
        care_preferences=trait.care_preferences,
    )
