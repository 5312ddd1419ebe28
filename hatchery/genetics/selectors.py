"""Species and rarity selection over the configured weight tables."""

from typing import Optional, Union

from hatchery.config.rarity import RARITY_ORDER, Rarity
from hatchery.config.species import SpeciesTemplate
from hatchery.config.tables import GeneticsTables
from hatchery.exceptions import InvalidOverrideError
from hatchery.util.rng import RandomSource
from hatchery.util.selection import pick, pick_key


def select_species(tables: GeneticsTables, rng: RandomSource) -> SpeciesTemplate:
    """Draw a species template by its selection weight."""
    return pick(tables.species, lambda template: template.weight, rng)


def parse_rarity(value: Union[str, Rarity]) -> Rarity:
    """Resolve a rarity override to a tier.

    Raises:
        InvalidOverrideError: If *value* is not one of the recognised tiers
    """
    if isinstance(value, Rarity):
        return value
    try:
        return Rarity(value)
    except ValueError:
        raise InvalidOverrideError(value, tuple(tier.value for tier in RARITY_ORDER)) from None


def select_rarity(
    tables: GeneticsTables,
    rng: RandomSource,
    override: Optional[Union[str, Rarity]] = None,
) -> Rarity:
    """Return the override tier unchanged, or draw one by weight.

    A recognised override bypasses the random draw entirely, so no randomness
    is consumed. An unrecognised override is rejected rather than silently
    replaced with a weighted draw.
    """
    if override is not None:
        return parse_rarity(override)
    return pick_key(tables.rarity_weights, rng)
