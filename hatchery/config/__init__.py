"""Static configuration tables for the genetics generator.

Species, rarity, personality and cosmic tables each live in their own module;
``GeneticsTables`` bundles them for injection into a generator.
"""

from hatchery.config.genetics_config import GENETICS_VERSION, GeneticsConfig
from hatchery.config.rarity import RARITY_ORDER, Rarity, RarityProfile
from hatchery.config.tables import DEFAULT_TABLES, GeneticsTables

__all__ = [
    "DEFAULT_TABLES",
    "GENETICS_VERSION",
    "GeneticsConfig",
    "GeneticsTables",
    "RARITY_ORDER",
    "Rarity",
    "RarityProfile",
]
