"""Procedural creature genetics.

This package turns the static tables in ``hatchery.config`` into complete,
immutable genetic profiles:

- Species and rarity selection over ordered weight tables
- Color genome synthesis (mixing, mutation, enhancement, derived scores)
- Trait composition (body shape, eyes, wings, markings, special features)
- Personality and cosmic affinity assignment
- Profile serialization and validation helpers

All randomness is injected; nothing here touches module-level ``random``.
"""

# Re-export main classes for package convenience
from hatchery.genetics.generator import CreatureGeneticsGenerator, build_profile_id
from hatchery.genetics.profile import (
    BodyShape,
    BreedingData,
    ColorGenome,
    CosmicAffinity,
    Expression,
    Eyes,
    FeatureAnimation,
    Features,
    GenerationMetadata,
    GeneticProfile,
    Gradient,
    Lineage,
    MarkingAnimation,
    Markings,
    Personality,
    SpecialFeature,
    Traits,
    Wings,
)
from hatchery.genetics.profile_codec import profile_from_dict, profile_to_dict
from hatchery.genetics.selectors import parse_rarity, select_rarity, select_species
from hatchery.genetics.validation import validate_profile

__all__ = [
    # Generator
    "CreatureGeneticsGenerator",
    "build_profile_id",
    # Profile records
    "GeneticProfile",
    "Traits",
    "BodyShape",
    "ColorGenome",
    "Gradient",
    "Features",
    "Eyes",
    "Wings",
    "Markings",
    "MarkingAnimation",
    "SpecialFeature",
    "FeatureAnimation",
    "Expression",
    "Personality",
    "CosmicAffinity",
    "BreedingData",
    "Lineage",
    "GenerationMetadata",
    # Selection
    "parse_rarity",
    "select_rarity",
    "select_species",
    # Serialization and validation
    "profile_to_dict",
    "profile_from_dict",
    "validate_profile",
]
