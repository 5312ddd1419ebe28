"""GeneticProfile serialization/deserialization helpers.

This module is the plain-data boundary for ``GeneticProfile``. Keys use the
camelCase names the game client reads (``colorGenome``, ``powerLevel``...);
colors stay packed ``0xRRGGBB`` integers and mutation flags become a sorted
list so the output is stable.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, Optional

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
from hatchery.genetics.selectors import parse_rarity


PROFILE_SCHEMA_VERSION = 1


def _marking_animation_to_dict(animation: Optional[MarkingAnimation]) -> Optional[Dict[str, Any]]:
    if animation is None:
        return None
    return {
        "type": animation.type,
        "speed": animation.speed,
        "intensity": animation.intensity,
        "syncMode": animation.sync_mode,
    }


def _feature_animation_to_dict(animation: Optional[FeatureAnimation]) -> Optional[Dict[str, Any]]:
    if animation is None:
        return None
    return {
        "type": animation.type,
        "durationMs": animation.duration_ms,
        "easing": animation.easing,
        "loop": animation.loop,
    }


def color_genome_to_dict(genome: ColorGenome) -> Dict[str, Any]:
    return {
        "primary": genome.primary,
        "secondary": genome.secondary,
        "accent": genome.accent,
        "gradient": {
            "type": genome.gradient.type,
            "startColor": genome.gradient.start_color,
            "endColor": genome.gradient.end_color,
            "intensity": genome.gradient.intensity,
            "angle": genome.gradient.angle,
        },
        "shimmerIntensity": genome.shimmer_intensity,
        "colorComplexity": genome.color_complexity,
        "harmonicResonance": genome.harmonic_resonance,
        "mixingPattern": genome.mixing_pattern,
        "dominantHue": genome.dominant_hue,
        "saturationLevel": genome.saturation_level,
        "mutationFlags": sorted(genome.mutation_flags),
    }


def profile_to_dict(profile: GeneticProfile) -> Dict[str, Any]:
    """Serialize a profile into JSON-compatible primitives."""
    traits = profile.traits
    features = traits.features
    markings = features.markings
    personality = profile.personality
    cosmic = profile.cosmic_affinity
    breeding = profile.breeding_data
    lineage = profile.lineage
    return {
        "schemaVersion": PROFILE_SCHEMA_VERSION,
        "id": profile.id,
        "species": profile.species,
        "rarity": profile.rarity.value,
        "traits": {
            "bodyShape": {"type": traits.body_shape.type, "intensity": traits.body_shape.intensity},
            "colorGenome": color_genome_to_dict(traits.color_genome),
            "features": {
                "eyes": {
                    "size": features.eyes.size,
                    "color": features.eyes.color,
                    "glow": features.eyes.glow,
                },
                "wings": {
                    "type": features.wings.type,
                    "span": features.wings.span,
                    "shimmer": features.wings.shimmer,
                },
                "markings": {
                    "pattern": markings.pattern,
                    "intensity": markings.intensity,
                    "distribution": markings.distribution,
                    "colorVariant": markings.color_variant,
                    "scale": markings.scale,
                    "opacity": markings.opacity,
                    "animation": _marking_animation_to_dict(markings.animation),
                },
                "specialFeatures": [
                    {
                        "type": feature.type,
                        "intensity": feature.intensity,
                        "variant": feature.variant,
                        "animation": _feature_animation_to_dict(feature.animation),
                    }
                    for feature in features.special_features
                ],
            },
            "expression": {
                "colorIntensity": traits.expression.color_intensity,
                "featureComplexity": traits.expression.feature_complexity,
                "effectStrength": traits.expression.effect_strength,
            },
        },
        "personality": {
            "core": personality.core,
            "description": personality.description,
            "quirks": list(personality.quirks),
            "socialLevel": personality.social_level,
            "independence": personality.independence,
            "emotionModifiers": dict(personality.emotion_modifiers),
            "carePreferences": dict(personality.care_preferences),
        },
        "cosmicAffinity": {
            "element": cosmic.element,
            "description": cosmic.description,
            "powerLevel": cosmic.power_level,
            "visualEffects": list(cosmic.visual_effects),
            "specialAbilities": list(cosmic.special_abilities),
        },
        "breedingData": {
            "canBreed": breeding.can_breed,
            "breedingCooldown": breeding.breeding_cooldown,
            "timesBred": breeding.times_bred,
            "maxBreedingTimes": breeding.max_breeding_times,
            "compatibleSpecies": list(breeding.compatible_species),
            "fertilityRate": breeding.fertility_rate,
        },
        "lineage": {
            "parent1": lineage.parent1,
            "parent2": lineage.parent2,
            "generation": lineage.generation,
            "familyTree": list(lineage.family_tree),
        },
        "metadata": {
            "generationTimeMs": profile.metadata.generation_time_ms,
            "version": profile.metadata.version,
            "generatedAt": profile.metadata.generated_at,
        },
    }


def _marking_animation_from_dict(data: Optional[Dict[str, Any]]) -> Optional[MarkingAnimation]:
    if not data:
        return None
    return MarkingAnimation(
        type=data["type"],
        speed=float(data["speed"]),
        intensity=float(data["intensity"]),
        sync_mode=data["syncMode"],
    )


def _feature_animation_from_dict(data: Optional[Dict[str, Any]]) -> Optional[FeatureAnimation]:
    if not data:
        return None
    return FeatureAnimation(
        type=data["type"],
        duration_ms=float(data["durationMs"]),
        easing=data["easing"],
        loop=bool(data["loop"]),
    )


def profile_from_dict(data: Dict[str, Any]) -> GeneticProfile:
    """Rebuild a profile from ``profile_to_dict`` output.

    Raises:
        KeyError: If a required field is missing
        InvalidOverrideError: If the stored rarity is not a recognised tier
        ValueError: If the schema version is newer than this code understands
    """
    schema_version = data.get("schemaVersion", PROFILE_SCHEMA_VERSION)
    if schema_version > PROFILE_SCHEMA_VERSION:
        raise ValueError(
            f"Profile schema version {schema_version} is newer than supported "
            f"version {PROFILE_SCHEMA_VERSION}"
        )

    traits = data["traits"]
    features = traits["features"]
    genome = traits["colorGenome"]
    gradient = genome["gradient"]
    markings = features["markings"]
    expression = traits.get("expression") or {}
    personality = data["personality"]
    cosmic = data["cosmicAffinity"]
    breeding = data.get("breedingData") or {}
    lineage = data.get("lineage") or {}
    metadata = data["metadata"]

    return GeneticProfile(
        id=data["id"],
        species=data["species"],
        rarity=parse_rarity(data["rarity"]),
        traits=Traits(
            body_shape=BodyShape(
                type=traits["bodyShape"]["type"],
                intensity=float(traits["bodyShape"]["intensity"]),
            ),
            color_genome=ColorGenome(
                primary=int(genome["primary"]),
                secondary=int(genome["secondary"]),
                accent=int(genome["accent"]),
                gradient=Gradient(
                    type=gradient["type"],
                    start_color=int(gradient["startColor"]),
                    end_color=int(gradient["endColor"]),
                    intensity=float(gradient["intensity"]),
                    angle=float(gradient["angle"]),
                ),
                shimmer_intensity=float(genome["shimmerIntensity"]),
                color_complexity=float(genome["colorComplexity"]),
                harmonic_resonance=float(genome["harmonicResonance"]),
                mixing_pattern=genome["mixingPattern"],
                dominant_hue=int(genome["dominantHue"]),
                saturation_level=float(genome["saturationLevel"]),
                mutation_flags=frozenset(genome.get("mutationFlags", ())),
            ),
            features=Features(
                eyes=Eyes(
                    size=features["eyes"]["size"],
                    color=int(features["eyes"]["color"]),
                    glow=float(features["eyes"]["glow"]),
                ),
                wings=Wings(
                    type=features["wings"]["type"],
                    span=float(features["wings"]["span"]),
                    shimmer=float(features["wings"]["shimmer"]),
                ),
                markings=Markings(
                    pattern=markings["pattern"],
                    intensity=float(markings["intensity"]),
                    distribution=markings["distribution"],
                    color_variant=markings["colorVariant"],
                    scale=float(markings.get("scale", 0.0)),
                    opacity=float(markings.get("opacity", 0.0)),
                    animation=_marking_animation_from_dict(markings.get("animation")),
                ),
                special_features=tuple(
                    SpecialFeature(
                        type=feature["type"],
                        intensity=float(feature["intensity"]),
                        variant=feature["variant"],
                        animation=_feature_animation_from_dict(feature.get("animation")),
                    )
                    for feature in features.get("specialFeatures", ())
                ),
            ),
            expression=Expression(
                color_intensity=float(expression.get("colorIntensity", 0.0)),
                feature_complexity=float(expression.get("featureComplexity", 0.0)),
                effect_strength=float(expression.get("effectStrength", 0.0)),
            ),
        ),
        personality=Personality(
            core=personality["core"],
            description=personality.get("description", ""),
            quirks=tuple(personality.get("quirks", ())),
            social_level=float(personality["socialLevel"]),
            independence=float(personality["independence"]),
            emotion_modifiers=MappingProxyType(dict(personality.get("emotionModifiers", {}))),
            care_preferences=MappingProxyType(dict(personality.get("carePreferences", {}))),
        ),
        cosmic_affinity=CosmicAffinity(
            element=cosmic["element"],
            description=cosmic.get("description", ""),
            power_level=float(cosmic["powerLevel"]),
            visual_effects=tuple(cosmic.get("visualEffects", ())),
            special_abilities=tuple(cosmic.get("specialAbilities", ())),
        ),
        metadata=GenerationMetadata(
            generation_time_ms=float(metadata["generationTimeMs"]),
            version=metadata["version"],
            generated_at=int(metadata.get("generatedAt", 0)),
        ),
        breeding_data=BreedingData(
            can_breed=bool(breeding.get("canBreed", True)),
            breeding_cooldown=int(breeding.get("breedingCooldown", 0)),
            times_bred=int(breeding.get("timesBred", 0)),
            max_breeding_times=int(breeding.get("maxBreedingTimes", 5)),
            compatible_species=tuple(breeding.get("compatibleSpecies", (data["species"],))),
            fertility_rate=float(breeding.get("fertilityRate", 1.0)),
        ),
        lineage=Lineage(
            parent1=lineage.get("parent1"),
            parent2=lineage.get("parent2"),
            generation=int(lineage.get("generation", 0)),
            family_tree=tuple(lineage.get("familyTree", ())),
        ),
    )
