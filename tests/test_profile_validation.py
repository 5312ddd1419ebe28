"""Tests for generated profile validation."""

import dataclasses

import pytest

from hatchery.config.rarity import Rarity
from hatchery.genetics.validation import validate_profile


@pytest.fixture
def common_profile(generator):
    return generator.generate_with_rarity(Rarity.COMMON)


def _with_genome(profile, **changes):
    genome = dataclasses.replace(profile.traits.color_genome, **changes)
    traits = dataclasses.replace(profile.traits, color_genome=genome)
    return dataclasses.replace(profile, traits=traits)


def test_generated_profile_is_valid(common_profile):
    assert validate_profile(common_profile) == []


def test_color_out_of_range(common_profile):
    issues = validate_profile(_with_genome(common_profile, primary=0x1000000))
    assert any("color_genome.primary" in issue for issue in issues)


def test_locked_mutation_flag_on_common(common_profile):
    issues = validate_profile(_with_genome(common_profile, mutation_flags=frozenset({"reality_flux"})))
    assert any("reality_flux" in issue and "locked" in issue for issue in issues)


def test_score_out_of_range(common_profile):
    issues = validate_profile(_with_genome(common_profile, harmonic_resonance=1.5))
    assert any("harmonic_resonance" in issue for issue in issues)


def test_hue_out_of_range(common_profile):
    issues = validate_profile(_with_genome(common_profile, dominant_hue=360))
    assert any("dominant_hue" in issue for issue in issues)


def test_unknown_species(common_profile):
    issues = validate_profile(dataclasses.replace(common_profile, species="voidMoth"))
    assert any("unknown species" in issue for issue in issues)


def test_empty_personality_core(common_profile):
    personality = dataclasses.replace(common_profile.personality, core="")
    issues = validate_profile(dataclasses.replace(common_profile, personality=personality))
    assert any("personality.core" in issue for issue in issues)
