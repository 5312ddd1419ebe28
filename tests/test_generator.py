"""Tests for CreatureGeneticsGenerator assembly and entry points."""

import dataclasses
import random

import pytest

from hatchery.config.rarity import RARITY_ORDER, Rarity
from hatchery.config.species import COSMIC_GREEN, SPECIES_TEMPLATES
from hatchery.config.tables import DEFAULT_TABLES
from hatchery.exceptions import ConfigurationError, GeneticsError, InvalidOverrideError
from hatchery.genetics.generator import CreatureGeneticsGenerator, build_profile_id, to_base36
from hatchery.genetics.profile import GeneticProfile
from hatchery.util.rng import MissingRNGError
from tests.fakes.scripted_rng import ConstantRandom

# Matches the fixed clock of the `generator` fixture
FIXED_CLOCK_MS = 1_700_000_000_000


def _without_identity(profile: GeneticProfile) -> GeneticProfile:
    """Drop the fields that legitimately differ between reproducible runs."""
    return dataclasses.replace(profile, id="", metadata=None)


class TestGoldenHatch:
    """A constant 0.5 stream fixes every choice of the hatch."""

    def test_midpoint_stream(self, generator, midpoint_rng):
        profile = generator.generate(rng=midpoint_rng)

        assert profile.species == "crystalDrake"
        assert profile.rarity is Rarity.COMMON
        assert profile.traits.body_shape.type == "sturdy"
        assert profile.traits.features.eyes.size == "medium"
        assert profile.traits.color_genome.primary == COSMIC_GREEN
        assert profile.traits.color_genome.mutation_flags == frozenset()
        assert not profile.traits.features.markings.present
        assert profile.traits.features.special_features == ()
        assert profile.personality.core == "wise"
        assert profile.cosmic_affinity.element == "moon"
        assert profile.breeding_data.fertility_rate == pytest.approx(0.9)
        assert profile.id.startswith("CRY-WIS-32-")

    def test_midpoint_stream_is_repeatable(self, generator):
        first = generator.generate(rng=ConstantRandom(0.5))
        second = generator.generate(rng=ConstantRandom(0.5))
        assert _without_identity(first) == _without_identity(second)
        assert first.id != second.id

    def test_callable_rng(self, generator):
        profile = generator.generate(rng=lambda: 0.5)
        assert profile.species == "crystalDrake"


class TestRarityOverride:
    """Forced rarity always wins and bad tiers are rejected."""

    def test_legendary_override_honoured(self, generator):
        for seed in range(1000):
            profile = generator.generate_with_rarity("legendary", rng=random.Random(seed))
            assert profile.rarity == "legendary"

    def test_override_accepts_enum(self, generator):
        assert generator.generate(rarity=Rarity.RARE).rarity is Rarity.RARE

    def test_override_consumes_no_rarity_draw(self, generator):
        forced_rng = ConstantRandom(0.5)
        drawn_rng = ConstantRandom(0.5)
        forced = generator.generate_with_rarity("common", rng=forced_rng)
        drawn = generator.generate(rng=drawn_rng)
        assert _without_identity(forced) == _without_identity(drawn)
        assert forced_rng.calls == drawn_rng.calls - 1

    @pytest.mark.parametrize("bad", ["epic", "LEGENDARY", "", "mythic"])
    def test_unknown_override_rejected(self, generator, bad):
        with pytest.raises(InvalidOverrideError) as excinfo:
            generator.generate_with_rarity(bad, rng=random.Random(1))
        assert excinfo.value.value == bad
        assert "legendary" in excinfo.value.allowed

    def test_invalid_override_is_value_and_genetics_error(self):
        assert issubclass(InvalidOverrideError, ValueError)
        assert issubclass(InvalidOverrideError, GeneticsError)

    def test_rejected_override_does_not_notify(self):
        events = []
        generator = CreatureGeneticsGenerator(observer=events.append)
        with pytest.raises(InvalidOverrideError):
            generator.generate(rarity="epic")
        assert events == []


class TestStructure:
    """Every tier yields a complete profile."""

    @pytest.mark.parametrize("rarity", RARITY_ORDER)
    def test_required_fields_present(self, generator, rarity):
        for _ in range(100):
            profile = generator.generate_with_rarity(rarity)
            assert profile.rarity is rarity
            assert profile.traits.body_shape.type
            genome = profile.traits.color_genome
            for value in (genome.primary, genome.secondary, genome.accent):
                assert isinstance(value, int)
                assert 0 <= value <= 0xFFFFFF
            assert profile.personality.core
            assert profile.personality.quirks
            assert profile.cosmic_affinity.element
            assert profile.metadata.generation_time_ms >= 0.0
            assert profile.metadata.version == "1.0.0"
            assert profile.metadata.generated_at == FIXED_CLOCK_MS
            assert profile.lineage.generation == 0
            assert profile.breeding_data.compatible_species == (profile.species,)

    def test_profile_is_immutable(self, generator):
        profile = generator.generate()
        with pytest.raises(dataclasses.FrozenInstanceError):
            profile.species = "nebulaSprite"


class TestSeeds:
    def test_same_seed_same_profile(self, generator):
        first = generator.generate_with_seed(1234)
        second = generator.generate_with_seed(1234)
        assert _without_identity(first) == _without_identity(second)

    def test_different_seeds_differ(self, generator):
        profiles = {generator.generate_with_seed(seed).traits for seed in range(20)}
        assert len(profiles) > 1

    def test_seed_does_not_touch_global_random(self, generator):
        random.seed(5)
        expected = random.random()
        random.seed(5)
        generator.generate_with_seed(9)
        assert random.random() == expected


class TestIds:
    def test_build_profile_id(self):
        assert build_profile_id("crystalDrake", "wise", 0.5, 1_700_000_000_000) == "CRY-WIS-32-3v28"

    def test_id_hex_part_is_zero_padded(self):
        assert build_profile_id("nebulaSprite", "playful", 0.05, 36).split("-")[2] == "05"

    def test_short_stamp_is_padded(self):
        assert build_profile_id("stellarWyrm", "curious", 1.0, 35).endswith("-000z")

    def test_base36(self):
        assert to_base36(0) == "0"
        assert to_base36(35) == "z"
        assert to_base36(36) == "10"
        with pytest.raises(ValueError):
            to_base36(-1)

    def test_ids_unique_over_ten_thousand_hatches(self, generator):
        ids = [generator.generate().id for _ in range(10_000)]
        assert len(set(ids)) == len(ids)

    def test_ids_unique_with_real_clock(self):
        generator = CreatureGeneticsGenerator(rng_factory=lambda: ConstantRandom(0.5))
        ids = [generator.generate().id for _ in range(2_000)]
        assert len(set(ids)) == len(ids)


class TestRandomSources:
    def test_missing_rng_factory_requires_explicit_rng(self):
        generator = CreatureGeneticsGenerator(rng_factory=None)
        with pytest.raises(MissingRNGError):
            generator.generate()
        assert generator.generate(rng=ConstantRandom(0.5)).species == "crystalDrake"

    def test_unusable_rng_rejected(self, generator):
        with pytest.raises(MissingRNGError):
            generator.generate(rng=object())


class TestObserver:
    def test_observer_called_once_per_hatch(self):
        events = []
        generator = CreatureGeneticsGenerator(observer=events.append)
        profiles = [generator.generate(rng=random.Random(seed)) for seed in range(5)]
        assert [event.profile_id for event in events] == [p.id for p in profiles]
        assert events[0].species == profiles[0].species
        assert events[0].rarity == profiles[0].rarity.value
        assert events[0].personality == profiles[0].personality.core
        assert events[0].cosmic_element == profiles[0].cosmic_affinity.element

    def test_observer_errors_propagate(self):
        def explode(event):
            raise RuntimeError("observer failed")

        generator = CreatureGeneticsGenerator(observer=explode)
        with pytest.raises(RuntimeError, match="observer failed"):
            generator.generate(rng=random.Random(1))


class TestConfiguration:
    def test_broken_tables_fail_at_construction(self):
        broken = tuple(
            dataclasses.replace(t, weight=0.9) if t.species_id == "stellarWyrm" else t
            for t in SPECIES_TEMPLATES
        )
        with pytest.raises(ConfigurationError):
            CreatureGeneticsGenerator(dataclasses.replace(DEFAULT_TABLES, species=broken))

    def test_missing_personality_fails_at_construction(self):
        personalities = {
            name: trait for name, trait in DEFAULT_TABLES.personalities.items() if name != "wise"
        }
        with pytest.raises(ConfigurationError, match="wise"):
            CreatureGeneticsGenerator(dataclasses.replace(DEFAULT_TABLES, personalities=personalities))

    def test_system_stats(self, generator):
        stats = generator.system_stats()
        assert stats["species_count"] == 3
        assert stats["personality_count"] == 5
        assert stats["affinity_count"] == 5
        assert stats["rarity_levels"] == ["common", "uncommon", "rare", "legendary"]
