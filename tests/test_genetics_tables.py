"""Tests for static genetics tables and their validation."""

import dataclasses

import pytest

from hatchery.config.features import FEATURES
from hatchery.config.rarity import RARITY_ORDER, Rarity
from hatchery.config.species import SPECIES_TEMPLATES
from hatchery.config.tables import DEFAULT_TABLES
from hatchery.exceptions import ConfigurationError, HatcheryError
from hatchery.util.selection import weights_sum_to_one


class TestDefaultTables:
    """The shipped tables must be internally consistent."""

    def test_default_tables_are_valid(self):
        assert DEFAULT_TABLES.validate() == []

    def test_species_weights_sum_to_one(self):
        assert weights_sum_to_one([t.weight for t in DEFAULT_TABLES.species])

    def test_rarity_weights_sum_to_one(self):
        assert weights_sum_to_one([w for _, w in DEFAULT_TABLES.rarity_weights])

    def test_eye_size_weights_sum_to_one(self):
        assert weights_sum_to_one([w for _, w in DEFAULT_TABLES.eyes.sizes])

    def test_species_order_is_stable(self):
        assert [t.species_id for t in DEFAULT_TABLES.species] == [
            "stellarWyrm",
            "crystalDrake",
            "nebulaSprite",
        ]

    def test_rarity_weights_are_ordered(self):
        assert [tier for tier, _ in DEFAULT_TABLES.rarity_weights] == list(RARITY_ORDER)
        assert dict(DEFAULT_TABLES.rarity_weights)[Rarity.LEGENDARY] == pytest.approx(0.02)

    def test_every_tendency_and_affinity_resolves(self):
        for template in DEFAULT_TABLES.species:
            for trait in template.personality_tendencies:
                assert DEFAULT_TABLES.personality(trait).quirks
            for element in template.cosmic_affinities:
                assert DEFAULT_TABLES.affinity(element).palette

    def test_mappings_are_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_TABLES.personalities["grumpy"] = None
        with pytest.raises(TypeError):
            DEFAULT_TABLES.personality("wise").care_preferences["rest"] = 0.0

    def test_rarity_ranks_ascend(self):
        assert [tier.rank for tier in RARITY_ORDER] == [0, 1, 2, 3]
        assert Rarity.LEGENDARY == "legendary"

    def test_feature_fallback_tables(self):
        assert FEATURES.variants_for("soft_glow") == FEATURES.default_variants
        assert FEATURES.animations_for("aurora_aura") == ("flow", "pulse", "wave", "shimmer")


class TestLookups:
    """Missing keys surface as ConfigurationError."""

    def test_unknown_personality(self):
        with pytest.raises(ConfigurationError, match="grumpy"):
            DEFAULT_TABLES.personality("grumpy")

    def test_unknown_affinity(self):
        with pytest.raises(ConfigurationError, match="plasma"):
            DEFAULT_TABLES.affinity("plasma")

    def test_missing_rarity_tier(self):
        tables = dataclasses.replace(DEFAULT_TABLES, rarities=DEFAULT_TABLES.rarities[:2])
        with pytest.raises(ConfigurationError):
            tables.rarity(Rarity.LEGENDARY)

    def test_configuration_error_is_hatchery_error(self):
        assert issubclass(ConfigurationError, HatcheryError)

    def test_cosmic_palette_concatenates_in_order(self):
        palette = DEFAULT_TABLES.cosmic_palette(("moon", "crystal"))
        assert palette == DEFAULT_TABLES.affinity("moon").palette + DEFAULT_TABLES.affinity("crystal").palette


class TestValidation:
    """Broken tables are reported, not silently used."""

    def test_species_weights_off_by_more_than_tolerance(self):
        broken = tuple(
            dataclasses.replace(t, weight=0.5) if t.species_id == "nebulaSprite" else t
            for t in SPECIES_TEMPLATES
        )
        tables = dataclasses.replace(DEFAULT_TABLES, species=broken)
        issues = tables.validate()
        assert any("tables.species" in issue and "sum" in issue for issue in issues)
        with pytest.raises(ConfigurationError):
            tables.require_valid()

    def test_unknown_personality_tendency(self):
        broken = (dataclasses.replace(SPECIES_TEMPLATES[0], personality_tendencies=("grumpy",)),)
        broken += SPECIES_TEMPLATES[1:]
        issues = dataclasses.replace(DEFAULT_TABLES, species=broken).validate()
        assert any("grumpy" in issue for issue in issues)

    def test_unknown_cosmic_affinity(self):
        broken = (dataclasses.replace(SPECIES_TEMPLATES[0], cosmic_affinities=("plasma",)),)
        broken += SPECIES_TEMPLATES[1:]
        issues = dataclasses.replace(DEFAULT_TABLES, species=broken).validate()
        assert any("plasma" in issue for issue in issues)

    def test_missing_rarity_tier_is_reported(self):
        tables = dataclasses.replace(DEFAULT_TABLES, rarities=DEFAULT_TABLES.rarities[:3])
        issues = tables.validate()
        assert any("one profile per tier" in issue for issue in issues)

    def test_empty_feature_pool_with_positive_chance(self):
        rare = dataclasses.replace(DEFAULT_TABLES.rarity(Rarity.RARE), feature_pool=())
        rarities = tuple(rare if p.tier is Rarity.RARE else p for p in DEFAULT_TABLES.rarities)
        issues = dataclasses.replace(DEFAULT_TABLES, rarities=rarities).validate()
        assert any("feature_pool" in issue for issue in issues)
