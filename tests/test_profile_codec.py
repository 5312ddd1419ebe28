"""Tests for GeneticProfile serialization helpers."""

import random

import orjson
import pytest

from hatchery.config.rarity import Rarity
from hatchery.exceptions import InvalidOverrideError
from hatchery.genetics.profile_codec import (
    PROFILE_SCHEMA_VERSION,
    profile_from_dict,
    profile_to_dict,
)


@pytest.fixture
def legendary_profile(generator):
    return generator.generate_with_rarity(Rarity.LEGENDARY, rng=random.Random(8))


class TestProfileToDict:
    def test_top_level_keys(self, legendary_profile):
        data = profile_to_dict(legendary_profile)
        assert data["schemaVersion"] == PROFILE_SCHEMA_VERSION
        assert data["rarity"] == "legendary"
        assert set(data) >= {
            "id",
            "species",
            "rarity",
            "traits",
            "personality",
            "cosmicAffinity",
            "breedingData",
            "lineage",
            "metadata",
        }

    def test_nested_fields_use_client_names(self, legendary_profile):
        data = profile_to_dict(legendary_profile)
        genome = data["traits"]["colorGenome"]
        assert genome["primary"] == legendary_profile.traits.color_genome.primary
        assert genome["mutationFlags"] == sorted(legendary_profile.traits.color_genome.mutation_flags)
        assert data["traits"]["bodyShape"]["type"] == legendary_profile.traits.body_shape.type
        assert data["cosmicAffinity"]["powerLevel"] == legendary_profile.cosmic_affinity.power_level
        assert data["metadata"]["generationTimeMs"] == legendary_profile.metadata.generation_time_ms
        assert data["traits"]["features"]["markings"]["animation"]["syncMode"]

    def test_output_is_json_serializable(self, legendary_profile):
        encoded = orjson.dumps(profile_to_dict(legendary_profile))
        decoded = orjson.loads(encoded)
        assert decoded["personality"]["core"] == legendary_profile.personality.core
        assert isinstance(decoded["personality"]["carePreferences"], dict)


class TestProfileFromDict:
    def test_rebuilds_equal_profile_from_json(self, legendary_profile):
        decoded = orjson.loads(orjson.dumps(profile_to_dict(legendary_profile)))
        assert profile_from_dict(decoded) == legendary_profile

    def test_rebuilt_common_profile_without_markings(self, generator):
        profile = generator.generate(rng=lambda: 0.5)
        rebuilt = profile_from_dict(profile_to_dict(profile))
        assert rebuilt == profile
        assert not rebuilt.traits.features.markings.present

    def test_unknown_rarity_rejected(self, legendary_profile):
        data = profile_to_dict(legendary_profile)
        data["rarity"] = "epic"
        with pytest.raises(InvalidOverrideError):
            profile_from_dict(data)

    def test_newer_schema_rejected(self, legendary_profile):
        data = profile_to_dict(legendary_profile)
        data["schemaVersion"] = PROFILE_SCHEMA_VERSION + 1
        with pytest.raises(ValueError, match="newer"):
            profile_from_dict(data)

    def test_missing_required_field(self, legendary_profile):
        data = profile_to_dict(legendary_profile)
        del data["cosmicAffinity"]
        with pytest.raises(KeyError):
            profile_from_dict(data)
