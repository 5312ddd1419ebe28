"""Tests for hatchery.color module."""

import random

import pytest

from hatchery import color
from tests.fakes.scripted_rng import ConstantRandom


class TestPacking:
    """Tests for packing, unpacking and formatting colors."""

    def test_unpack_splits_channels(self):
        assert color.unpack_rgb(0x81C784) == (0x81, 0xC7, 0x84)

    def test_pack_clamps_out_of_range_channels(self):
        assert color.pack_rgb(-20, 300, 128) == 0x00FF80

    def test_pack_rounds_half_up(self):
        assert color.pack_rgb(2.5, 0.4, 254.5) == 0x0300FF

    def test_to_hex(self):
        assert color.to_hex(0x81C784) == "#81c784"
        assert color.to_hex(0x000001) == "#000001"


class TestBlend:
    """Tests for linear channel blending."""

    def test_blend_boundaries_return_endpoints(self):
        """Ratio 0 gives the first color, ratio 1 the second, for any pair."""
        rng = random.Random(7)
        for _ in range(1000):
            c1 = rng.randrange(0x1000000)
            c2 = rng.randrange(0x1000000)
            assert color.blend(c1, c2, 0.0) == c1
            assert color.blend(c1, c2, 1.0) == c2

    def test_blend_midpoint(self):
        assert color.blend(0x000000, 0xFEFEFE, 0.5) == 0x7F7F7F

    def test_blend_stays_in_range(self):
        rng = random.Random(11)
        for _ in range(200):
            blended = color.blend(rng.randrange(0x1000000), rng.randrange(0x1000000), rng.random())
            assert 0 <= blended <= 0xFFFFFF


class TestMutateAndEnhance:
    """Tests for random mutation and rarity enhancement."""

    def test_midpoint_draw_leaves_color_unchanged(self):
        assert color.mutate(0x81C784, 0.5, ConstantRandom(0.5)) == 0x81C784

    def test_mutation_clamps_low(self):
        assert color.mutate(0x000000, 1.0, ConstantRandom(0.0)) == 0x000000

    def test_mutation_clamps_high(self):
        assert color.mutate(0xFFFFFF, 1.0, ConstantRandom(0.99)) == 0xFFFFFF

    def test_mutation_shifts_all_channels_together(self):
        mutated = color.mutate(0x808080, 0.4, ConstantRandom(0.9))
        r, g, b = color.unpack_rgb(mutated)
        assert r == g == b
        assert r > 0x80

    def test_enhance_zero_intensity_is_identity(self):
        assert color.enhance(0x123456, 0.0) == 0x123456

    def test_enhance_brightens_by_fifty_per_unit(self):
        assert color.enhance(0x101010, 0.2) == 0x1A1A1A

    def test_enhance_caps_at_white(self):
        assert color.enhance(0xFFFFFF, 0.3) == 0xFFFFFF


class TestHsl:
    """Tests for HSL conversion."""

    @pytest.mark.parametrize(
        "rgb,hue",
        [(0xFF0000, 0.0), (0x00FF00, 120.0), (0x0000FF, 240.0), (0xFFFF00, 60.0)],
    )
    def test_primary_hues(self, rgb, hue):
        h, s, l = color.rgb_to_hsl(rgb)
        assert h == pytest.approx(hue)
        assert s == pytest.approx(1.0)
        assert l == pytest.approx(0.5)

    def test_grey_has_no_saturation(self):
        h, s, _ = color.rgb_to_hsl(0x808080)
        assert h == 0.0
        assert s == 0.0

    def test_hue_always_in_range(self):
        rng = random.Random(3)
        for _ in range(500):
            h, s, l = color.rgb_to_hsl(rng.randrange(0x1000000))
            assert 0.0 <= h < 360.0
            assert 0.0 <= s <= 1.0
            assert 0.0 <= l <= 1.0

    @pytest.mark.parametrize("rgb", [0xFF0000, 0x00FF00, 0x0000FF, 0xFFFFFF, 0x000000, 0x808080])
    def test_hsl_round_trip_for_pure_colors(self, rgb):
        assert color.hsl_to_rgb(*color.rgb_to_hsl(rgb)) == rgb


class TestScores:
    """Tests for the derived color scores."""

    def test_complementary_pair_scores_point_four(self):
        assert color.harmonic_resonance([0xFF0000, 0x00FFFF]) == pytest.approx(0.4)

    def test_triadic_colors(self):
        assert color.harmonic_resonance([0xFF0000, 0x00FF00, 0x0000FF]) == pytest.approx(0.6)

    def test_analogous_colors(self):
        # Identical hues count as analogous
        assert color.harmonic_resonance([0xFF0000, 0xFF0000]) == pytest.approx(0.2)

    def test_single_color_has_no_resonance(self):
        assert color.harmonic_resonance([0xFF0000]) == 0.0

    def test_resonance_is_clamped(self):
        assert color.harmonic_resonance([0xFF0000] * 6) == 1.0

    def test_complexity_zero_for_identical_colors(self):
        assert color.color_complexity(0x81C784, 0x81C784, 0x81C784) == 0.0

    def test_complexity_in_unit_range(self):
        value = color.color_complexity(0x000000, 0xFFFFFF, 0x000000)
        assert 0.0 < value <= 1.0

    def test_dominant_hue(self):
        assert color.dominant_hue(0x0000FF) == 240
        assert color.dominant_hue(0xFF0000) == 0

    def test_saturation_level_is_mean(self):
        assert color.saturation_level([0xFF0000, 0x808080]) == pytest.approx(0.5)

    def test_saturation_level_empty(self):
        assert color.saturation_level([]) == 0.0

    def test_complementary_inverts_channels(self):
        assert color.complementary(0x123456) == 0xEDCBA9

    def test_distance(self):
        assert color.distance(0x000000, 0x000000) == 0.0
        assert color.distance(0x000000, 0x030400) == pytest.approx(5.0)
