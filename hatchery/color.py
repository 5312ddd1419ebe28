"""Color conversion and scoring utilities.

Colors are stored as packed ``0xRRGGBB`` integers. HSL is only used to score
hue relationships and saturation, never for storage.

Design Note:
    These are pure functions with no genetics dependencies (``mutate`` takes
    its random source as an argument). They can be tested in isolation.
"""

import math
from itertools import combinations
from typing import Iterable, Sequence, Tuple

from hatchery.util.rng import RandomSource

RGB = Tuple[int, int, int]

CHANNEL_MAX = 255

# Normaliser for the summed pairwise distance of three colors
_COMPLEXITY_NORMALISER = CHANNEL_MAX * 3 * 3

# Brightness added per unit of enhancement intensity
ENHANCEMENT_STEP = 50

# (target hue difference, tolerance, score) checked in order; first match wins
_HARMONY_RULES = (
    (180.0, 30.0, 0.4),  # complementary
    (120.0, 20.0, 0.3),  # triadic
)
_ANALOGOUS_LIMIT = 60.0
_ANALOGOUS_SCORE = 0.2


def _clamp_channel(value: float) -> int:
    # Half-up rounding (2.5 -> 3), not banker's rounding
    return max(0, min(CHANNEL_MAX, int(math.floor(value + 0.5))))


def unpack_rgb(color: int) -> RGB:
    """Split a packed color into its (R, G, B) channels."""
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def pack_rgb(r: float, g: float, b: float) -> int:
    """Pack channels into ``0xRRGGBB``, rounding and clamping each to [0, 255]."""
    return (_clamp_channel(r) << 16) | (_clamp_channel(g) << 8) | _clamp_channel(b)


def to_hex(color: int) -> str:
    """Format a packed color as ``#rrggbb``."""
    return f"#{color & 0xFFFFFF:06x}"


def blend(color1: int, color2: int, ratio: float) -> int:
    """Linearly interpolate each channel; ratio 0 gives color1, 1 gives color2."""
    r1, g1, b1 = unpack_rgb(color1)
    r2, g2, b2 = unpack_rgb(color2)
    return pack_rgb(
        r1 * (1 - ratio) + r2 * ratio,
        g1 * (1 - ratio) + g2 * ratio,
        b1 * (1 - ratio) + b2 * ratio,
    )


def mutate(color: int, strength: float, rng: RandomSource) -> int:
    """Shift every channel by one random delta of up to ``strength * 255 / 2``.

    The delta is ``(rng.random() - 0.5) * strength * 255``; channels are clamped.
    """
    variation = (rng.random() - 0.5) * strength * CHANNEL_MAX
    r, g, b = unpack_rgb(color)
    return pack_rgb(r + variation, g + variation, b + variation)


def enhance(color: int, intensity: float) -> int:
    """Brighten every channel by ``intensity * 50``, capped at 255."""
    if intensity == 0:
        return color
    boost = intensity * ENHANCEMENT_STEP
    r, g, b = unpack_rgb(color)
    return pack_rgb(r + boost, g + boost, b + boost)


def distance(color1: int, color2: int) -> float:
    """Euclidean distance in RGB space."""
    r1, g1, b1 = unpack_rgb(color1)
    r2, g2, b2 = unpack_rgb(color2)
    return math.sqrt((r2 - r1) ** 2 + (g2 - g1) ** 2 + (b2 - b1) ** 2)


def complementary(color: int) -> int:
    """Invert each channel (255 - value)."""
    r, g, b = unpack_rgb(color)
    return pack_rgb(CHANNEL_MAX - r, CHANNEL_MAX - g, CHANNEL_MAX - b)


def rgb_to_hsl(color: int) -> Tuple[float, float, float]:
    """Convert a packed color to (hue degrees in [0, 360), saturation, lightness).

    Example:
        >>> rgb_to_hsl(0xFF0000)
        (0.0, 1.0, 0.5)
    """
    r, g, b = (channel / CHANNEL_MAX for channel in unpack_rgb(color))
    high = max(r, g, b)
    low = min(r, g, b)
    diff = high - low
    total = high + low
    lightness = total / 2

    if diff == 0:
        return 0.0, 0.0, lightness

    saturation = diff / total if lightness < 0.5 else diff / (2 - total)
    if high == r:
        hue = (g - b) / diff + (6 if g < b else 0)
    elif high == g:
        hue = (b - r) / diff + 2
    else:
        hue = (r - g) / diff + 4
    return (hue / 6 * 360) % 360, saturation, lightness


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> int:
    """Convert hue degrees, saturation and lightness back to a packed color."""
    if saturation == 0:
        grey = lightness * CHANNEL_MAX
        return pack_rgb(grey, grey, grey)

    def channel(p: float, q: float, t: float) -> float:
        t %= 1.0
        if t < 1 / 6:
            return p + (q - p) * 6 * t
        if t < 1 / 2:
            return q
        if t < 2 / 3:
            return p + (q - p) * (2 / 3 - t) * 6
        return p

    h = (hue % 360) / 360
    q = lightness * (1 + saturation) if lightness < 0.5 else lightness + saturation - lightness * saturation
    p = 2 * lightness - q
    return pack_rgb(
        channel(p, q, h + 1 / 3) * CHANNEL_MAX,
        channel(p, q, h) * CHANNEL_MAX,
        channel(p, q, h - 1 / 3) * CHANNEL_MAX,
    )


def harmonic_resonance(colors: Sequence[int]) -> float:
    """Score how well *colors* follow color-wheel harmony rules, in [0, 1].

    Every unordered pair scores +0.4 when complementary, else +0.3 when
    triadic, else +0.2 when analogous (hue difference under 60 degrees).
    """
    if len(colors) < 2:
        return 0.0

    hues = [rgb_to_hsl(color)[0] for color in colors]
    score = 0.0
    for hue1, hue2 in combinations(hues, 2):
        diff = abs(hue1 - hue2)
        for target, tolerance, points in _HARMONY_RULES:
            if abs(diff - target) < tolerance:
                score += points
                break
        else:
            if diff < _ANALOGOUS_LIMIT:
                score += _ANALOGOUS_SCORE
    return min(1.0, score)


def color_complexity(primary: int, secondary: int, accent: int) -> float:
    """Summed pairwise RGB distance normalised by ``255 * 3 * 3``, clamped to [0, 1]."""
    total = distance(primary, secondary) + distance(primary, accent) + distance(secondary, accent)
    return min(1.0, total / _COMPLEXITY_NORMALISER)


def dominant_hue(color: int) -> int:
    """Rounded HSL hue of *color*, in [0, 360)."""
    return int(round(rgb_to_hsl(color)[0])) % 360


def saturation_level(colors: Iterable[int]) -> float:
    """Mean HSL saturation across *colors*."""
    saturations = [rgb_to_hsl(color)[1] for color in colors]
    if not saturations:
        return 0.0
    return sum(saturations) / len(saturations)
