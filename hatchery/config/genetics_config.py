"""Runtime knobs for the genetics generator."""

from dataclasses import dataclass
from typing import Tuple

GENETICS_VERSION = "1.0.0"


@dataclass(frozen=True)
class GeneticsConfig:
    """Scalar configuration for one generator.

    Attributes:
        mutation_chance: Probability the body color mutates (wings use 0.7x)
        wing_mutation_factor: Multiplier on mutation_chance for the wing color
        color_mixing_range: Range the per-call mixing strength is drawn from
        body_mix_ratio: Blend ratio for secondary body mixing
        wing_mix_ratio: Blend ratio for wing mixing
        cosmic_eye_chance: Probability of blending a cosmic color into the eyes
        cosmic_eye_ratio: Blend ratio for the cosmic eye influence
        second_quirk_chance: Probability of a second personality quirk
        social_range: Range for socialLevel and independence draws
        gradient_intensity_range: Range for the gradient intensity
        fertility_range: Range for the breeding stub's fertility rate
        max_breeding_times: Breeding stub limit
        version: Stamped into every profile's metadata
    """

    mutation_chance: float = 0.15
    wing_mutation_factor: float = 0.7
    color_mixing_range: Tuple[float, float] = (0.1, 0.5)
    body_mix_ratio: float = 0.3
    wing_mix_ratio: float = 0.4
    cosmic_eye_chance: float = 0.3
    cosmic_eye_ratio: float = 0.25
    second_quirk_chance: float = 0.3
    social_range: Tuple[float, float] = (0.2, 0.8)
    gradient_intensity_range: Tuple[float, float] = (0.2, 0.8)
    fertility_range: Tuple[float, float] = (0.8, 1.0)
    max_breeding_times: int = 5
    version: str = GENETICS_VERSION
