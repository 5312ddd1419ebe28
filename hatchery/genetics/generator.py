"""Genetic profile assembly.

``CreatureGeneticsGenerator`` sequences the selectors and composers into one
synchronous pass and returns an immutable ``GeneticProfile``. Tables, config
and the random source are all injected; the generator never reaches for
module-level randomness.

Usage:
------
    generator = CreatureGeneticsGenerator()

    profile = generator.generate()                         # weighted rarity
    profile = generator.generate_with_rarity("legendary")  # forced rarity
    profile = generator.generate_with_seed(1234)           # reproducible draws

    # Explicit random source (anything with random(), or a () -> float callable)
    profile = generator.generate(rng=random.Random(7))
"""

import logging
import random
import threading
import time
from typing import Any, Callable, Dict, Optional, Union

from hatchery.config.genetics_config import GeneticsConfig
from hatchery.config.rarity import Rarity
from hatchery.config.tables import DEFAULT_TABLES, GeneticsTables
from hatchery.genetics.color_genome import synthesize_color_genome
from hatchery.genetics.cosmic import assign_cosmic_affinity
from hatchery.genetics.personality import assign_personality
from hatchery.genetics.profile import (
    BreedingData,
    GenerationMetadata,
    GeneticProfile,
    Lineage,
    Traits,
)
from hatchery.genetics.selectors import parse_rarity, select_rarity, select_species
from hatchery.genetics.traits import compose_body_shape, compose_expression, compose_features
from hatchery.telemetry.events import CreatureGeneratedEvent, GenerationObserver
from hatchery.util.rng import RandomSource, RNGLike, as_random_source, rng_from_seed, uniform

logger = logging.getLogger(__name__)

_BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
ID_STAMP_WIDTH = 4


def to_base36(value: int) -> str:
    if value < 0:
        raise ValueError("base36 encoding requires a non-negative value")
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36_DIGITS[remainder])
    return "".join(reversed(digits))


def build_profile_id(species: str, personality: str, color_intensity: float, stamp_ms: int) -> str:
    """Human-legible id: ``SPE-PER-<hex2 of intensity*100>-<base36 stamp tail>``.

    Example:
        >>> build_profile_id("crystalDrake", "wise", 0.5, 1_700_000_000_000)
        'CRY-WIS-32-3v28'
    """
    return "-".join(
        (
            species[:3].upper(),
            personality[:3].upper(),
            f"{int(color_intensity * 100):02x}",
            to_base36(stamp_ms)[-ID_STAMP_WIDTH:].rjust(ID_STAMP_WIDTH, "0"),
        )
    )


class CreatureGeneticsGenerator:
    """Generates complete genetic profiles from injected tables and randomness.

    Attributes:
        tables: Validated static tables (never mutated)
        config: Scalar generation knobs
        observer: Optional callback invoked once per successful generation
    """

    def __init__(
        self,
        tables: Optional[GeneticsTables] = None,
        config: Optional[GeneticsConfig] = None,
        *,
        rng_factory: Optional[Callable[[], RNGLike]] = random.Random,
        observer: Optional[GenerationObserver] = None,
        clock: Callable[[], float] = time.time,
        timer: Callable[[], float] = time.perf_counter,
    ) -> None:
        """Validate *tables* and prepare the generator.

        Args:
            tables: Static tables; defaults to the built-in Space-Mythic set
            config: Generation knobs; defaults to ``GeneticsConfig()``
            rng_factory: Builds a fresh random source for calls that pass
                neither an rng nor a seed. ``None`` makes an explicit rng mandatory.
            observer: Receives a ``CreatureGeneratedEvent`` after each success
            clock: Wall clock in seconds, used for ids and ``generated_at``
            timer: Monotonic clock in seconds, used for ``generation_time_ms``

        Raises:
            ConfigurationError: If the tables are inconsistent
        """
        self.tables = (tables if tables is not None else DEFAULT_TABLES).require_valid()
        self.config = config if config is not None else GeneticsConfig()
        self.observer = observer
        self._rng_factory = rng_factory
        self._clock = clock
        self._timer = timer
        self._stamp_lock = threading.Lock()
        self._last_stamp = 0

        logger.info(
            "Genetics generator ready: %d species, %d personalities, %d affinities",
            len(self.tables.species),
            len(self.tables.personalities),
            len(self.tables.affinities),
        )

    # =========================================================================
    # Entry points
    # =========================================================================

    def generate(
        self,
        rarity: Optional[Union[str, Rarity]] = None,
        rng: Optional[RNGLike] = None,
    ) -> GeneticProfile:
        """Generate one profile.

        Args:
            rarity: Optional tier override; must be a recognised tier
            rng: Random source for this call only

        Raises:
            InvalidOverrideError: If *rarity* is not a recognised tier
            ConfigurationError: If a table lookup fails
        """
        if rarity is not None:
            rarity = parse_rarity(rarity)
        source = self._resolve_rng(rng)
        return self._assemble(rarity, source)

    def generate_with_rarity(
        self, rarity: Union[str, Rarity], rng: Optional[RNGLike] = None
    ) -> GeneticProfile:
        """Generate a profile whose rarity is forced to *rarity*."""
        return self.generate(rarity=parse_rarity(rarity), rng=rng)

    def generate_with_seed(self, seed: Any) -> GeneticProfile:
        """Generate a profile from a call-scoped ``random.Random(seed)``.

        Two calls with the same seed produce profiles that differ only in
        ``id`` and ``metadata``.
        """
        return self.generate(rng=rng_from_seed(seed))

    def system_stats(self) -> Dict[str, Any]:
        """Table sizes and rarity levels, for diagnostics."""
        return {
            "species_count": len(self.tables.species),
            "personality_count": len(self.tables.personalities),
            "affinity_count": len(self.tables.affinities),
            "species": [template.species_id for template in self.tables.species],
            "rarity_levels": [tier.value for tier, _ in self.tables.rarity_weights],
            "version": self.config.version,
        }

    # =========================================================================
    # Assembly
    # =========================================================================

    def _resolve_rng(self, rng: Optional[RNGLike]) -> RandomSource:
        if rng is None and self._rng_factory is not None:
            rng = self._rng_factory()
        return as_random_source(rng, "CreatureGeneticsGenerator.generate")

    def _next_stamp(self, now_ms: int) -> int:
        """Strictly increasing millisecond stamp for ids."""
        with self._stamp_lock:
            stamp = max(now_ms, self._last_stamp + 1)
            self._last_stamp = stamp
        return stamp

    def _assemble(self, rarity_override: Optional[Rarity], rng: RandomSource) -> GeneticProfile:
        started = self._timer()
        tables = self.tables
        config = self.config

        template = select_species(tables, rng)
        rarity = select_rarity(tables, rng, rarity_override)

        expression = compose_expression(rarity, tables, rng)
        color_genome = synthesize_color_genome(template, rarity, tables, config, rng)
        body_shape = compose_body_shape(template, tables, rng)
        features = compose_features(template, rarity, tables, rng)
        personality = assign_personality(template, tables, config, rng)
        cosmic_affinity = assign_cosmic_affinity(template, rarity, tables, rng)
        breeding_data = BreedingData(
            max_breeding_times=config.max_breeding_times,
            compatible_species=(template.species_id,),
            fertility_rate=uniform(rng, *config.fertility_range),
        )

        now_ms = int(self._clock() * 1000)
        profile_id = build_profile_id(
            template.species_id,
            personality.core,
            expression.color_intensity,
            self._next_stamp(now_ms),
        )

        profile = GeneticProfile(
            id=profile_id,
            species=template.species_id,
            rarity=rarity,
            traits=Traits(
                body_shape=body_shape,
                color_genome=color_genome,
                features=features,
                expression=expression,
            ),
            personality=personality,
            cosmic_affinity=cosmic_affinity,
            metadata=GenerationMetadata(
                generation_time_ms=(self._timer() - started) * 1000.0,
                version=config.version,
                generated_at=now_ms,
            ),
            breeding_data=breeding_data,
            lineage=Lineage(),
        )
        self._publish(profile)
        return profile

    def _publish(self, profile: GeneticProfile) -> None:
        logger.debug(
            "Generated %s %s: id=%s personality=%s element=%s power=%.2f features=%s (%.3f ms)",
            profile.rarity.value,
            profile.species,
            profile.id,
            profile.personality.core,
            profile.cosmic_affinity.element,
            profile.cosmic_affinity.power_level,
            [feature.type for feature in profile.traits.features.special_features],
            profile.metadata.generation_time_ms,
        )
        if self.observer is not None:
            self.observer(
                CreatureGeneratedEvent(
                    profile_id=profile.id,
                    species=profile.species,
                    rarity=profile.rarity.value,
                    personality=profile.personality.core,
                    cosmic_element=profile.cosmic_affinity.element,
                    generated_at=profile.metadata.generated_at,
                )
            )
