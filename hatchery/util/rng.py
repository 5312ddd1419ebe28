"""RNG utilities for deterministic generation.

Every draw made by the genetics pipeline goes through ``rng.random()``. Anything
that exposes that method (``random.Random`` being the usual choice) can be
injected, and so can a bare zero-argument callable returning floats in [0, 1).

These helpers fail loudly when no random source is available rather than
silently creating an unseeded fallback.
"""

import random
from typing import Any, Callable, Optional, Protocol, Union, runtime_checkable


class MissingRNGError(RuntimeError):
    """Raised when an RNG is required but not available.

    This indicates a wiring bug in the caller: generation always needs an
    explicit random source, a seed, or a generator-level RNG factory.
    """

    pass


@runtime_checkable
class RandomSource(Protocol):
    """Uniform random source in [0, 1)."""

    def random(self) -> float: ...


RNGLike = Union[RandomSource, Callable[[], float]]


class CallableRandomSource:
    """Adapts a bare ``() -> float`` callable to the ``RandomSource`` protocol."""

    __slots__ = ("_fn",)

    def __init__(self, fn: Callable[[], float]) -> None:
        self._fn = fn

    def random(self) -> float:
        return float(self._fn())

    def __repr__(self) -> str:
        return f"CallableRandomSource({self._fn!r})"


def as_random_source(rng: Optional[RNGLike], context: str) -> RandomSource:
    """Coerce *rng* to a ``RandomSource``, failing loudly if that is impossible.

    Args:
        rng: An object with a ``random()`` method, or a zero-argument callable
        context: Description of where this is called from (for error messages)

    Returns:
        A random source exposing ``random()``

    Raises:
        MissingRNGError: If rng is None or neither shape matches

    Example:
        source = as_random_source(lambda: 0.5, "tests")
        source.random()  # 0.5
    """
    if rng is None:
        raise MissingRNGError(
            f"RNG required: {context}. Pass an RNG, a seed, or configure an rng_factory."
        )
    if isinstance(rng, RandomSource):
        return rng
    if callable(rng):
        return CallableRandomSource(rng)
    raise MissingRNGError(
        f"Cannot use {type(rng).__name__} as an RNG (context: {context}). "
        "Expected an object with random() or a zero-argument callable."
    )


def rng_from_seed(seed: Any) -> random.Random:
    """Build a fresh, call-scoped ``random.Random`` from *seed*."""
    return random.Random(seed)


def uniform(rng: RandomSource, low: float, high: float) -> float:
    """Draw uniformly in [low, high) from a single ``rng.random()`` call."""
    return low + rng.random() * (high - low)
