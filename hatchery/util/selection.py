"""Weighted and uniform selection over ordered tables.

All helpers consume randomness exclusively through ``rng.random()`` so that a
constant or scripted stream drives them exactly, draw for draw.
"""

from typing import Callable, List, Sequence, TypeVar

from hatchery.util.rng import RandomSource

T = TypeVar("T")

# Tolerance used when checking that a weight table sums to 1.0
WEIGHT_SUM_TOLERANCE = 1e-6


def pick(entries: Sequence[T], weight_fn: Callable[[T], float], rng: RandomSource) -> T:
    """Pick one entry by cumulative weight.

    Draws ``r = rng.random() * total`` and returns the first entry whose
    cumulative weight is >= r. Falls back to the first entry when floating
    error leaves no match.

    Args:
        entries: Ordered, non-empty sequence of candidates
        weight_fn: Maps an entry to its (non-negative) weight
        rng: Random source

    Returns:
        The selected entry

    Raises:
        ValueError: If entries is empty
    """
    if not entries:
        raise ValueError("Cannot pick from an empty table")

    weights = [float(weight_fn(entry)) for entry in entries]
    r = rng.random() * sum(weights)
    cumulative = 0.0
    for entry, weight in zip(entries, weights):
        cumulative += weight
        if cumulative >= r:
            return entry
    return entries[0]


def pick_key(table: Sequence[tuple], rng: RandomSource):
    """Pick the key of an ordered ``(key, weight)`` table."""
    return pick(table, lambda item: item[1], rng)[0]


def choice(options: Sequence[T], rng: RandomSource) -> T:
    """Uniform choice over *options* using one ``rng.random()`` draw."""
    if not options:
        raise ValueError("Cannot choose from an empty sequence")
    index = min(int(rng.random() * len(options)), len(options) - 1)
    return options[index]


def sample(options: Sequence[T], count: int, rng: RandomSource) -> List[T]:
    """Draw up to *count* distinct items without replacement, in draw order."""
    pool = list(options)
    selected: List[T] = []
    while pool and len(selected) < count:
        index = min(int(rng.random() * len(pool)), len(pool) - 1)
        selected.append(pool.pop(index))
    return selected


def weights_sum_to_one(weights: Sequence[float], tolerance: float = WEIGHT_SUM_TOLERANCE) -> bool:
    """Check that *weights* sum to 1.0 within *tolerance*."""
    return abs(sum(weights) - 1.0) <= tolerance
