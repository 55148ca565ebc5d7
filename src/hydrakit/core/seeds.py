"""
Seeded, repeatable random values for animation parameters.

``persistent_random`` hashes a seed to a float in [0, 1) that is the same on
every run, so a composition re-evaluated with the same seeds looks the same.
A seed may be a number, a zero-argument function the engine re-reads every
frame, or a (nested) sequence of either; the result has the same shape.

The hash is ``frac(sin(seed) * 10000)``. It is cheap and repeatable, not
uniform: large seeds lose fractional precision.
"""

import math
from typing import Any, Optional, Sequence, Tuple

import numpy as np

from hydrakit.config import DEFAULT_SEED_CONFIG, SeedConfig
from hydrakit.core.tagged import TaggedSequence, is_sequence, map_sequence, metadata_of


def _scalar_hash(seed: float, scale: float) -> float:
    if not math.isfinite(seed):
        return math.nan
    x = math.sin(seed) * scale
    return x - math.floor(x)


def persistent_random(seed: Any, config: Optional[SeedConfig] = None) -> Any:
    """
    Generate a repeatable random float in [0, 1) for a seed.

    Args:
        seed: A number, a zero-argument callable, a numpy array, or a
            sequence of seeds (nested arbitrarily).
        config: Hash constants; defaults to ``SeedConfig()``.

    Returns:
        A float for a number, a new zero-argument callable for a callable,
        an array of the same shape for an array, and a TaggedSequence with
        the input's metadata for a sequence.
    """
    cfg = config or DEFAULT_SEED_CONFIG

    if callable(seed):
        return lambda: persistent_random(seed(), cfg)

    if isinstance(seed, np.ndarray):
        with np.errstate(invalid="ignore"):
            x = np.sin(seed.astype(np.float64)) * cfg.hash_scale
            return x - np.floor(x)

    if is_sequence(seed):
        return map_sequence(seed, lambda s: persistent_random(s, cfg))

    return _scalar_hash(float(seed), cfg.hash_scale)


def offset_seed(seed: Any, amount: float) -> Any:
    """
    Shift a seed by ``amount`` while keeping its shape.

    Callables are wrapped so the offset is applied to each evaluation;
    sequences are offset elementwise with their metadata kept.
    """
    if callable(seed):
        return lambda: seed() + amount
    if isinstance(seed, np.ndarray):
        return seed + amount
    if is_sequence(seed):
        return map_sequence(seed, lambda s: offset_seed(s, amount))
    return seed + amount


def random_color(seed: Any, config: Optional[SeedConfig] = None) -> Tuple[Any, Any, Any]:
    """
    Generate a repeatable (r, g, b) for a seed.

    The red channel hashes the seed itself, green and blue hash the seed
    shifted by the configured offsets. Each channel has the shape
    ``persistent_random`` gives the seed, so ``osc().color(*random_color(t))``
    works for a number, a callable or a sequence ``t``.
    """
    cfg = config or DEFAULT_SEED_CONFIG
    green_offset, blue_offset = cfg.color_offsets
    return (
        persistent_random(seed, cfg),
        persistent_random(offset_seed(seed, green_offset), cfg),
        persistent_random(offset_seed(seed, blue_offset), cfg),
    )


_NOTHING = object()


# Unseeded helpers. These change on every call, pass ``rng`` to pin them.

def _rng(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return rng if rng is not None else np.random.default_rng()


def random_int(low: int, high: int, rng: Optional[np.random.Generator] = None) -> int:
    """Random integer in [low, high], both ends included."""
    if high < low:
        raise ValueError(f"high ({high}) must be >= low ({low})")
    return int(_rng(rng).integers(low, high, endpoint=True))


def random_array(
    length: int,
    low: int,
    high: int,
    rng: Optional[np.random.Generator] = None,
) -> list:
    """List of ``length`` random integers in [low, high]."""
    gen = _rng(rng)
    return [random_int(low, high, gen) for _ in range(length)]


def randomize(
    values: Sequence,
    sample_size: int = 100,
    prevent_consecutive_repeats: bool = True,
    rng: Optional[np.random.Generator] = None,
) -> TaggedSequence:
    """
    Sample ``sample_size`` elements from ``values`` with replacement.

    Args:
        values: Elements to draw from.
        sample_size: Number of draws.
        prevent_consecutive_repeats: Never draw the element just drawn.
        rng: Optional numpy generator.

    Returns:
        TaggedSequence of draws, carrying the metadata of ``values``.
    """
    if len(values) == 0:
        raise ValueError("Cannot sample from an empty sequence")

    pool = list(values)
    if prevent_consecutive_repeats and all(v == pool[0] for v in pool):
        raise ValueError(
            "Need at least two distinct values to avoid consecutive repeats"
        )

    gen = _rng(rng)
    result = TaggedSequence(attrs=metadata_of(values))
    last = _NOTHING
    for _ in range(sample_size):
        selected = pool[int(gen.integers(len(pool)))]
        while prevent_consecutive_repeats and last is not _NOTHING and selected == last:
            selected = pool[int(gen.integers(len(pool)))]
        result.append(selected)
        last = selected
    return result

