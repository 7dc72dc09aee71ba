"""Weighted random outcome selection.

Picks an index from a weight vector with probability proportional to its
weight, without building a normalised probability table.

Algorithm
---------
With weights ``w_0 … w_{n−1}`` and ``T = Σ w_i`` (truncated to an
integer), draw ``r`` uniformly from ``{1, …, T}`` and return the first
index ``i`` whose cumulative weight reaches ``r``::

    i*  =  min { i : w_0 + … + w_i  ≥  r }

For integer weights index ``i`` is chosen with probability exactly
``w_i / T``.  If floating-point accumulation of fractional weights leaves
every cumulative sum short of ``r``, the last index is returned.

Randomness source
-----------------
Each :class:`WeightedRandom` owns a :class:`numpy.random.Generator`.  There
is no process-wide seed to mutate: production code builds an auto-seeded
instance, tests build one from a fixed seed.  Generators are not
thread-safe, so use one instance per thread.

Typical usage::

    from igaming.core.weighted_random import WeightedRandom

    picker = WeightedRandom()                 # OS entropy
    index = picker.generate([10, 30, 50, 10])

    picker = WeightedRandom(seed=42)          # reproducible sequence
    picker.generate_multiple([1, 1], 5)
"""

from __future__ import annotations

from typing import List, Optional, Sequence

import numpy as np

from igaming.core.errors import EmptyWeightsError, InvalidWeightsError
from igaming.core.rounding import round_half_up


def _total_weight(weights: Sequence[float]) -> float:
    return float(sum(weights))


def weight_probabilities(weights: Sequence[float]) -> List[float]:
    """Each weight as a percentage of the total, rounded to 2 decimals.

    Returns a list of zeros with the same length when the total is not
    positive (including the empty vector, which yields ``[]``).

    Examples::

        weight_probabilities([10, 30, 50, 10])  → [10.0, 30.0, 50.0, 10.0]
        weight_probabilities([1, 2])            → [33.33, 66.67]
        weight_probabilities([0, 0])            → [0.0, 0.0]
    """
    total = _total_weight(weights)
    if total <= 0:
        return [0.0] * len(weights)
    return [round_half_up(w / total * 100.0) for w in weights]


class WeightedRandom:
    """Cumulative-weight sampler bound to its own random generator.

    Args:
        seed: Seed for a fresh ``numpy`` generator.  ``None`` draws entropy
            from the OS.
        rng: An existing generator to draw from.  Takes precedence over
            ``seed``; useful when several components should share one
            reproducible stream.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        self._rng = rng if rng is not None else np.random.default_rng(seed)

    @classmethod
    def from_seed(cls, seed: int) -> "WeightedRandom":
        """Deterministic instance for tests and replays."""
        return cls(seed=seed)

    # ------------------------------------------------------------------
    # Sampling
    # ------------------------------------------------------------------

    def generate(self, weights: Sequence[float]) -> int:
        """Draw one index with probability proportional to its weight.

        Raises:
            EmptyWeightsError: If ``weights`` is empty.
            InvalidWeightsError: If the weights sum to zero or less.
        """
        return self._draw(weights, self._rng)

    def generate_multiple(self, weights: Sequence[float], count: int) -> List[int]:
        """``count`` independent draws from the same weights."""
        return [self.generate(weights) for _ in range(count)]

    def generate_with_seed(self, weights: Sequence[float], seed: int) -> int:
        """Draw one index from a generator seeded with ``seed``.

        Two calls with the same ``seed`` and ``weights`` always return the
        same index.  The draw uses a throwaway generator, so this
        instance's own stream is left exactly where it was; interleaving
        seeded and unseeded calls does not change the unseeded sequence.
        """
        return self._draw(weights, np.random.default_rng(seed))

    def probabilities(self, weights: Sequence[float]) -> List[float]:
        """See :func:`weight_probabilities`."""
        return weight_probabilities(weights)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    @staticmethod
    def _draw(weights: Sequence[float], rng: np.random.Generator) -> int:
        if len(weights) == 0:
            raise EmptyWeightsError("Weights cannot be empty.")

        total = _total_weight(weights)
        if total <= 0:
            raise InvalidWeightsError(
                f"Sum of weights must be greater than zero, got {total!r}."
            )

        # A positive total below 1 truncates to 0; the draw range starts at 1.
        upper = max(1, int(total))
        target = int(rng.integers(1, upper, endpoint=True))

        cumulative = 0.0
        for index, weight in enumerate(weights):
            cumulative += weight
            if target <= cumulative:
                return index

        return len(weights) - 1
