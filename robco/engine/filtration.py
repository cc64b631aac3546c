"""
Filtration power: expected remaining candidates after a guess.

Idea:
  Assume every live candidate is equally likely to be the secret. For a guess
  g, the candidates partition into buckets by commonality(c, g); if the secret
  lands in a bucket of size c_i, c_i candidates survive. So

      E[left | g] = sum_i (c_i / n) * c_i = (1/n) * sum_i c_i^2

  The 1/n factor is shared by every guess, so we compare the raw sum
  (the "filtration power"). Lower is better.

Cost:
  O(n^2 * L) for n candidates of length L. Past a few hundred candidates,
  precompute the pairwise matrix once (recommend_matrix) instead.

Ties go to the first minimum in the order the candidates are given.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, Sequence, Tuple

import numpy as np

from .commonality import commonality, commonality_matrix


def buckets(guess: str, candidates: Sequence[str]) -> Dict[int, int]:
    """Bucket sizes of `candidates` keyed by their commonality with `guess`."""
    return Counter(commonality(c, guess) for c in candidates)


def filtration_power(guess: str, candidates: Sequence[str]) -> int:
    """
    Sum over every hypothetical secret t of the number of candidates that
    would survive filtering with commonality(t, guess).
    """
    return sum(c * c for c in buckets(guess, candidates).values())


def power_and_worst(guess: str, candidates: Sequence[str]) -> Tuple[int, int]:
    """(filtration power, largest bucket) for `guess`."""
    b = buckets(guess, candidates)
    worst = max(b.values()) if b else 0
    return sum(c * c for c in b.values()), worst


def recommend(candidates: Sequence[str]) -> str:
    """
    Candidate with the lowest filtration power (first one on ties).

    Raises:
      ValueError if `candidates` is empty.
    """
    best = None
    best_power = None
    for g in candidates:
        p = filtration_power(g, candidates)
        if best_power is None or p < best_power:
            best, best_power = g, p
    if best is None:
        raise ValueError("cannot recommend from an empty candidate list")
    return best


def filtration_powers(matrix: np.ndarray) -> np.ndarray:
    """
    Filtration power of every row of a pairwise commonality matrix.

    Row g holds commonality(t, g) for every t; counting each value per row and
    summing the squared counts gives the same numbers as filtration_power.
    """
    n = matrix.shape[0]
    if n == 0:
        return np.zeros(0, dtype=np.int64)
    top = int(matrix.max())
    powers = np.zeros(n, dtype=np.int64)
    for k in range(top + 1):
        counts = (matrix == k).sum(axis=1, dtype=np.int64)
        powers += counts * counts
    return powers


def recommend_matrix(candidates: Sequence[str]) -> str:
    """
    Same result as recommend(), computed from the numpy pairwise matrix.

    np.argmin returns the first minimum, so ties resolve identically.
    """
    if len(candidates) == 0:
        raise ValueError("cannot recommend from an empty candidate list")
    powers = filtration_powers(commonality_matrix(candidates))
    return candidates[int(np.argmin(powers))]
