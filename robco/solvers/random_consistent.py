"""
Random Consistent solver.

Strategy:
  - Choose uniformly at random from the CURRENT candidate set (passwords
    still consistent with all feedback so far).

Notes:
  - Deterministic across runs with the same seed (via BaseSolver.rng).
  - This is a baseline to compare the filtration strategies against; it does
    not try to split the pool.
"""

from __future__ import annotations

from typing import List
from .base import BaseSolver, register


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = self.live_candidates(state)
        if not candidates:
            raise ValueError("no candidates to guess from")
        return candidates[self.rng.randrange(len(candidates))]
