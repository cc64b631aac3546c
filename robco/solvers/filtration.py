"""
Filtration solvers (expected remaining candidates).

Idea:
  For guess g, the CURRENT candidates partition into buckets of sizes {c_i} by
  their commonality with g; the expected leftover after feedback is
      E[left | g] = (1/n) * sum_i c_i^2
  Minimize sum_i c_i^2. Tie-break: first candidate in pool order.

Two interchangeable implementations:
  - filtration:    pure Python, O(n^2 * L) per turn
  - filtration_np: builds the pairwise commonality matrix with numpy, which
                   pays off once the pool reaches a few hundred passwords
"""

from __future__ import annotations
from typing import List
from .base import BaseSolver, register
from robco.engine import recommend, recommend_matrix


@register
class FiltrationSolver(BaseSolver):
    id = "filtration"
    name = "Filtration Power"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = self.live_candidates(state)
        return recommend(candidates)


@register
class FiltrationNumpySolver(BaseSolver):
    id = "filtration_np"
    name = "Filtration Power (numpy matrix)"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = self.live_candidates(state)
        return recommend_matrix(candidates)
