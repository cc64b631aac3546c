"""
Worst-case (minimax) solver.

Idea:
  For each guess g, bucket the CURRENT candidates by commonality with g and
  look at the LARGEST bucket: that is how many candidates survive if the
  feedback is as unhelpful as possible. Pick the guess with the smallest
  worst bucket.
  Tie-break: lower filtration power, then first in pool order.

Useful when attempts are scarce (four on a terminal) and a guaranteed bound
matters more than the average.
"""

from __future__ import annotations
from typing import List
from .base import BaseSolver, register
from robco.engine.filtration import power_and_worst


@register
class WorstCaseSolver(BaseSolver):
    id = "worst_case"
    name = "Minimax Worst Bucket"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = self.live_candidates(state)
        if not candidates:
            raise ValueError("no candidates to guess from")

        best = None
        best_key = None
        for g in candidates:
            power, worst = power_and_worst(g, candidates)
            key = (worst, power)
            if best_key is None or key < best_key:
                best, best_key = g, key
        return best
